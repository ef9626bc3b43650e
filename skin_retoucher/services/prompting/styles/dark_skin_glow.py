# skin_retoucher/services/prompting/styles/dark_skin_glow.py
from skin_retoucher.data.constants import EnhanceStyle
from skin_retoucher.dto.retouch_prompt import RetouchPromptDraft, RetouchPromptMetadata, RetouchStep
from skin_retoucher.dto.style_template import StyleTemplate
from ..base_protocol import BASE_RETOUCH

PROMPT_DARK_SKIN_GLOW = f"""Professional skin retouch OPTIMIZED FOR DARK/MELANIN-RICH SKIN TONES. {BASE_RETOUCH} STYLE-SPECIFIC FOR DARK SKIN: 
- Preserve and enhance the natural richness and depth of dark skin tones - DO NOT lighten or wash out the skin
- Remove hyperpigmentation, dark spots, and uneven patches while maintaining natural skin color
- Even out skin tone without reducing melanin richness
- Add a healthy, radiant glow that complements dark skin beautifully
- Apply Dodge & Burn specifically calibrated for dark skin: subtle highlights on forehead, nose bridge, cheekbones, and chin; gentle shadows under cheekbones and jawline that enhance without creating ashy appearance
- Remove any ashiness or grayish tones - skin should look vibrant and healthy
- Enhance the natural luminosity of dark skin
- Preserve the beautiful undertones (golden, red, blue) present in melanin-rich skin
- Clean and brighten eyes while keeping them natural
The result should celebrate and enhance dark skin's natural beauty with a flawless, glowing finish."""


PROMPT_DARK_SKIN_GLOW_JSON = RetouchPromptDraft(
    style_profile="Dark Skin Glow",
    retouching_steps=(
        RetouchStep(
            step_name="Skin-Tone-Evening",
            target_area="all skin regions",
            operation="even_tone",
            intensity=0.35,
            details=(
                "Remove hyperpigmentation, dark spots and uneven patches while maintaining natural skin color. "
                "Even out skin tone without reducing melanin richness. DO NOT lighten or wash out the skin."
            ),
        ),
        RetouchStep(
            step_name="Dodge-And-Burn",
            target_area="face",
            operation="dodge_and_burn",
            intensity=0.4,
            details=(
                "Calibrated for dark skin: subtle highlights on forehead, nose bridge, cheekbones and chin; "
                "gentle shadows under cheekbones and jawline without creating an ashy appearance."
            ),
        ),
        RetouchStep(
            step_name="Ashiness-Removal",
            target_area="all skin regions",
            operation="color_correct",
            intensity=0.6,
            details="Remove any ashiness or grayish tones. Skin should look vibrant and healthy.",
        ),
        RetouchStep(
            step_name="Melanin-Luminosity",
            target_area="face skin",
            operation="glow",
            intensity=0.5,
            details="Add a healthy, radiant glow and enhance the natural luminosity of dark skin.",
        ),
        RetouchStep(
            step_name="Undertone-Preservation",
            target_area="all skin regions",
            operation="preserve_color",
            details="Preserve the golden, red and blue undertones present in melanin-rich skin.",
        ),
    ),
    metadata=RetouchPromptMetadata(
        original_label="Dark Skin Glow",
        description="Optimized for melanin-rich skin. Even tone, radiant glow.",
    ),
)


STYLE_DARK_SKIN_GLOW = StyleTemplate(
    id=EnhanceStyle.DARK_SKIN,
    label="Dark Skin Glow",
    description="Optimized for melanin-rich skin. Even tone, radiant glow.",
    prompt=PROMPT_DARK_SKIN_GLOW,
    prompt_json=PROMPT_DARK_SKIN_GLOW_JSON,
    thumbnail="https://images.unsplash.com/photo-1531123897727-8f129e1688ce?auto=format&fit=crop&q=80&w=100&h=100",
)
