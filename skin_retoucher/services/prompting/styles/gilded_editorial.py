# skin_retoucher/services/prompting/styles/gilded_editorial.py
from skin_retoucher.data.constants import EnhanceStyle
from skin_retoucher.dto.retouch_prompt import (
    GlobalStyle,
    RetouchPromptDraft,
    RetouchPromptMetadata,
    RetouchStep,
)
from skin_retoucher.dto.style_template import StyleTemplate
from ..base_protocol import BASE_RETOUCH

PROMPT_GILDED_EDITORIAL = f"""You are a professional high-end beauty retoucher specializing in Gilded Editorial and commercial luxury photography optimized for dark skin tones. {BASE_RETOUCH} STYLE-SPECIFIC FOR GILDED EDITORIAL:

**1. Skin Tone and Uniformity:**
- Achieve a completely flawless, porcelain-smooth skin finish.
- Apply aggressive smoothing for **maximum skin uniformity** and seamless color transitions across the face, neck, and body.
- Remove ALL skin imperfections, spots, blemishes, and texture issues completely.
- **CRITICAL:** Preserve and enhance the natural richness and depth of the melanin-rich skin tone – DO NOT lighten, wash out, or reduce saturation.
- Ensure the skin appears deeply rich and vibrant, not flat or muted.

**2. Luminosity and Glow:**
- Create a **high-intensity luminous glow** effect.
- Apply strong, precise Dodge (lightening) to create dramatic, wet-look highlights on specific points:
  - Center of the nose bridge (high focus)
  - Tops of the cheekbones (intense focus)
  - Cupid's bow and center of the chin.
- The highlights must look distinct, sharp, and highly reflective, creating a 'gilded' appearance.

**3. Contouring (Heavy Burn):**
- Use **HEAVY Burn** (darkening) to dramatically sculpt and define the bone structure.
- Deepen shadows significantly under the cheekbones, along the jawline, and at the sides of the nose and temples.
- Create a deeply chiseled and defined facial structure for a high-fashion, commercial look.

**4. Eye Enhancement:**
- **CRITICAL Eye Whitening:** Make the sclera (eye whites) **PURE, INTENSE WHITE**—remove ALL redness, yellow, and any visible blood vessels.
- Brighten the eye area intensely to make the eyes stand out dramatically, matching the high contrast and definition of the makeup.
- DO NOT add special effects. Keep the iris and pupil natural.

**5. Texture Preservation:**
- Due to the aggressive smoothing required for this aesthetic, the texture preservation strength should be lowered *slightly* compared to Natural Pro, but still avoid a completely plastic look.
- Set texture preservation strength to Face ≥0.65 to maintain minimal pores/detail while achieving maximum smoothness.

**6. Final Check:** The result must be hyper-retouched, high-contrast, luminous, and dramatically contoured, strictly adhering to the original subject's features and non-skin elements."""


PROMPT_GILDED_EDITORIAL_JSON = RetouchPromptDraft(
    style_profile="Gilded Editorial",
    retouching_steps=(
        RetouchStep(
            step_name="Texture-Preservation",
            target_area="face skin",
            operation="preserve_texture",
            intensity=0.65,
            value="face >=0.65",
            details="Lowered slightly for maximum smoothness while keeping minimal pores and detail. Avoid a plastic look.",
        ),
        RetouchStep(
            step_name="Eye-Whitening",
            target_area="eye sclera",
            operation="whiten",
            intensity=0.95,
            details=(
                "Make the sclera PURE, INTENSE WHITE, removing all redness, yellow and visible blood vessels. "
                "Brighten the eye area intensely. No special effects; keep iris and pupil natural."
            ),
        ),
        RetouchStep(
            step_name="Uniform-Porcelain-Finish",
            target_area="face, neck, body skin",
            operation="smooth",
            intensity=0.85,
            details=(
                "Aggressive smoothing for maximum uniformity and seamless color transitions. Preserve the "
                "richness and depth of melanin-rich skin; do not lighten, wash out or desaturate."
            ),
        ),
        RetouchStep(
            step_name="Gilded-Highlight",
            target_area="nose bridge, cheekbone tops, cupid's bow, chin",
            operation="dodge",
            intensity=0.85,
            details="Strong, precise dodge for dramatic wet-look highlights that are sharp and highly reflective.",
        ),
        RetouchStep(
            step_name="Heavy-Contour",
            target_area="under cheekbones, jawline, sides of nose, temples",
            operation="burn",
            intensity=0.85,
            details="HEAVY burn to deepen shadows and create a deeply chiseled facial structure.",
        ),
    ),
    global_style=GlobalStyle(
        aesthetic_goal=(
            "High-end commercial luxury editorial: hyper-retouched, high-contrast, luminous and dramatically "
            "contoured, with a 'gilded' reflective glow."
        ),
        prohibitions=(
            "Do not lighten or desaturate melanin-rich skin. Do not add eye effects. Do not alter the "
            "subject's features, pose or any non-skin element."
        ),
        final_check=(
            "Result is hyper-retouched and luminous while strictly adhering to the original subject's "
            "features and non-skin elements."
        ),
    ),
    metadata=RetouchPromptMetadata(
        original_label="Gilded Editorial",
        description=(
            "High-end beauty. Maximum luminance, deep contouring, flawless skin, and dramatic highlights on dark skin."
        ),
    ),
)


STYLE_GILDED_EDITORIAL = StyleTemplate(
    id=EnhanceStyle.GILDED,
    label="Gilded Editorial",
    description="High-end beauty. Maximum luminance, deep contouring, flawless skin, and dramatic highlights on dark skin.",
    recommended=False,
    prompt=PROMPT_GILDED_EDITORIAL,
    prompt_json=PROMPT_GILDED_EDITORIAL_JSON,
    thumbnail="https://images.unsplash.com/photo-1534528741775-53994a69daeb?auto=format&fit=crop&q=80&w=100&h=100",
)
