# skin_retoucher/services/prompting/styles/sculpted_glow.py
from skin_retoucher.data.constants import EnhanceStyle
from skin_retoucher.dto.retouch_prompt import RetouchPromptDraft, RetouchPromptMetadata, RetouchStep
from skin_retoucher.dto.style_template import StyleTemplate
from ..base_protocol import BASE_RETOUCH

PROMPT_SCULPTED_GLOW = f"""Professional skin retouch using Sculpted Glow/Glam style. {BASE_RETOUCH} STYLE-SPECIFIC: Remove ALL skin imperfections, spots, blemishes, and marks completely for flawless skin. Apply aggressive smoothing for maximum skin uniformity. Use HEAVY Dodge & Burn to dramatically sculpt and define facial features - strong highlights on forehead, nose bridge, cupid's bow, and cheekbone tops; deep shadows under cheekbones, along jawline, sides of nose, and temples. Create chiseled, defined bone structure. The look should be smooth, flawless, and sculpted like high-end cinematic glamour photography. EYES - CRITICAL: For eye whitening, ONLY remove redness and yellow tints from the sclera (white part of eyes). DO NOT add any special effects, glow, sparkle, catchlights, or artifacts to the eyes. DO NOT change the iris color, pupil size, or eye shape. Keep the eyes looking completely natural - just cleaner and whiter sclera."""


PROMPT_SCULPTED_GLOW_JSON = RetouchPromptDraft(
    style_profile="Sculpted Glow",
    retouching_steps=(
        RetouchStep(
            step_name="Selective-Blemish-Removal",
            target_area="face and body skin",
            operation="heal",
            intensity=1.0,
            details="Remove ALL skin imperfections, spots, blemishes and marks completely for flawless skin.",
        ),
        RetouchStep(
            step_name="Dodge-And-Burn",
            target_area="face",
            operation="dodge_and_burn",
            intensity=0.85,
            details=(
                "HEAVY Dodge & Burn: strong highlights on forehead, nose bridge, cupid's bow and "
                "cheekbone tops; deep shadows under cheekbones, along the jawline, sides of nose and temples."
            ),
        ),
        RetouchStep(
            step_name="Eye-Whitening",
            target_area="eye sclera",
            operation="whiten",
            intensity=0.6,
            details=(
                "ONLY remove redness and yellow tints from the sclera. DO NOT add glow, sparkle, "
                "catchlights or artifacts. DO NOT change iris color, pupil size or eye shape."
            ),
        ),
        RetouchStep(
            step_name="Aggressive-Smoothing",
            target_area="face skin",
            operation="smooth",
            intensity=0.75,
            details="Apply aggressive smoothing for maximum skin uniformity.",
        ),
        RetouchStep(
            step_name="Bone-Structure-Definition",
            target_area="cheekbones, jawline, temples",
            operation="contour",
            intensity=0.8,
            details="Create chiseled, defined bone structure like high-end cinematic glamour photography.",
        ),
    ),
    metadata=RetouchPromptMetadata(
        original_label="Sculpted Glow",
        description="Cinematic glamour. Flawless skin with defined features.",
    ),
)


STYLE_SCULPTED_GLOW = StyleTemplate(
    id=EnhanceStyle.SCULPTED,
    label="Sculpted Glow",
    description="Cinematic glamour. Flawless skin with defined features.",
    recommended=True,
    prompt=PROMPT_SCULPTED_GLOW,
    prompt_json=PROMPT_SCULPTED_GLOW_JSON,
    thumbnail="https://images.unsplash.com/photo-1529626455594-4ff0802cfb7e?auto=format&fit=crop&q=80&w=100&h=100",
)
