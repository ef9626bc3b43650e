# skin_retoucher/services/prompting/styles/soft_beauty.py
from skin_retoucher.data.constants import EnhanceStyle
from skin_retoucher.dto.retouch_prompt import RetouchPromptDraft, RetouchPromptMetadata, RetouchStep
from skin_retoucher.dto.style_template import StyleTemplate
from ..base_protocol import BASE_RETOUCH

PROMPT_SOFT_BEAUTY = f"""Professional skin retouch using Soft Beauty style for fashion. {BASE_RETOUCH} STYLE-SPECIFIC: Apply moderate smoothing for seamless color transitions. Remove all blemishes and imperfections completely. Add a subtle luminous glow effect. Apply moderate Dodge & Burn to sculpt facial features softly - brighten T-zone, under-eye area, and chin; add gentle shadows under cheekbones and along jawline. Reduce texture prominence slightly for a polished, magazine-quality finish. The result should look soft, flawless, and radiant."""


PROMPT_SOFT_BEAUTY_JSON = RetouchPromptDraft(
    style_profile="Soft Beauty",
    retouching_steps=(
        RetouchStep(
            step_name="Texture-Preservation",
            target_area="all skin regions",
            operation="preserve_texture",
            intensity=0.7,
            details="Reduce texture prominence slightly for a polished, magazine-quality finish.",
        ),
        RetouchStep(
            step_name="Dodge-And-Burn",
            target_area="face",
            operation="dodge_and_burn",
            intensity=0.45,
            details=(
                "Moderate Dodge & Burn to sculpt features softly: brighten the T-zone, under-eye area and chin; "
                "gentle shadows under cheekbones and along the jawline."
            ),
        ),
        RetouchStep(
            step_name="Seamless-Transitions",
            target_area="face skin",
            operation="smooth",
            intensity=0.5,
            details="Moderate smoothing for seamless color transitions.",
        ),
        RetouchStep(
            step_name="Luminous-Glow",
            target_area="face skin",
            operation="glow",
            intensity=0.3,
            details="Add a subtle luminous glow. The result should look soft, flawless and radiant.",
        ),
    ),
    metadata=RetouchPromptMetadata(
        original_label="Soft Beauty",
        description="Fashion look. Smoother transitions, slight glow, flawless skin.",
    ),
)


STYLE_SOFT_BEAUTY = StyleTemplate(
    id=EnhanceStyle.SOFT,
    label="Soft Beauty",
    description="Fashion look. Smoother transitions, slight glow, flawless skin.",
    prompt=PROMPT_SOFT_BEAUTY,
    prompt_json=PROMPT_SOFT_BEAUTY_JSON,
    thumbnail="https://images.unsplash.com/photo-1531746020798-e6953c6e8e04?auto=format&fit=crop&q=80&w=100&h=100",
)
