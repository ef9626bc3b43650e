# skin_retoucher/services/prompting/text_builder.py
from collections.abc import Callable

import structlog

from skin_retoucher.data.constants import EnhanceStyle
from skin_retoucher.dto.guardrail import GuardrailPolicy

from .library import PromptLibrary

logger = structlog.get_logger(__name__)

GUARDRAIL_SEPARATOR = "\n\n"

CUSTOM_EDIT_TEMPLATE = (
    "Retouch this image based on the following instruction: {custom_text}. "
    "Ensure you maintain high-quality skin texture and do not alter the background identity. "
    "Output the image at the highest possible resolution (4K/Ultra HD quality)."
)

ADDITIONAL_INSTRUCTION_TEMPLATE = " \nAdditional Instruction: {custom_text}"

# Appended to every free-text prompt.
FINAL_SUFFIX = (
    " IMPORTANT: Clean and whiten the eye whites (sclera) by removing redness and yellow tints. "
    "Brighten the eyes naturally. CRITICAL: Do NOT crop, resize, or change the aspect ratio. "
    "The output image MUST have the EXACT same dimensions and aspect ratio as the input. "
    "Output at highest quality."
)

RE_ENHANCE_INSTRUCTION = """INTENSIVE RE-ENHANCEMENT: This image needs additional retouching. Apply the following aggressively:
- Remove ALL remaining spots, blemishes, marks, and imperfections - leave NO visible flaws
- Smooth skin further for an ultra-flawless, poreless finish
- Apply stronger Dodge & Burn: brighten highlights on forehead, nose, cheekbones, chin; deepen shadows under cheekbones, jawline, and sides of nose for more sculpted look
- Even out any remaining skin tone inconsistencies
- Enhance facial contours and definition
- Make the skin look absolutely flawless while still natural
Keep the same aspect ratio and dimensions."""

BACKGROUND_REPLACEMENT_TEMPLATE = """BACKGROUND REPLACEMENT TASK - STRICT SUBJECT PRESERVATION

=== GUARDRAIL PROTOCOL ===
{protocol}

=== ABSOLUTE PROHIBITIONS ===
{prohibitions}

=== IDENTITY RULE ===
{identity_rule}

=== INPUT IMAGES ===
IMAGE 1 (FIRST): Portrait/photo of a person - THIS IS THE MASTER IMAGE
IMAGE 2 (SECOND): Reference background texture/scene

=== TASK ===
Extract ONLY the person/subject from IMAGE 1 and composite them onto the background from IMAGE 2.

=== CRITICAL: SUBJECT PRESERVATION (HIGHEST PRIORITY) ===
You MUST preserve the subject EXACTLY as they appear in IMAGE 1:
- SAME exact body - do NOT add, remove, or modify ANY body parts
- SAME exact clothing - do NOT add, remove, or change ANY clothing/accessories
- SAME exact pose - do NOT change arm position, hand position, head angle, body angle
- SAME exact framing - if the image shows half body, output half body. If full body, output full body.
- SAME exact crop - do NOT extend the image to show more of the person than visible in IMAGE 1
- SAME exact appearance - skin, hair, face, everything IDENTICAL to IMAGE 1

=== CRITICAL: DO NOT HALLUCINATE OR EXTEND ===
- If IMAGE 1 shows a person from waist up, output ONLY waist up - do NOT generate legs
- If IMAGE 1 shows a person from chest up, output ONLY chest up - do NOT generate torso/body
- If arms are cropped in IMAGE 1, keep them cropped - do NOT generate full arms
- NEVER add shadows that imply body parts not visible in IMAGE 1
- NEVER generate clothing, accessories, or body parts not in IMAGE 1
- The subject boundary in output MUST match IMAGE 1 exactly

=== CRITICAL: OUTPUT DIMENSIONS ===
The output MUST have EXACT SAME dimensions as IMAGE 1:
- SAME width in pixels
- SAME height in pixels
- SAME aspect ratio
- DO NOT use IMAGE 2's dimensions
- DO NOT crop or resize
- DO NOT add letterboxing or pillarboxing

=== BACKGROUND TREATMENT ===
Apply professional portrait blur (Sigma 85mm f/1.4 simulation):
- STRONG Gaussian blur on entire background
- Uniform blur - no sharp areas
- Use EXACT colors/scene from IMAGE 2
- DO NOT change or recolor the background
- Background should be recognizable as IMAGE 2, just blurred

=== EDGE BLENDING ===
- Smooth, natural edges around hair and body
- No visible cutout lines or halos
- Match lighting between subject and background
- Subtle contact shadows where appropriate (only where subject touches surfaces)

=== ABSOLUTE FORBIDDEN ===
- Generating body parts not in IMAGE 1 (legs, arms, torso, etc.)
- Adding clothing or accessories not in IMAGE 1
- Changing the subject's pose or position
- Extending the frame to show more of the person
- Using IMAGE 2's aspect ratio
- Creating a different person
- Adding any elements not present in IMAGE 1

OUTPUT: Single composite image with subject from IMAGE 1 (EXACTLY as shown, no additions) on blurred IMAGE 2 background, matching IMAGE 1 dimensions."""


PromptSegment = Callable[[PromptLibrary, EnhanceStyle | str, str | None], str]


def _guardrail_segment(library: PromptLibrary, style: EnhanceStyle | str, custom_text: str | None) -> str:
    return library.guardrail_text + GUARDRAIL_SEPARATOR


def _body_segment(library: PromptLibrary, style: EnhanceStyle | str, custom_text: str | None) -> str:
    if style == EnhanceStyle.CUSTOM:
        if custom_text:
            return CUSTOM_EDIT_TEMPLATE.format(custom_text=custom_text)
        # A custom edit without an instruction gets the default style.
        logger.info("Custom edit without instruction, using the default style.")
        template = library.styles.default
    else:
        template = library.resolve_style(style)

    body = template.prompt
    if custom_text:
        body += ADDITIONAL_INSTRUCTION_TEMPLATE.format(custom_text=custom_text)
    return body


def _suffix_segment(library: PromptLibrary, style: EnhanceStyle | str, custom_text: str | None) -> str:
    return FINAL_SUFFIX


# Order matters: the guardrail must come first.
PROMPT_SEGMENTS: tuple[PromptSegment, ...] = (
    _guardrail_segment,
    _body_segment,
    _suffix_segment,
)


def build_prompt(
    library: PromptLibrary,
    style: EnhanceStyle | str,
    custom_text: str | None = None,
) -> str:
    """
    Builds the free-text retouch prompt: guardrail, style or custom body, fixed suffix.
    """
    return "".join(segment(library, style, custom_text) for segment in PROMPT_SEGMENTS)


def build_re_enhance_prompt(library: PromptLibrary) -> str:
    """Prompt for a second, more aggressive pass over an already retouched image."""
    return build_prompt(library, library.styles.default.id, RE_ENHANCE_INSTRUCTION)


def _bullets(items: tuple[str, ...]) -> str:
    return "\n".join(f"- {item}" for item in items)


def build_background_prompt(policy: GuardrailPolicy) -> str:
    """Instruction for compositing the subject of one image onto the background of another."""
    return BACKGROUND_REPLACEMENT_TEMPLATE.format(
        protocol=policy.protocol,
        prohibitions=_bullets(policy.absolute_prohibitions),
        identity_rule=policy.identity_rule,
    )
