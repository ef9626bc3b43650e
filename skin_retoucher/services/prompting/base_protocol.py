# skin_retoucher/services/prompting/base_protocol.py
from skin_retoucher.data.constants import TASK_TYPE, DEFAULT_INPUT_IMAGE_ID
from skin_retoucher.dto.retouch_prompt import (
    GlobalStyle,
    OutputSettings,
    RetouchPromptDraft,
    RetouchPromptMetadata,
    RetouchStep,
)

# Professional Retouch Academy standards, applied to ALL styles.
BASE_RETOUCH = """
You are a professional high-end beauty retoucher trained to Retouch Academy standards.

GOAL: Produce natural, premium retouching suitable for fashion, editorial, and portrait photography. Enhance appearance without changing identity or creating artificial effects.

OUTPUT RULES:
- Return ONLY ONE IMAGE - the retouched version only
- NO side-by-side comparisons or before/after
- Maintain EXACT original dimensions and aspect ratio

CRITICAL RULES:
- Preserve natural skin texture, pores, fine lines, veins, and details
- Do NOT apply global blur or plastic smoothing
- Do NOT alter facial structure, body shape, or proportions
- Do NOT generate artificial texture
- Do NOT crop, resize, or change composition
- Do NOT add teeth or modify mouth/expressions
- All adjustments must be subtle and realistic

STEP 1 - PRECISE SEGMENTATION:
Detect and mask: Face skin, Neck, Ears, Hands, Arms, Shoulders, Legs, Eye sclera, Teeth (if visible)
EXCLUDE from edits: Hair, nails, clothing, background, lips shape, mouth shape

STEP 2 - SKIN TONE EVENING:
Even skin tone without flattening light or depth.
Per-region strength: Face (0.25-0.35), Neck (0.20-0.30), Hands (0.15-0.25), Body (0.10-0.20)
Reduce: Redness, blotchiness, uneven pigmentation
Preserve: Natural shadows, highlights, light direction

STEP 3 - TEXTURE PRESERVATION:
Preserve original skin texture and pores. NO blur, NO waxy finish, NO artificial grain.
Texture preservation: Face ≥0.80, Hands & Body ≥0.90

STEP 4 - DODGE & BURN:
Smooth uneven brightness using subtle local adjustments.
Correct: Dark spots, harsh highlights, patchy lighting, eye bag shadows, knuckle darkness
Use low-intensity only. Do not reshape or flatten skin.

STEP 5 - SELECTIVE BLEMISH REMOVAL:
REMOVE: Pimples, acne, dry patches, small scratches
PRESERVE: Moles, scars, veins, wrinkles, stretch marks

STEP 6 - CROSS-REGION HARMONY:
Balance skin tone between Face↔Neck, Face↔Hands, Face↔Body
Do not make all areas identical—only naturally consistent.

STEP 7 - EYE WHITENING:
Make sclera (eye whites) BRIGHT WHITE - remove all redness, yellow, blood vessels
Keep iris and pupils natural

STEP 8 - TEETH WHITENING (ONLY if teeth already visible):
If teeth are showing: make them WHITE, remove yellow/stains
If teeth NOT visible: DO NOTHING to mouth - no adding teeth, no opening mouth

STEP 9 - FINAL CHECK:
- Skin textured at 100% zoom
- No halos around eyes or mouth
- No color mismatches between face and body
- Identity fully preserved
- Natural and premium result
"""


BASE_RETOUCH_STEPS: tuple[RetouchStep, ...] = (
    RetouchStep(
        step_name="Precise-Segmentation",
        target_area="face skin, neck, ears, hands, arms, shoulders, legs, eye sclera, teeth (if visible)",
        operation="segment_and_mask",
        details=(
            "Detect and mask every skin region plus the eye sclera and visible teeth. "
            "EXCLUDE from edits: hair, nails, clothing, background, lip shape, mouth shape."
        ),
    ),
    RetouchStep(
        step_name="Skin-Tone-Evening",
        target_area="all skin regions",
        operation="even_tone",
        intensity=0.3,
        value="face 0.25-0.35, neck 0.20-0.30, hands 0.15-0.25, body 0.10-0.20",
        details=(
            "Even skin tone without flattening light or depth. Reduce redness, blotchiness "
            "and uneven pigmentation. Preserve natural shadows, highlights and light direction."
        ),
    ),
    RetouchStep(
        step_name="Texture-Preservation",
        target_area="all skin regions",
        operation="preserve_texture",
        intensity=0.8,
        value="face >=0.80, hands and body >=0.90",
        details="Preserve original skin texture and pores. NO blur, NO waxy finish, NO artificial grain.",
    ),
    RetouchStep(
        step_name="Dodge-And-Burn",
        target_area="face",
        operation="dodge_and_burn",
        intensity=0.2,
        details=(
            "Smooth uneven brightness using subtle local adjustments. Correct dark spots, harsh "
            "highlights, patchy lighting, eye bag shadows and knuckle darkness. Use low intensity "
            "only; do not reshape or flatten skin."
        ),
    ),
    RetouchStep(
        step_name="Selective-Blemish-Removal",
        target_area="face and body skin",
        operation="heal",
        details=(
            "REMOVE pimples, acne, dry patches and small scratches. "
            "PRESERVE moles, scars, veins, wrinkles and stretch marks."
        ),
    ),
    RetouchStep(
        step_name="Cross-Region-Harmony",
        target_area="face, neck, hands, body",
        operation="balance_tone",
        intensity=0.5,
        details=(
            "Balance skin tone between face and neck, face and hands, face and body. "
            "Do not make all areas identical, only naturally consistent."
        ),
    ),
    RetouchStep(
        step_name="Eye-Whitening",
        target_area="eye sclera",
        operation="whiten",
        intensity=0.7,
        details="Make the sclera bright white, removing redness, yellow tints and blood vessels. Keep iris and pupils natural.",
    ),
    RetouchStep(
        step_name="Teeth-Whitening",
        target_area="teeth (only if already visible)",
        operation="whiten",
        intensity=0.5,
        details=(
            "If teeth are showing, make them white and remove yellowing and stains. "
            "If teeth are NOT visible, do nothing to the mouth: no adding teeth, no opening the mouth."
        ),
    ),
    RetouchStep(
        step_name="Final-Check",
        target_area="entire image",
        operation="verify",
        details=(
            "Skin textured at 100% zoom; no halos around eyes or mouth; no color mismatches "
            "between face and body; identity fully preserved; natural and premium result."
        ),
    ),
)


BASE_GLOBAL_STYLE = GlobalStyle(
    aesthetic_goal=(
        "Natural, premium retouching suitable for fashion, editorial, and portrait photography. "
        "Enhance appearance without changing identity or creating artificial effects."
    ),
    prohibitions=(
        "No global blur or plastic smoothing. Do not alter facial structure, body shape or proportions. "
        "Do not generate artificial texture. Do not crop, resize or change composition. "
        "Do not add teeth or modify the mouth or expressions."
    ),
    final_check=(
        "Return exactly one image, the retouched version only, with the exact original "
        "dimensions and aspect ratio. The subject must be recognizably the same person."
    ),
)


BASE_RETOUCH_JSON = RetouchPromptDraft(
    task_type=TASK_TYPE,
    input_image_id=DEFAULT_INPUT_IMAGE_ID,
    style_profile="Retouch Academy Standard",
    output_settings=OutputSettings(),
    retouching_steps=BASE_RETOUCH_STEPS,
    global_style=BASE_GLOBAL_STYLE,
    metadata=RetouchPromptMetadata(
        original_label="Retouch Academy Base",
        description="Style-independent retouching protocol applied before any style override.",
    ),
)
