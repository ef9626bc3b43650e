# skin_retoucher/services/prompting/styles/ultra_glam.py
from skin_retoucher.data.constants import EnhanceStyle
from skin_retoucher.dto.retouch_prompt import (
    GlobalStyle,
    RetouchPromptDraft,
    RetouchPromptMetadata,
    RetouchStep,
)
from skin_retoucher.dto.style_template import StyleTemplate

# Ultra Glam replaces the base protocol text instead of embedding it.
PROMPT_ULTRA_GLAM = """You are an ELITE high-end beauty retoucher creating ULTRA GLAM - the most EXTREME, DRAMATIC retouching style for luxury editorial and high-fashion campaigns.

=== CRITICAL OUTPUT RULES ===
- Return ONLY ONE IMAGE - the retouched version only
- NO side-by-side comparisons or before/after
- Maintain EXACT original dimensions and aspect ratio
- DO NOT crop, resize, or change composition
- DO NOT alter facial structure, body shape, or proportions
- DO NOT add teeth or modify mouth/expressions

=== ULTRA GLAM STYLE - MAXIMUM INTENSITY ===

**STEP 1 - EXTREME SKIN PERFECTION (PRIORITY #1):**
This is the MOST IMPORTANT step. Apply AGGRESSIVE, HEAVY smoothing:
- Remove 100% of ALL visible pores - skin must look like smooth porcelain/glass
- Remove ALL spots, blemishes, marks, acne, texture, bumps - ZERO imperfections
- Apply HEAVY frequency separation smoothing - blur the skin significantly
- Create completely UNIFORM, FLAWLESS skin tone across entire face and body
- The skin should look AIRBRUSHED and IMPOSSIBLY SMOOTH - like a wax figure or CGI
- Smoothing strength: MAXIMUM (0.90+) - prioritize smoothness over texture
- This is NOT natural retouching - this is EXTREME glamour retouching
- CRITICAL: Preserve natural skin COLOR/tone - do NOT lighten or wash out dark skin

**STEP 2 - EXTREME LUMINOSITY & HIGHLIGHTS:**
Apply INTENSE dodge (lightening) to create dramatic WET-LOOK highlights:
- Center of forehead: STRONG bright highlight
- Nose bridge: MAXIMUM intensity highlight - almost white/reflective
- Cheekbone tops: EXTREME bright highlights - like light reflecting off glass
- Cupid's bow: Sharp bright highlight
- Chin center: Strong highlight
- Collar bones (if visible): Dramatic highlights
The highlights should look SHARP, INTENSE, and HIGHLY REFLECTIVE - like liquid gold on skin

**STEP 3 - EXTREME CONTOURING (HEAVY BURN):**
Apply MAXIMUM burn (darkening) for dramatic sculpting:
- Under cheekbones: DEEP, dramatic shadows - create hollow, chiseled look
- Jawline: Strong shadow definition - sharp, defined jaw
- Sides of nose: Deep shadows for narrow, sculpted nose
- Temples: Darkened for face shape definition
- Under chin/neck: Strong shadow for definition
- Hairline edges: Subtle darkening
The face should look EXTREMELY SCULPTED and CHISELED - high-fashion editorial intensity

**STEP 4 - EXTREME EYE ENHANCEMENT:**
- Make sclera (eye whites) PURE BRILLIANT WHITE - remove 100% of redness, yellow, blood vessels
- Eyes should be the BRIGHTEST, most STRIKING feature of the face
- Brighten entire eye area intensely - remove all darkness/shadows around eyes
- Make eyes POP dramatically
- Keep iris and pupil natural - NO special effects, sparkles, or catchlights

**STEP 5 - EXTREME TEETH WHITENING (only if teeth visible):**
- If teeth are showing: make them BRILLIANT WHITE - perfect Hollywood smile
- Remove ALL yellow, stains, discoloration completely
- If teeth NOT visible: DO NOT modify mouth at all

**STEP 6 - FINAL INTENSITY CHECK:**
Before outputting, verify:
- Skin is IMPOSSIBLY SMOOTH - no visible pores or texture (like airbrushed/CGI)
- Highlights are INTENSE and REFLECTIVE
- Contours are DEEP and DRAMATIC
- Eyes are BRILLIANT WHITE and striking
- Overall look is HYPER-RETOUCHED, HIGH-CONTRAST, ULTRA-GLAMOROUS
- This should look like a high-end beauty campaign or luxury magazine cover
- The retouching should be OBVIOUS and DRAMATIC - not subtle or natural

=== ABSOLUTE PROHIBITIONS - NEVER DO THESE ===
- NEVER change the person's POSE - arms, hands, head position, body angle must stay EXACTLY the same
- NEVER add ANY eye effects - no sparkles, no catchlights, no glow, no reflections, no shine effects
- NEVER change eye color, pupil size, or eye shape
- NEVER generate a new face or replace the subject
- NEVER alter facial structure, bone structure, or face shape
- NEVER change body proportions or body shape
- NEVER add or remove any body parts or features
- NEVER change the background or scene
- NEVER crop, resize, or change dimensions
- ONLY modify: skin texture/smoothness, skin tone evenness, highlights/shadows, eye whites (remove redness only), teeth whiteness (if visible)

The person in the output MUST be 100% recognizable as the EXACT same person in the EXACT same pose.

REMEMBER: This is ULTRA GLAM - the most extreme style. Do NOT hold back on smoothing and effects. The result should look like professional high-fashion retouching with maximum intensity."""


PROMPT_ULTRA_GLAM_JSON = RetouchPromptDraft(
    style_profile="Ultra Glam",
    retouching_steps=(
        RetouchStep(
            step_name="Texture-Preservation",
            target_area="all skin regions",
            operation="preserve_texture",
            intensity=0.1,
            details="Prioritize smoothness over texture. Preserve natural skin COLOR and tone only.",
        ),
        RetouchStep(
            step_name="Eye-Whitening",
            target_area="eye sclera and eye area",
            operation="whiten",
            intensity=1.0,
            details=(
                "PURE BRILLIANT WHITE sclera, remove 100% of redness, yellow and blood vessels. Brighten the "
                "entire eye area. NO sparkles, catchlights, glow or color change."
            ),
        ),
        RetouchStep(
            step_name="Teeth-Whitening",
            target_area="teeth (only if already visible)",
            operation="whiten",
            intensity=1.0,
            details="If teeth are showing make them BRILLIANT WHITE. If not visible, DO NOT modify the mouth at all.",
        ),
        RetouchStep(
            step_name="Final-Check",
            target_area="entire image",
            operation="verify",
            details=(
                "Skin impossibly smooth, highlights intense and reflective, contours deep and dramatic, eyes "
                "brilliant white. Same person in the exact same pose."
            ),
        ),
        RetouchStep(
            step_name="Extreme-Skin-Perfection",
            target_area="face and body skin",
            operation="frequency_separation_smooth",
            intensity=0.95,
            details=(
                "Remove 100% of visible pores and ALL blemishes, marks and bumps. Airbrushed, porcelain/glass "
                "finish with completely uniform tone. Do NOT lighten or wash out dark skin."
            ),
        ),
        RetouchStep(
            step_name="Extreme-Highlight",
            target_area="forehead center, nose bridge, cheekbone tops, cupid's bow, chin, collar bones",
            operation="dodge",
            intensity=1.0,
            details="INTENSE wet-look highlights, sharp and highly reflective like liquid gold on skin.",
        ),
        RetouchStep(
            step_name="Extreme-Contour",
            target_area="under cheekbones, jawline, sides of nose, temples, under chin, hairline edges",
            operation="burn",
            intensity=1.0,
            details="MAXIMUM burn for a hollow, chiseled, extremely sculpted high-fashion look.",
        ),
    ),
    global_style=GlobalStyle(
        aesthetic_goal=(
            "ULTRA GLAM: the most extreme, dramatic retouching for luxury editorial and high-fashion "
            "campaigns. Obvious, hyper-retouched, high-contrast."
        ),
        prohibitions=(
            "NEVER change pose, facial or bone structure, body proportions, eye color, pupil size or eye "
            "shape. NEVER add eye effects, body parts or features. NEVER change the background or crop. "
            "ONLY modify skin smoothness and tone, highlights and shadows, eye whites and visible teeth."
        ),
        final_check=(
            "The person in the output MUST be 100% recognizable as the EXACT same person in the EXACT same pose."
        ),
    ),
    metadata=RetouchPromptMetadata(
        original_label="Ultra Glam",
        description="Maximum intensity. Extreme luminance, ultra-deep contouring, glass-like skin perfection.",
    ),
)


STYLE_ULTRA_GLAM = StyleTemplate(
    id=EnhanceStyle.ULTRA_GLAM,
    label="Ultra Glam",
    description="Maximum intensity. Extreme luminance, ultra-deep contouring, glass-like skin perfection.",
    recommended=False,
    prompt=PROMPT_ULTRA_GLAM,
    prompt_json=PROMPT_ULTRA_GLAM_JSON,
    thumbnail="https://images.unsplash.com/photo-1502823403499-6ccfcf4fb453?auto=format&fit=crop&q=80&w=100&h=100",
)
