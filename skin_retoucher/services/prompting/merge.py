# skin_retoucher/services/prompting/merge.py
import structlog

from skin_retoucher.data.constants import DEFAULT_INPUT_IMAGE_ID, EnhanceStyle
from skin_retoucher.data.exceptions import IncompletePromptError
from skin_retoucher.dto.retouch_prompt import RetouchPromptDraft, RetouchPromptObject, RetouchStep

from .library import PromptLibrary
from .validator import validate_prompt

logger = structlog.get_logger(__name__)

# Replaced wholesale by the style when the style supplies them.
_OVERRIDABLE_FIELDS: tuple[str, ...] = (
    "task_type",
    "input_image_id",
    "style_profile",
    "output_settings",
    "global_style",
    "metadata",
)

_EMPTY_DRAFT = RetouchPromptDraft()


def merge_steps(
    base_steps: tuple[RetouchStep, ...] | None,
    style_steps: tuple[RetouchStep, ...] | None,
) -> tuple[RetouchStep, ...] | None:
    """
    Merges two step collections keyed by `step_name`.

    Base order is kept. A style step with an existing name replaces that step
    in place; new names are appended in style order. Returns None when
    neither side supplies steps.
    """
    if base_steps is None and style_steps is None:
        return None

    merged: dict[str, RetouchStep] = {}
    for step in (*(base_steps or ()), *(style_steps or ())):
        merged[step.step_name] = step
    return tuple(merged.values())


def merge_prompts(
    base: RetouchPromptDraft | None,
    style: RetouchPromptDraft | None,
) -> RetouchPromptDraft:
    """
    Layers a style override on top of a base protocol.

    Object-level fields come entirely from the style when it supplies them
    and from the base otherwise; there is no field-level blending inside
    `global_style` or `output_settings`. Steps are merged by name (see
    `merge_steps`). Missing inputs are treated as empty drafts.
    """
    base = base or _EMPTY_DRAFT
    style = style or _EMPTY_DRAFT

    fields = {}
    for name in _OVERRIDABLE_FIELDS:
        style_value = getattr(style, name)
        fields[name] = style_value if style_value is not None else getattr(base, name)

    fields["retouching_steps"] = merge_steps(base.retouching_steps, style.retouching_steps)
    return RetouchPromptDraft(**fields)


def finalize_prompt(draft: RetouchPromptDraft) -> RetouchPromptObject:
    """
    Converts a merged draft into a complete prompt.

    Raises:
        IncompletePromptError: the draft fails structural validation.
    """
    result = validate_prompt(draft)
    if not result.valid:
        raise IncompletePromptError(result.missing_fields)
    return RetouchPromptObject.model_validate(draft.model_dump(exclude_none=True))


def compose_prompt(
    library: PromptLibrary,
    style: EnhanceStyle | str,
    *,
    input_image_id: str = DEFAULT_INPUT_IMAGE_ID,
) -> RetouchPromptObject:
    """
    Builds the structured prompt for one retouch request.

    The custom edit style has no structured template, so it composes the
    base protocol alone under its own profile name. Any other id goes through
    the library's style lookup, including its fallback policy.
    """
    if style == EnhanceStyle.CUSTOM:
        override = RetouchPromptDraft(style_profile=EnhanceStyle.CUSTOM.value)
        profile = EnhanceStyle.CUSTOM.value
    else:
        template = library.resolve_style(style)
        override = template.prompt_json or RetouchPromptDraft(style_profile=template.label)
        profile = template.id.value

    merged = merge_prompts(library.base_protocol, override)
    merged = merged.model_copy(update={"input_image_id": input_image_id})

    log = logger.bind(style=profile, input_image_id=input_image_id)
    try:
        prompt = finalize_prompt(merged)
    except IncompletePromptError as e:
        log.error("Composed prompt failed validation.", missing_fields=e.missing_fields)
        raise

    log.debug("Composed structured prompt.", step_count=len(prompt.retouching_steps))
    return prompt
