# skin_retoucher/dto/retouch_prompt.py
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from skin_retoucher.data.constants import (
    DEFAULT_INPUT_IMAGE_ID,
    MAINTAIN_ORIGINAL,
    TASK_TYPE,
    OutputFormat,
)


class RetouchStep(BaseModel):
    """
    A single atomic instruction in the retouching pipeline.
    `step_name` is the step's identity: when two steps share a name,
    the later one replaces the earlier one entirely.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    step_name: str
    target_area: str = Field(description="e.g., 'face', 'hands', 'eye sclera'")
    operation: str = Field(description="e.g., 'smooth', 'dodge_and_burn', 'whiten'")
    intensity: float | None = Field(default=None, ge=0.0, le=1.0)
    value: str | None = None
    details: str


class GlobalStyle(BaseModel):
    """Rules that apply once per prompt rather than per step."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    aesthetic_goal: str
    prohibitions: str
    final_check: str


class OutputSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    aspect_ratio: str = MAINTAIN_ORIGINAL
    resolution: str = MAINTAIN_ORIGINAL
    format: OutputFormat = OutputFormat.JPEG
    # Before/after composites are never requested in production.
    comparison: bool = False


class RetouchPromptMetadata(BaseModel):
    """Human-readable provenance. Not consumed by the image model."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    original_label: str
    description: str


class RetouchPromptObject(BaseModel):
    """The complete structured instruction sent alongside the image."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    task_type: Literal["image_retouching"] = TASK_TYPE
    input_image_id: str = DEFAULT_INPUT_IMAGE_ID
    style_profile: str
    output_settings: OutputSettings = Field(default_factory=OutputSettings)
    retouching_steps: tuple[RetouchStep, ...]
    global_style: GlobalStyle
    metadata: RetouchPromptMetadata | None = None

    @property
    def step_names(self) -> list[str]:
        return [step.step_name for step in self.retouching_steps]


class RetouchPromptDraft(BaseModel):
    """
    Optional-field variant of RetouchPromptObject.

    A member set to None means "not supplied". Drafts are the inputs of the
    merge engine (base protocol and style overrides) and its output, since a
    merged draft is only complete when its base was.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    task_type: Literal["image_retouching"] | None = None
    input_image_id: str | None = None
    style_profile: str | None = None
    output_settings: OutputSettings | None = None
    retouching_steps: tuple[RetouchStep, ...] | None = None
    global_style: GlobalStyle | None = None
    metadata: RetouchPromptMetadata | None = None
