# skin_retoucher/dto/style_template.py
from pydantic import BaseModel, ConfigDict

from skin_retoucher.data.constants import EnhanceStyle
from .retouch_prompt import RetouchPromptDraft


class StyleTemplate(BaseModel):
    """A named override bundle: structured steps plus the legacy free-text prompt."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    id: EnhanceStyle
    label: str
    description: str  # shown in the style picker
    prompt: str
    prompt_json: RetouchPromptDraft | None = None
    thumbnail: str
    recommended: bool = False
