# skin_retoucher/dto/guardrail.py
from pydantic import BaseModel, ConfigDict

from .retouch_prompt import RetouchStep


class GuardrailPolicy(BaseModel):
    """
    Source-adherence policy merged into every request, whatever the style.
    Keeps the model editing the provided image instead of generating a new one.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    protocol: str
    mandatory_requirements: tuple[str, ...]
    absolute_prohibitions: tuple[str, ...]
    allowed_modifications: tuple[str, ...]
    identity_rule: str


class SystemInstruction(BaseModel):
    """Global behaviour rules passed to the model as its system instruction."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    role: str
    absolute_rule: str
    source_adherence: tuple[str, ...]
    goal: str
    critical_rules: tuple[str, ...]
    absolute_restrictions: tuple[str, ...]
    retouching_process: tuple[RetouchStep, ...]
    final_check: tuple[str, ...]
