# skin_retoucher/services/prompting/validator.py
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from skin_retoucher.dto.validation import ValidationResult

REQUIRED_FIELDS: tuple[str, ...] = (
    "task_type",
    "style_profile",
    "retouching_steps",
    "global_style",
)


def _is_present(candidate: Mapping[str, Any], key: str) -> bool:
    return candidate.get(key) is not None


def validate_prompt(candidate: Any) -> ValidationResult:
    """
    Checks a candidate structured prompt for structural completeness.

    Accepts anything: plain mappings, pydantic models (checked by their
    non-None fields) or arbitrary values. Never raises; every failing field is
    reported, nested ones with dotted paths.
    """
    if isinstance(candidate, BaseModel):
        candidate = candidate.model_dump(mode="json", exclude_none=True)

    if not isinstance(candidate, Mapping):
        return ValidationResult(valid=False, missing_fields=list(REQUIRED_FIELDS))

    missing: list[str] = []
    for key in REQUIRED_FIELDS:
        if not _is_present(candidate, key):
            missing.append(key)
        elif key == "retouching_steps" and not isinstance(candidate[key], (list, tuple)):
            # Present but not an array counts as missing.
            missing.append(key)

    global_style = candidate.get("global_style")
    if isinstance(global_style, Mapping) and not _is_present(global_style, "aesthetic_goal"):
        missing.append("global_style.aesthetic_goal")

    return ValidationResult(valid=not missing, missing_fields=missing)
