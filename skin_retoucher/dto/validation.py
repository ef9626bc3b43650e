# skin_retoucher/dto/validation.py
from pydantic import BaseModel, ConfigDict, Field


class ValidationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    valid: bool
    missing_fields: list[str] = Field(
        default_factory=list,
        description="Every failing field, nested ones as dotted paths.",
    )
