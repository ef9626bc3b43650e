# skin_retoucher/services/prompting/formatter.py
from typing import Any

import orjson
from pydantic import BaseModel

from skin_retoucher.dto.retouch_prompt import RetouchPromptObject


def _to_jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", exclude_none=True)
    return value


def format_prompt(value: BaseModel | dict | list) -> str:
    """
    Serializes a structured prompt (or any entity of the prompt model) to JSON text.

    Quotes, backslashes, control characters are escaped; non-ASCII text is
    emitted as UTF-8. Unset optional members are omitted.
    """
    return orjson.dumps(_to_jsonable(value), option=orjson.OPT_INDENT_2).decode()


def parse_prompt(text: str | bytes) -> Any:
    """Inverse of format_prompt for plain JSON values."""
    return orjson.loads(text)


def parse_prompt_object(text: str | bytes) -> RetouchPromptObject:
    return RetouchPromptObject.model_validate_json(text)
