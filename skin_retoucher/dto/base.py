# skin_retoucher/dto/base.py
from typing import Any
from collections.abc import Callable

import orjson


def orjson_dumps(value: Any, *, default: Callable[[Any], Any] | None = None) -> str:
    return orjson.dumps(value, default=default).decode()
