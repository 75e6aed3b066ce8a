# pro_mode_prompting/utils/serialization.py
from typing import Any, Callable

import orjson


def orjson_dumps(value: Any, *, default: Callable[[Any], Any] | None = None, **_: Any) -> str:
    """``json.dumps`` drop-in backed by orjson; structlog passes extra kwargs."""
    return orjson.dumps(value, default=default).decode()


def orjson_pretty(value: Any) -> str:
    return orjson.dumps(value, option=orjson.OPT_INDENT_2).decode()
