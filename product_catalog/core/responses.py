"""
==============================================================================
Response Classes Module
==============================================================================

JSON response that writes Decimal values as JSON numbers with their scale
intact, so a price stored as 10.50 is sent as 10.50 rather than 10.5.

Routes return it directly with content from model_dump() (python mode), so
FastAPI does not convert the Decimals to float first.

==============================================================================
"""

import json
from decimal import Decimal
from typing import Any

from fastapi.responses import JSONResponse


def encode_json(value: Any) -> str:
    """Compact JSON text for plain data, with Decimals as fixed-point numbers."""
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ValueError(f"Out of range decimal value: {value}")
        return format(value, "f")
    if isinstance(value, dict):
        items = (f"{json.dumps(str(k), ensure_ascii=False)}:{encode_json(v)}" for k, v in value.items())
        return "{" + ",".join(items) + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ",".join(encode_json(v) for v in value) + "]"
    return json.dumps(value, ensure_ascii=False, allow_nan=False)


class DecimalJSONResponse(JSONResponse):
    """JSONResponse that keeps Decimal scale in the rendered body."""

    def render(self, content: Any) -> bytes:
        return encode_json(content).encode("utf-8")
