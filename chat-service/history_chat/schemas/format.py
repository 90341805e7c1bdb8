from pydantic import BaseModel
from typing import Any


class FormatRequest(BaseModel):
    # Raw backend payload: JSON string, object, or anything else
    payload: Any = None


class FormatResponse(BaseModel):
    kind: str
    markdown: str
