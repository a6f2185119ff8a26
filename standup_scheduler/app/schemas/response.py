"""
Response envelope shared by every endpoint.

Only used to document responses in the OpenAPI schema; the envelope is
rendered by ``core.responses.resolve``.
"""

from typing import Any, Literal, Optional

from pydantic import BaseModel


class Envelope(BaseModel):
    status: Literal["success", "failed"]
    data: Optional[Any] = None
    message: Optional[str] = None
