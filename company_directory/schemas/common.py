"""CamelModel base for directory DTOs and the /health payload."""

from __future__ import annotations

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """snake_case fields in Python, camelCase keys on the wire (both accepted on input)."""

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
        "from_attributes": True,
    }


class HealthResponse(CamelModel):
    """Returned by /health; `directory` is the load state of the session."""

    status: str = "ok"
    app: str
    version: str
    env: str
    directory: str
