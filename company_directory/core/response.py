"""JSON envelopes for the directory API: `{data}` and `{data, meta, ...}`."""


from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from company_directory.core.pagination import PageMeta

T = TypeVar("T")

_ENVELOPE_CONFIG = {
    "populate_by_name": True,
    "alias_generator": to_camel,
}


class DataResponse(BaseModel, Generic[T]):
    """Single-object envelope used by the options and status endpoints."""

    data: T

    model_config = _ENVELOPE_CONFIG


class ListResponse(BaseModel, Generic[T]):
    """One page of rows plus its PageMeta. Subclasses add extra top-level keys."""

    data: list[T]
    meta: PageMeta

    model_config = _ENVELOPE_CONFIG


def paginated(items: list, meta: PageMeta, **extra: Any) -> dict:
    """Body for ListResponse (or a subclass) from rows already cut to one page."""
    return {"data": items, "meta": meta, **extra}
