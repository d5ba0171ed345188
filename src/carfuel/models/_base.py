"""Base models for car management API payloads.

Every payload model inherits from :class:`CarFuelBaseModel` which
provides:

* ``alias_generator=to_camel`` so snake_case fields map to the
  camelCase keys of the wire format.
* Frozen instances; payloads are never mutated after parsing.

Response models validate by alias only, so a body that lacks the
camelCase keys is rejected. Request models derive from
:class:`CarFuelRequestModel`, which also accepts field names and adds
:meth:`CarFuelRequestModel.to_payload` for building request bodies.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CarFuelBaseModel(BaseModel):
    """Base for request and response models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
    )


class CarFuelRequestModel(CarFuelBaseModel):
    """Base for models the client builds and sends."""

    _PAYLOAD_EXCLUDE: ClassVar[frozenset[str]] = frozenset()
    """Fields that never travel in a request body (e.g. path parameters)."""

    model_config = ConfigDict(populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        """Return the camelCase request body for this model."""
        return self.model_dump(by_alias=True, exclude=set(self._PAYLOAD_EXCLUDE), exclude_none=True)
