"""
Base classes shared by every VMware model.

Presence tracking relies on pydantic's ``model_fields_set``: a field is on
the wire only if the caller set it (through the constructor or by attribute
assignment), so an explicit ``0`` or ``""`` is sent while an untouched field
is omitted.

Response records keep unknown keys as extras; request records
(``VmwarePrototype`` and ``PatchModel``) reject them.
"""

from typing import Any

from pydantic import BaseModel


class VmwareModel(BaseModel):
    """Base record for request and response bodies."""

    model_config = {"extra": "allow", "populate_by_name": True}

    def to_dict(self) -> dict[str, Any]:
        """Wire representation: set, non-null fields under their JSON names."""
        return self.model_dump(
            mode="json", by_alias=True, exclude_unset=True, exclude_none=True
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]):
        """Decode a JSON object into this model."""
        return cls.model_validate(data)


class VmwarePrototype(VmwareModel):
    """
    Base record for request bodies.

    Unknown fields are rejected so a misspelled name never reaches the wire.
    """

    model_config = {"extra": "forbid", "populate_by_name": True}


class PatchModel(VmwarePrototype):
    """
    A record rendered as a JSON merge patch (RFC 7396).

    Only touched fields are emitted; a field explicitly set to ``None``
    is kept as ``null`` so the server deletes it.
    """

    def as_patch(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)
