"""Base model for FAM SDK."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class FamModel(BaseModel):
    """Base model with common configuration.

    Field names are snake_case; the API's PascalCase keys are declared as
    aliases so payloads validate as-is and dump back unchanged.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
        extra="allow",
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert model to an API payload."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FamModel":
        """Create model from dictionary."""
        return cls.model_validate(data)
