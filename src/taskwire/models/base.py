"""
Wire model base class.

Every A2A entity shares one projection convention:

- Attributes are snake_case in Python and camelCase on the wire
- Input accepts either spelling (``mimeType`` or ``mime_type``)
- Output always uses camelCase and omits absent fields instead of emitting null
- Instances are immutable once validated
"""

from __future__ import annotations

import json
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

ModelT = TypeVar("ModelT", bound="WireModel")


class WireModel(BaseModel):
    """Immutable pydantic model with camelCase wire aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    def to_dict(self) -> dict[str, Any]:
        """
        Project the model onto its wire representation.

        Returns:
            JSON-compatible dictionary with camelCase keys and no null fields
        """
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self, **kwargs: Any) -> str:
        """Serialize the wire representation to a JSON string."""
        return json.dumps(self.to_dict(), **kwargs)

    @classmethod
    def from_dict(cls: type[ModelT], data: dict[str, Any]) -> ModelT:
        """
        Build the model from a wire (or snake_case) dictionary.

        Raises:
            ValidationError: If data doesn't match schema
        """
        return cls.model_validate(data)

    @classmethod
    def from_json(cls: type[ModelT], text: str | bytes) -> ModelT:
        """Build the model from a JSON document."""
        return cls.model_validate_json(text)
