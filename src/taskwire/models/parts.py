"""
A2A content parts.

A Part is one typed content unit inside a Message or Artifact. Three variants
exist, told apart on the wire by the ``type`` discriminator:

- TextPart (``"text"``): plain text or markdown
- FilePart (``"file"``): file content, inline base64 bytes or a URI reference
- DataPart (``"data"``): structured JSON data (object or array)
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import Field, TypeAdapter, model_validator

from .base import WireModel


class FileContent(WireModel):
    """
    Content of a file part.

    Exactly one of ``bytes`` (base64 string) or ``uri`` must be present.
    """

    name: str | None = Field(default=None, description="File name")
    mime_type: str | None = Field(default=None, description="MIME type of the content")
    bytes: str | None = Field(default=None, description="Base64-encoded file content")
    uri: str | None = Field(default=None, description="URI where the content can be fetched")

    @model_validator(mode="after")
    def _exactly_one_source(self) -> FileContent:
        if (self.bytes is None) == (self.uri is None):
            raise ValueError("must provide exactly one of bytes or uri")
        return self


class TextPart(WireModel):
    """Text content part."""

    type: Literal["text"] = "text"
    text: str = Field(..., description="Text content")
    metadata: dict[str, Any] | None = Field(default=None, description="Part metadata")


class FilePart(WireModel):
    """File content part."""

    type: Literal["file"] = "file"
    file: FileContent = Field(..., description="File content")
    metadata: dict[str, Any] | None = Field(default=None, description="Part metadata")


class DataPart(WireModel):
    """Structured data content part (forms, tables and other JSON payloads)."""

    type: Literal["data"] = "data"
    data: dict[str, Any] | list[Any] = Field(..., description="Structured JSON value")
    metadata: dict[str, Any] | None = Field(default=None, description="Part metadata")


Part = Annotated[Union[TextPart, FilePart, DataPart], Field(discriminator="type")]

PART_TYPES: dict[str, type[WireModel]] = {
    "text": TextPart,
    "file": FilePart,
    "data": DataPart,
}

_part_adapter: TypeAdapter[TextPart | FilePart | DataPart] = TypeAdapter(Part)


def part_from_dict(data: Any) -> TextPart | FilePart | DataPart:
    """
    Deserialize a Part, dispatching on its ``type`` field.

    Already constructed parts are returned unchanged.

    Raises:
        ValidationError: If the discriminator is missing or unknown
            (``union_tag_not_found`` / ``union_tag_invalid``) or the variant's
            own fields are invalid
    """
    return _part_adapter.validate_python(data)
