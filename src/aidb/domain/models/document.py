"""Document models stored in the database."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class DocumentMetadata(BaseModel):
    """Generation details for AI-produced documents."""

    model: str | None = None
    temperature: float | None = None
    tokens: int | None = None
    provider: str | None = None


class ToolCall(BaseModel):
    """A tool invocation recorded alongside a document."""

    name: str
    arguments: dict[str, Any] = Field(default_factory=dict)
    result: Any = None


class Document(BaseModel):
    """A document with free-form content, a type tag and open attributes.

    Unknown keyword arguments are kept as extra top-level fields, which the
    vector index filter can match against. The identifier is not validated
    here; stores reject documents without one.
    """

    model_config = ConfigDict(extra="allow")

    id: str | None = None
    content: str = ""
    type: str = ""
    data: dict[str, Any] = Field(default_factory=dict)
    metadata: DocumentMetadata | None = None
    synthetic: bool | None = None
    tool_calls: list[ToolCall] | None = None

    def top_level_fields(self) -> dict[str, Any]:
        """Fields that were explicitly given, including extra ones.

        Defaults that were never set count as absent.
        """
        fields = {name: getattr(self, name) for name in self.model_fields_set if name in type(self).model_fields}
        if self.model_extra:
            fields.update(self.model_extra)
        return fields
