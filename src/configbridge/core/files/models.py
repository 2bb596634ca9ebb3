from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class TextFileResponse(BaseModel):
    """Contents of an addressed text file, identical for local and remote reads."""

    model_config = ConfigDict(extra="ignore", strict=True)

    exists: bool
    content: str
    truncated: bool

    @classmethod
    def missing(cls) -> "TextFileResponse":
        return cls(exists=False, content="", truncated=False)
