from __future__ import annotations

from pydantic import BaseModel, Field


class GenerationResult(BaseModel):
    labels: list[str]
    url: str
    output_path: str
    bytes_written: int = Field(ge=0)
    detected: bool = True

    def summary(self) -> str:
        return ", ".join(self.labels)
