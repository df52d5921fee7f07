from __future__ import annotations

from pydantic import BaseModel, Field


class ModuleResult(BaseModel):
    module: str
    path: str
    written: bool = False
    tables: list[str] = Field(default_factory=list)


class GenerationReport(BaseModel):
    modules: list[ModuleResult] = Field(default_factory=list)

    @property
    def written_paths(self) -> list[str]:
        return [result.path for result in self.modules if result.written]
