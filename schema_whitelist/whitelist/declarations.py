"""Typed views of the index and constraint entries found in declared table data."""

from __future__ import annotations

import logging
from typing import Any, Iterator, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

FOREIGN = "foreign"


class IndexDeclaration(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    column: Optional[Union[str, list[str]]] = None
    index_type: Optional[str] = Field(default=None, alias="indexType")

    @property
    def columns(self) -> list[str]:
        if self.column is None:
            return []
        if isinstance(self.column, str):
            return [self.column]
        return list(self.column)


class ConstraintDeclaration(IndexDeclaration):
    type: Optional[str] = None
    reference_table: Optional[str] = Field(default=None, alias="referenceTable")
    reference_column: Optional[str] = Field(default=None, alias="referenceColumn")

    @property
    def is_foreign(self) -> bool:
        return self.type == FOREIGN


DeclarationT = TypeVar("DeclarationT", bound=IndexDeclaration)


def parse_entries(model: type[DeclarationT], entries: Any) -> Iterator[DeclarationT]:
    """Yield typed entries, skipping anything that does not look like an element.

    Entries may be given as a list or as a mapping keyed by element id.
    """
    if not entries:
        return
    if isinstance(entries, dict):
        entries = entries.values()
    for entry in entries:
        if not isinstance(entry, dict):
            logger.debug(f"Skipping non-mapping {model.__name__} entry: {entry!r}")
            continue
        try:
            yield model.model_validate(entry)
        except ValidationError as exc:
            logger.debug(f"Skipping malformed {model.__name__} entry {entry!r}: {exc.error_count()} errors")
