"""Canonical names for indexes and constraints.

Names are built from the owning table and the participating columns in
declared order, so the same declaration always yields the same name and a
different column order yields a different one.
"""

from __future__ import annotations

import hashlib
from typing import Sequence

from .dto import Column, Table

IDENTIFIER_MAX_LENGTH = 64

INDEX_TYPE_PRIMARY = "primary"
INDEX_TYPE_UNIQUE = "unique"
INDEX_TYPE_FULLTEXT = "fulltext"

PRIMARY_KEY_NAME = "PRIMARY"

INDEX_PREFIXES = {
    INDEX_TYPE_UNIQUE: "unq_",
    INDEX_TYPE_FULLTEXT: "fti_",
}
DEFAULT_INDEX_PREFIX = "idx_"
FOREIGN_KEY_PREFIX = "fk_"

# Word abbreviations applied before falling back to a hash.
ABBREVIATIONS = {
    "address": "addr",
    "admin": "adm",
    "attribute": "attr",
    "bundle": "bndl",
    "catalog": "cat",
    "catalogrule": "catrule",
    "catalogsearch": "clgsrch",
    "category": "ctgr",
    "compare": "cmp",
    "compiled": "cmpl",
    "configurable": "cfg",
    "customer": "cstr",
    "datetime": "dtime",
    "decimal": "dec",
    "downloadable": "dl",
    "entity": "entt",
    "grouped": "grp",
    "index": "idx",
    "integer": "int",
    "label": "lbl",
    "link": "lnk",
    "notification": "ntfc",
    "option": "opt",
    "product": "prd",
    "selection": "slct",
    "session": "sess",
    "super": "spr",
    "user": "usr",
    "value": "val",
    "varchar": "varchr",
    "website": "ws",
}


def shorten_name(name: str) -> str:
    return "_".join(ABBREVIATIONS.get(word, word) for word in name.lower().split("_"))


def _fit(prefix: str, body: str) -> str:
    if len(prefix) + len(body) > IDENTIFIER_MAX_LENGTH:
        short = shorten_name(body)
        if len(prefix) + len(short) > IDENTIFIER_MAX_LENGTH:
            body = hashlib.md5(body.encode("utf-8")).hexdigest()
        else:
            body = short
    return (prefix + body).upper()


class ElementNameResolver:
    def get_full_index_name(
        self,
        table: Table,
        columns: Sequence[str],
        index_type: str | None = None,
    ) -> str:
        """Name of an index, or of a unique/primary constraint, on ``columns``."""
        kind = (index_type or "").lower()
        if kind == INDEX_TYPE_PRIMARY:
            return PRIMARY_KEY_NAME
        prefix = INDEX_PREFIXES.get(kind, DEFAULT_INDEX_PREFIX)
        body = "_".join([table.name, *columns])
        return _fit(prefix, body)

    def get_full_fk_name(
        self,
        table: Table,
        column: Column,
        reference_table: Table,
        reference_column: Column,
    ) -> str:
        body = f"{table.name}_{column.name}_{reference_table.name}_{reference_column.name}"
        return _fit(FOREIGN_KEY_PREFIX, body)
