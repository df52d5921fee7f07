"""Whitelist generation module.

Contains the generator, the recursive merge, element declarations, and JSON persistence.
"""

from .declarations import ConstraintDeclaration, IndexDeclaration, parse_entries
from .generator import (
    WhitelistGenerator,
    filter_primary_tables,
    get_elements_with_fixed_name,
)
from .merge import merge_recursive
from .persistor import JsonPersistor, load_whitelist

__all__ = [
    "ConstraintDeclaration",
    "IndexDeclaration",
    "parse_entries",
    "WhitelistGenerator",
    "filter_primary_tables",
    "get_elements_with_fixed_name",
    "merge_recursive",
    "JsonPersistor",
    "load_whitelist",
]
