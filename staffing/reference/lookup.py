"""Keyed lookups with explicit fallbacks"""
from typing import Any, Hashable, Mapping, NamedTuple


class Lookup(NamedTuple):
    value: Any
    defaulted: bool


def lookup_with_default(table: Mapping[Hashable, Any], key: Hashable, default: Any) -> Lookup:
    """Return the value for ``key`` and whether the default was used"""
    if key in table:
        return Lookup(table[key], False)
    return Lookup(default, True)
