"""Reference data package"""
from .snapshot import ReferenceData, Route, parse_route
from .lookup import lookup_with_default, Lookup
from .loader import load_reference_file, build_reference_data
from .database import SQLReferenceProvider

__all__ = [
    "ReferenceData", "Route", "parse_route",
    "lookup_with_default", "Lookup",
    "load_reference_file", "build_reference_data",
    "SQLReferenceProvider",
]
