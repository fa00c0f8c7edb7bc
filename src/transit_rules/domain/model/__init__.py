"""In-memory transit model."""

from __future__ import annotations

from .collections import Collections, CollectionWithId, DuplicateIdentifierError
from .enums import ObjectType, ReportType
from .objects import Code, CodedObject, Geometry, Line, Route, StopArea, StopPoint

__all__ = [
    "Code",
    "CodedObject",
    "CollectionWithId",
    "Collections",
    "DuplicateIdentifierError",
    "Geometry",
    "Line",
    "ObjectType",
    "ReportType",
    "Route",
    "StopArea",
    "StopPoint",
]
