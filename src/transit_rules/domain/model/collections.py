"""Id-addressable collections making up the in-memory transit model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .enums import ObjectType
from .objects import CodedObject, Geometry, Identifiable, Line, Route, StopArea, StopPoint

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


class DuplicateIdentifierError(ValueError):
    """Raised when pushing an object whose id is already present."""

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(f"identifier {identifier} already exists")


class CollectionWithId[T: Identifiable]:
    """Insertion-ordered collection with unique string ids."""

    __slots__ = ("_objects",)

    def __init__(self, objects: Iterable[T] = ()) -> None:
        self._objects: dict[str, T] = {}
        for obj in objects:
            self.push(obj)

    def get(self, identifier: str) -> T | None:
        return self._objects.get(identifier)

    def push(self, obj: T) -> T:
        if obj.id in self._objects:
            raise DuplicateIdentifierError(obj.id)
        self._objects[obj.id] = obj
        return obj

    def ids(self) -> list[str]:
        return list(self._objects)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._objects

    def __iter__(self) -> Iterator[T]:
        return iter(self._objects.values())

    def __len__(self) -> int:
        return len(self._objects)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self)} objects)"


@dataclass(slots=True)
class Collections:
    """The object graph rules are applied to."""

    lines: CollectionWithId[Line] = field(default_factory=CollectionWithId[Line])
    routes: CollectionWithId[Route] = field(default_factory=CollectionWithId[Route])
    stop_points: CollectionWithId[StopPoint] = field(default_factory=CollectionWithId[StopPoint])
    stop_areas: CollectionWithId[StopArea] = field(default_factory=CollectionWithId[StopArea])
    geometries: CollectionWithId[Geometry] = field(default_factory=CollectionWithId[Geometry])

    def collection_for(self, object_type: ObjectType) -> CollectionWithId[CodedObject]:
        """Return the collection holding objects of ``object_type``."""

        collection: CollectionWithId[CodedObject]
        match object_type:
            case ObjectType.LINE:
                collection = self.lines  # pyright: ignore[reportAssignmentType]
            case ObjectType.ROUTE:
                collection = self.routes  # pyright: ignore[reportAssignmentType]
            case ObjectType.STOP_POINT:
                collection = self.stop_points  # pyright: ignore[reportAssignmentType]
            case ObjectType.STOP_AREA:
                collection = self.stop_areas  # pyright: ignore[reportAssignmentType]
        return collection
