"""
Transit objects the rule engine reads and patches.

Only the attributes that rules can reach are modelled; everything else
belongs to the wider dataset and is not carried here.
"""

# switch off type warnings because of default_factory=set
# pyright: reportUnknownVariableType=false

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar, Protocol

from .enums import ObjectType

if TYPE_CHECKING:
    from shapely.geometry.base import BaseGeometry

type Code = tuple[str, str]


class Identifiable(Protocol):
    @property
    def id(self) -> str: ...


@dataclass(eq=False, kw_only=True)
class CodedObject:
    """Capability: owns a set of complementary ``(system, code)`` pairs."""

    id: str
    codes: set[Code] = field(default_factory=set)

    OBJECT_TYPE: ClassVar[ObjectType]

    @property
    def object_type(self) -> ObjectType:
        return self.OBJECT_TYPE

    def add_code(self, system: str, code: str) -> None:
        self.codes.add((system, code))

    def sorted_codes(self) -> list[Code]:
        return sorted(self.codes)


@dataclass(eq=False, kw_only=True)
class Line(CodedObject):
    OBJECT_TYPE: ClassVar[ObjectType] = ObjectType.LINE

    name: str = ""


@dataclass(eq=False, kw_only=True)
class Route(CodedObject):
    OBJECT_TYPE: ClassVar[ObjectType] = ObjectType.ROUTE

    name: str = ""
    line_id: str = ""
    direction_type: str | None = None
    destination_id: str | None = None
    geometry_id: str | None = None


@dataclass(eq=False, kw_only=True)
class StopArea(CodedObject):
    OBJECT_TYPE: ClassVar[ObjectType] = ObjectType.STOP_AREA

    name: str = ""


@dataclass(eq=False, kw_only=True)
class StopPoint(CodedObject):
    OBJECT_TYPE: ClassVar[ObjectType] = ObjectType.STOP_POINT

    name: str = ""
    stop_area_id: str | None = None


@dataclass(eq=False, kw_only=True)
class Geometry:
    """Shape data addressed by id; routes reference it through ``geometry_id``."""

    id: str
    geometry: BaseGeometry
