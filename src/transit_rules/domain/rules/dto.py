"""Rule records (source-agnostic)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from transit_rules.domain.model import ObjectType

type PropertyGroupKey = tuple[ObjectType, str, str]


@dataclass(frozen=True, slots=True)
class ComplementaryCode:
    """Add ``(object_system, object_code)`` to the codes of one object."""

    object_type: ObjectType
    object_id: str
    object_system: str
    object_code: str

    @property
    def sort_key(self) -> tuple[int, str, str, str]:
        return (self.object_type.rank, self.object_id, self.object_system, self.object_code)


@dataclass(frozen=True, slots=True)
class PropertyRule:
    """Overwrite one property of one object, guarded by its expected old value."""

    object_type: ObjectType
    object_id: str
    property_name: str
    property_old_value: str | None
    property_value: str

    @property
    def group_key(self) -> PropertyGroupKey:
        return (self.object_type, self.object_id, self.property_name)

    @property
    def sort_key(self) -> tuple[int, str, str, bool, str, str]:
        # a missing old value sorts before any text
        old_value = self.property_old_value
        return (
            self.object_type.rank,
            self.object_id,
            self.property_name,
            old_value is not None,
            old_value or "",
            self.property_value,
        )
