"""Pydantic models describing rule table rows."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from transit_rules.domain.model import ObjectType
from transit_rules.domain.rules import ComplementaryCode, PropertyRule


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


def _lowercase(value: object) -> object:
    if isinstance(value, str):
        return value.strip().lower()
    return value


class RuleRowModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, str_strip_whitespace=True)


class ComplementaryCodeRow(RuleRowModel):
    object_type: ObjectType
    object_id: str
    object_system: str
    object_code: str

    _normalize_object_type = field_validator("object_type", mode="before")(_lowercase)

    def to_rule(self) -> ComplementaryCode:
        return ComplementaryCode(
            object_type=self.object_type,
            object_id=self.object_id,
            object_system=self.object_system,
            object_code=self.object_code,
        )


class PropertyRuleRow(RuleRowModel):
    object_type: ObjectType
    object_id: str
    property_name: str
    property_old_value: str | None = None
    property_value: str

    _normalize_object_type = field_validator("object_type", mode="before")(_lowercase)
    _normalize_old_value = field_validator("property_old_value", mode="before")(_blank_to_none)

    def to_rule(self) -> PropertyRule:
        return PropertyRule(
            object_type=self.object_type,
            object_id=self.object_id,
            property_name=self.property_name,
            property_old_value=self.property_old_value,
            property_value=self.property_value,
        )
