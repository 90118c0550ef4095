"""Data models for FilterDeck."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from filterdeck.core.exceptions import ConfigurationError, DuplicateFieldKeyError

# Buffer of in-progress filter values, one entry per field key.
FilterValues = dict[str, str]


class FieldType(str, Enum):
    """Kinds of filter field the panel knows how to render."""

    TEXT = "text"
    SELECT = "select"
    DATE = "date"
    NUMBER = "number"


class FlyoutAlignment(str, Enum):
    """Which way the date flyout opens relative to its trigger."""

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class SelectOption:
    """Single choice of a Select field.

    Attributes:
        value: Value written to the filter buffer when chosen.
        label: Text shown to the user.
    """

    value: str
    label: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SelectOption:
        """Deserialize from a ``{"value": ..., "label": ...}`` mapping."""
        return cls(value=str(data.get("value", "")), label=str(data.get("label", "")))


@dataclass(frozen=True)
class FilterFieldSchema:
    """Static description of one filterable field.

    Attributes:
        key: Identifier of the field, unique within a config.
        label: Caption shown above the editor.
        type: Field type deciding which editor is rendered.
        placeholder: Optional hint text for empty editors.
        options: Ordered choices, only allowed on Select fields.
        width_hint: 1 for a half-width field, 2 for a full-width field.
    """

    key: str
    label: str
    type: FieldType = FieldType.TEXT
    placeholder: str | None = None
    options: tuple[SelectOption, ...] = ()
    width_hint: int = 1

    def __post_init__(self) -> None:
        if not self.key or not self.key.strip():
            raise ConfigurationError("Filter field key must not be blank")
        try:
            field_type = FieldType(self.type)
        except ValueError:
            raise ConfigurationError(
                f"Field '{self.key}' has unknown type '{self.type}'"
            ) from None
        object.__setattr__(self, "type", field_type)

        if self.width_hint not in (1, 2):
            raise ConfigurationError(
                f"Field '{self.key}' has width hint {self.width_hint!r}, expected 1 or 2"
            )

        options = tuple(
            opt if isinstance(opt, SelectOption) else SelectOption.from_dict(opt)
            for opt in self.options
        )
        if options and field_type is not FieldType.SELECT:
            raise ConfigurationError(
                f"Field '{self.key}' declares options but is not a select field"
            )
        object.__setattr__(self, "options", options)

    @property
    def is_full_width(self) -> bool:
        """True when the field occupies a whole row."""
        return self.width_hint == 2

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FilterFieldSchema:
        """Deserialize from a mapping.

        Accepts both ``gridCols`` and ``width_hint`` for the width.

        Args:
            data: Dictionary describing the field.

        Returns:
            New FilterFieldSchema instance.
        """
        width = data.get("width_hint", data.get("gridCols", 1))
        return cls(
            key=data.get("key", ""),
            label=data.get("label", ""),
            type=data.get("type", FieldType.TEXT),
            placeholder=data.get("placeholder"),
            options=tuple(data.get("options") or ()),
            width_hint=1 if width is None else width,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the camelCase dictionary shape."""
        data: dict[str, Any] = {
            "key": self.key,
            "label": self.label,
            "type": self.type.value,
        }
        if self.placeholder is not None:
            data["placeholder"] = self.placeholder
        if self.options:
            data["options"] = [
                {"value": opt.value, "label": opt.label} for opt in self.options
            ]
        if self.width_hint != 1:
            data["gridCols"] = self.width_hint
        return data


@dataclass(frozen=True)
class FilterConfig:
    """Filter panel configuration: a title, ordered fields and defaults.

    Construction fails fast with ConfigurationError when the schema is
    inconsistent, most notably on duplicate field keys.

    Attributes:
        title: Panel title.
        fields: Ordered field descriptors with unique keys.
        defaults: Per-field default values used when nothing is applied.
    """

    title: str
    fields: tuple[FilterFieldSchema, ...]
    defaults: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        fields = tuple(self.fields)
        seen: set[str] = set()
        for schema in fields:
            if schema.key in seen:
                raise DuplicateFieldKeyError(schema.key)
            seen.add(schema.key)

        defaults = dict(self.defaults or {})
        unknown = [key for key in defaults if key not in seen]
        if unknown:
            raise ConfigurationError(
                f"Defaults reference unknown fields: {', '.join(sorted(unknown))}"
            )

        object.__setattr__(self, "fields", fields)
        object.__setattr__(
            self, "defaults", MappingProxyType({k: str(v) for k, v in defaults.items()})
        )

    @property
    def keys(self) -> tuple[str, ...]:
        """Field keys in declared order."""
        return tuple(schema.key for schema in self.fields)

    def get_field(self, key: str) -> FilterFieldSchema:
        """Look up a field by key.

        Raises:
            KeyError: If no field has the key.
        """
        for schema in self.fields:
            if schema.key == key:
                return schema
        raise KeyError(key)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FilterConfig:
        """Deserialize from a mapping.

        Both ``defaultValues`` and ``defaults`` are accepted.

        Args:
            data: Dictionary with ``title``, ``fields`` and optional defaults.

        Returns:
            New FilterConfig instance.
        """
        defaults = data.get("defaults", data.get("defaultValues")) or {}
        return cls(
            title=data.get("title", ""),
            fields=tuple(
                FilterFieldSchema.from_dict(item) for item in data.get("fields", [])
            ),
            defaults=defaults,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the camelCase dictionary shape."""
        data: dict[str, Any] = {
            "title": self.title,
            "fields": [schema.to_dict() for schema in self.fields],
        }
        if self.defaults:
            data["defaultValues"] = dict(self.defaults)
        return data


@dataclass(frozen=True)
class CalendarDay:
    """One cell of a month calendar grid."""

    date: date
    is_current_month: bool
    is_today: bool
    is_selected: bool


@dataclass
class DateViewState:
    """Transient state of one open (or closed) date flyout.

    Attributes:
        month_anchor: First day of the month being displayed.
        selected_date: Committed date, owned by the field's value.
        is_open: Whether the flyout is showing.
    """

    month_anchor: date
    selected_date: date | None = None
    is_open: bool = False


@dataclass(frozen=True)
class Rect:
    """Screen-space rectangle of a flyout trigger.

    Attributes:
        left: X coordinate of the left edge.
        top: Y coordinate of the top edge.
        right: X coordinate of the right edge.
        bottom: Y coordinate of the bottom edge.
    """

    left: float
    top: float
    right: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left


@dataclass(frozen=True)
class FlyoutPlacement:
    """Resolved flyout geometry.

    Attributes:
        alignment: Direction the flyout opens in.
        x: Left edge of the flyout in the trigger's coordinate space.
        width: Flyout width after clamping to the viewport.
    """

    alignment: FlyoutAlignment
    x: float
    width: float
