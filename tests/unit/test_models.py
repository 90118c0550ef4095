"""Unit tests for filter schema models."""

import pytest

from filterdeck.core.exceptions import (
    ConfigurationError,
    DuplicateFieldKeyError,
    FilterDeckError,
)
from filterdeck.core.models import (
    FieldType,
    FilterConfig,
    FilterFieldSchema,
    Rect,
    SelectOption,
)


class TestFilterFieldSchema:
    """Tests for FilterFieldSchema validation."""

    def test_defaults(self) -> None:
        """A bare field is a half-width text field."""
        schema = FilterFieldSchema(key="search", label="Search")

        assert schema.type is FieldType.TEXT
        assert schema.width_hint == 1
        assert schema.is_full_width is False
        assert schema.options == ()

    def test_type_string_is_coerced(self) -> None:
        """Type given as a plain string becomes a FieldType."""
        schema = FilterFieldSchema(key="from", label="From", type="date")

        assert schema.type is FieldType.DATE

    def test_unknown_type_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="unknown type"):
            FilterFieldSchema(key="x", label="X", type="color")

    @pytest.mark.parametrize("width", [0, 3, -1])
    def test_invalid_width_rejected(self, width: int) -> None:
        """Only 1 and 2 are valid width hints."""
        with pytest.raises(ConfigurationError):
            FilterFieldSchema(key="x", label="X", width_hint=width)

    def test_blank_key_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            FilterFieldSchema(key="  ", label="Blank")

    def test_options_on_text_field_rejected(self) -> None:
        """Options are only allowed on select fields."""
        with pytest.raises(ConfigurationError, match="not a select field"):
            FilterFieldSchema(
                key="search", label="Search", options=(SelectOption("a", "A"),)
            )

    def test_option_dicts_are_coerced(self) -> None:
        """Options given as dicts become SelectOption instances."""
        schema = FilterFieldSchema(
            key="status",
            label="Status",
            type=FieldType.SELECT,
            options=({"value": "active", "label": "Active"},),
        )

        assert schema.options == (SelectOption("active", "Active"),)

    def test_from_dict_reads_grid_cols(self) -> None:
        """gridCols maps to width_hint."""
        schema = FilterFieldSchema.from_dict(
            {"key": "search", "label": "Search", "type": "text", "gridCols": 2}
        )

        assert schema.width_hint == 2
        assert schema.is_full_width is True

    def test_to_dict_uses_camel_case(self) -> None:
        schema = FilterFieldSchema(
            key="search", label="Search", placeholder="Find...", width_hint=2
        )

        assert schema.to_dict() == {
            "key": "search",
            "label": "Search",
            "type": "text",
            "placeholder": "Find...",
            "gridCols": 2,
        }


class TestFilterConfig:
    """Tests for FilterConfig construction."""

    def test_duplicate_keys_rejected(self) -> None:
        """Two fields sharing a key fail at construction."""
        with pytest.raises(DuplicateFieldKeyError) as exc_info:
            FilterConfig(
                title="Broken",
                fields=(
                    FilterFieldSchema(key="status", label="Status"),
                    FilterFieldSchema(key="status", label="Status again"),
                ),
            )

        assert exc_info.value.key == "status"
        assert isinstance(exc_info.value, ConfigurationError)
        assert isinstance(exc_info.value, FilterDeckError)

    def test_defaults_for_unknown_field_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="unknown fields"):
            FilterConfig(
                title="Broken",
                fields=(FilterFieldSchema(key="search", label="Search"),),
                defaults={"genre": "pop"},
            )

    def test_defaults_are_read_only(self, config_with_defaults: FilterConfig) -> None:
        """Defaults cannot be mutated through the config."""
        with pytest.raises(TypeError):
            config_with_defaults.defaults["status"] = "rejected"  # type: ignore[index]

    def test_keys_in_declared_order(self, sample_config: FilterConfig) -> None:
        assert sample_config.keys == ("search", "status", "dateFrom")

    def test_get_field(self, sample_config: FilterConfig) -> None:
        assert sample_config.get_field("status").type is FieldType.SELECT

    def test_get_field_unknown_raises_key_error(self, sample_config: FilterConfig) -> None:
        with pytest.raises(KeyError):
            sample_config.get_field("missing")

    def test_from_dict_accepts_default_values(self) -> None:
        """defaultValues is read as the defaults mapping."""
        config = FilterConfig.from_dict(
            {
                "title": "Filter Songs",
                "fields": [
                    {"key": "search", "label": "Search", "type": "text", "gridCols": 2},
                    {
                        "key": "status",
                        "label": "Status",
                        "type": "select",
                        "options": [{"value": "", "label": "All"}],
                    },
                ],
                "defaultValues": {"status": ""},
            }
        )

        assert config.keys == ("search", "status")
        assert dict(config.defaults) == {"status": ""}
        assert config.get_field("search").is_full_width is True

    def test_to_dict_round_trips(self, config_with_defaults: FilterConfig) -> None:
        """Serialized config rebuilds an equal config."""
        rebuilt = FilterConfig.from_dict(config_with_defaults.to_dict())

        assert rebuilt.keys == config_with_defaults.keys
        assert dict(rebuilt.defaults) == dict(config_with_defaults.defaults)
        assert rebuilt.fields == config_with_defaults.fields


class TestRect:
    """Tests for Rect."""

    def test_width(self) -> None:
        assert Rect(left=10, top=0, right=110, bottom=40).width == 100
