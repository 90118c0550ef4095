"""Unit tests for the bundled entity filter configurations."""

import pytest

from filterdeck.core.filter_configs import FILTER_CONFIGS, get_filter_config
from filterdeck.core.models import FieldType
from filterdeck.core.row_layout import group_fields_by_row


class TestFilterConfigs:
    """Tests for FILTER_CONFIGS and get_filter_config."""

    def test_all_screens_present(self) -> None:
        assert set(FILTER_CONFIGS) == {"songs", "users", "artists", "albums", "genres"}

    @pytest.mark.parametrize("name", sorted(FILTER_CONFIGS))
    def test_search_spans_first_row(self, name: str) -> None:
        """Every screen starts with a full-width search field."""
        rows = group_fields_by_row(FILTER_CONFIGS[name].fields)

        assert [s.key for s in rows[0]] == ["search"]
        assert rows[0][0].is_full_width is True

    @pytest.mark.parametrize("name", sorted(FILTER_CONFIGS))
    def test_has_date_range(self, name: str) -> None:
        config = FILTER_CONFIGS[name]

        assert config.get_field("dateFrom").type is FieldType.DATE
        assert config.get_field("dateTo").type is FieldType.DATE

    @pytest.mark.parametrize("name", sorted(FILTER_CONFIGS))
    def test_select_options_start_with_all(self, name: str) -> None:
        """The first option of every select clears the constraint."""
        for schema in FILTER_CONFIGS[name].fields:
            if schema.type is FieldType.SELECT:
                assert schema.options[0].value == ""

    def test_song_numbers(self) -> None:
        config = get_filter_config("songs")

        assert config.get_field("minPlays").type is FieldType.NUMBER
        assert config.get_field("maxPlays").type is FieldType.NUMBER

    def test_unknown_screen(self) -> None:
        with pytest.raises(KeyError, match="known"):
            get_filter_config("playlists")
