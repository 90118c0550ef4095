"""Unit tests for FilterStateStore."""

import pytest

from filterdeck.core.exceptions import PanelStateError, UnknownFieldError
from filterdeck.core.filter_state import FilterStateStore
from filterdeck.core.models import FilterConfig


class TestInitialize:
    """Tests for seeding the buffer."""

    def test_empty_applied_gives_empty_strings(self, sample_config: FilterConfig) -> None:
        store = FilterStateStore()

        values = store.initialize(sample_config, {})

        assert values == {"search": "", "status": "", "dateFrom": ""}

    def test_none_applied_treated_as_empty(self, sample_config: FilterConfig) -> None:
        store = FilterStateStore()

        values = store.initialize(sample_config, None)

        assert values == {"search": "", "status": "", "dateFrom": ""}

    def test_applied_values_win(self, sample_config: FilterConfig) -> None:
        """End-to-end seeding: only status is applied."""
        store = FilterStateStore()

        values = store.initialize(sample_config, {"status": "draft"})

        assert values == {"search": "", "status": "draft", "dateFrom": ""}

    def test_defaults_fill_missing_values(self, config_with_defaults: FilterConfig) -> None:
        store = FilterStateStore()

        values = store.initialize(config_with_defaults, {"search": "abc"})

        assert values == {"search": "abc", "status": "approved", "minPlays": ""}

    def test_applied_overrides_default(self, config_with_defaults: FilterConfig) -> None:
        store = FilterStateStore()

        values = store.initialize(config_with_defaults, {"status": "pending"})

        assert values["status"] == "pending"

    def test_applied_empty_string_overrides_default(
        self, config_with_defaults: FilterConfig
    ) -> None:
        """An explicitly applied empty value is kept, not replaced by the default."""
        store = FilterStateStore()

        values = store.initialize(config_with_defaults, {"status": ""})

        assert values["status"] == ""

    def test_applied_none_falls_back_to_default(
        self, config_with_defaults: FilterConfig
    ) -> None:
        store = FilterStateStore()

        values = store.initialize(config_with_defaults, {"status": None})  # type: ignore[dict-item]

        assert values["status"] == "approved"

    def test_keys_match_config_exactly(self, sample_config: FilterConfig) -> None:
        """Applied keys unknown to the config are dropped."""
        store = FilterStateStore()

        values = store.initialize(sample_config, {"status": "active", "genre": "pop"})

        assert set(values) == set(sample_config.keys)

    def test_inputs_are_not_mutated(self, config_with_defaults: FilterConfig) -> None:
        applied = {"search": "abc"}
        store = FilterStateStore()

        store.initialize(config_with_defaults, applied)
        store.set_value("search", "xyz")

        assert applied == {"search": "abc"}
        assert dict(config_with_defaults.defaults) == {"status": "approved"}

    def test_returned_dict_is_a_copy(self, sample_config: FilterConfig) -> None:
        store = FilterStateStore()

        values = store.initialize(sample_config, {})
        values["search"] = "mutated"

        assert store.values["search"] == ""


class TestNeedsReinitialize:
    """Tests for identity-based staleness."""

    def test_same_objects_are_fresh(self, sample_config: FilterConfig) -> None:
        applied = {"status": "active"}
        store = FilterStateStore()
        store.initialize(sample_config, applied)

        assert store.needs_reinitialize(sample_config, applied) is False

    def test_equal_but_new_applied_is_stale(self, sample_config: FilterConfig) -> None:
        store = FilterStateStore()
        store.initialize(sample_config, {"status": "active"})

        assert store.needs_reinitialize(sample_config, {"status": "active"}) is True

    def test_new_config_is_stale(
        self, sample_config: FilterConfig, config_with_defaults: FilterConfig
    ) -> None:
        applied: dict[str, str] = {}
        store = FilterStateStore()
        store.initialize(sample_config, applied)

        assert store.needs_reinitialize(config_with_defaults, applied) is True


class TestSetValue:
    """Tests for buffer writes."""

    def test_overwrites_value(self, sample_config: FilterConfig) -> None:
        store = FilterStateStore()
        store.initialize(sample_config, {})

        store.set_value("search", "hello")

        assert store.values["search"] == "hello"

    def test_value_is_not_validated(self, sample_config: FilterConfig) -> None:
        """Partial date text is stored verbatim."""
        store = FilterStateStore()
        store.initialize(sample_config, {})

        store.set_value("dateFrom", "06/1")

        assert store.values["dateFrom"] == "06/1"

    def test_unknown_key_raises(self, sample_config: FilterConfig) -> None:
        store = FilterStateStore()
        store.initialize(sample_config, {})

        with pytest.raises(UnknownFieldError) as exc_info:
            store.set_value("genre", "pop")

        assert exc_info.value.key == "genre"
        assert isinstance(exc_info.value, KeyError)

    def test_uninitialized_raises(self) -> None:
        with pytest.raises(PanelStateError):
            FilterStateStore().set_value("search", "x")

    def test_values_view_is_read_only(self, sample_config: FilterConfig) -> None:
        store = FilterStateStore()
        store.initialize(sample_config, {})

        with pytest.raises(TypeError):
            store.values["search"] = "x"  # type: ignore[index]


class TestApplyAndClear:
    """Tests for apply, clear and reset."""

    def test_apply_returns_snapshot(self, sample_config: FilterConfig) -> None:
        store = FilterStateStore()
        store.initialize(sample_config, {})
        store.set_value("search", "abc")

        snapshot = store.apply()
        store.set_value("search", "changed")

        assert snapshot["search"] == "abc"

    def test_clear_blanks_every_field(self, config_with_defaults: FilterConfig) -> None:
        """Clear does not restore defaults."""
        store = FilterStateStore()
        store.initialize(config_with_defaults, {"search": "abc", "minPlays": "10"})

        store.clear()

        assert dict(store.values) == {"search": "", "status": "", "minPlays": ""}

    def test_clear_calls_callback(self, sample_config: FilterConfig) -> None:
        calls: list[bool] = []
        store = FilterStateStore()
        store.initialize(sample_config, {})

        store.clear(on_clear=lambda: calls.append(True))

        assert calls == [True]

    def test_apply_uninitialized_raises(self) -> None:
        with pytest.raises(PanelStateError):
            FilterStateStore().apply()

    def test_reset_discards_buffer(self, sample_config: FilterConfig) -> None:
        store = FilterStateStore()
        store.initialize(sample_config, {})

        store.reset()

        assert store.is_initialized is False
        assert store.config is None
        assert dict(store.values) == {}
