# tests/conftest.py
"""Shared pytest fixtures for FilterDeck tests."""

import os
from datetime import date

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from filterdeck.core.models import (  # noqa: E402
    FieldType,
    FilterConfig,
    FilterFieldSchema,
    SelectOption,
)


@pytest.fixture
def fixed_today() -> date:
    """Fixed 'today' used by date picker tests."""
    return date(2024, 6, 15)


@pytest.fixture
def status_options() -> tuple[SelectOption, ...]:
    """Status choices with an empty 'all' option first."""
    return (
        SelectOption("", "All Status"),
        SelectOption("active", "Active"),
        SelectOption("inactive", "Inactive"),
    )


@pytest.fixture
def sample_config(status_options: tuple[SelectOption, ...]) -> FilterConfig:
    """Config with half-width text/select fields and a full-width date."""
    return FilterConfig(
        title="Filter Users",
        fields=(
            FilterFieldSchema(key="search", label="Search", type=FieldType.TEXT),
            FilterFieldSchema(
                key="status",
                label="Status",
                type=FieldType.SELECT,
                options=status_options,
            ),
            FilterFieldSchema(
                key="dateFrom", label="From", type=FieldType.DATE, width_hint=2
            ),
        ),
    )


@pytest.fixture
def config_with_defaults() -> FilterConfig:
    """Config declaring a default for one of its fields."""
    return FilterConfig(
        title="Filter Songs",
        fields=(
            FilterFieldSchema(key="search", label="Search", width_hint=2),
            FilterFieldSchema(key="status", label="Status"),
            FilterFieldSchema(key="minPlays", label="Min Plays", type=FieldType.NUMBER),
        ),
        defaults={"status": "approved"},
    )
