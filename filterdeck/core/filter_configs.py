"""Filter configurations for the entity browse screens."""

from __future__ import annotations

from filterdeck.core.models import FieldType, FilterConfig, FilterFieldSchema, SelectOption

_ARTIST_OPTIONS = (
    SelectOption("", "All Artists"),
    SelectOption("John Doe", "John Doe"),
    SelectOption("Jane Smith", "Jane Smith"),
    SelectOption("Mike Johnson", "Mike Johnson"),
    SelectOption("Sarah Wilson", "Sarah Wilson"),
)


def _search(placeholder: str) -> FilterFieldSchema:
    return FilterFieldSchema(
        key="search",
        label="Search",
        type=FieldType.TEXT,
        placeholder=placeholder,
        width_hint=2,
    )


def _date_range(from_label: str, to_label: str) -> tuple[FilterFieldSchema, ...]:
    return (
        FilterFieldSchema(key="dateFrom", label=from_label, type=FieldType.DATE),
        FilterFieldSchema(key="dateTo", label=to_label, type=FieldType.DATE),
    )


SONG_FILTER_CONFIG = FilterConfig(
    title="Filter Songs",
    fields=(
        _search("Search by title, artist..."),
        FilterFieldSchema(
            key="status",
            label="Status",
            type=FieldType.SELECT,
            options=(
                SelectOption("", "All Status"),
                SelectOption("pending", "Pending"),
                SelectOption("approved", "Approved"),
                SelectOption("rejected", "Rejected"),
            ),
        ),
        FilterFieldSchema(
            key="genre",
            label="Genre",
            type=FieldType.SELECT,
            options=(
                SelectOption("", "All Genres"),
                SelectOption("pop", "Pop"),
                SelectOption("electronic", "Electronic"),
                SelectOption("hip-hop", "Hip Hop"),
                SelectOption("ambient", "Ambient"),
                SelectOption("rock", "Rock"),
                SelectOption("jazz", "Jazz"),
                SelectOption("classical", "Classical"),
            ),
        ),
        FilterFieldSchema(
            key="artist", label="Artist", type=FieldType.SELECT, options=_ARTIST_OPTIONS
        ),
        *_date_range("From Date", "To Date"),
        FilterFieldSchema(
            key="minPlays", label="Min Plays", type=FieldType.NUMBER, placeholder="0"
        ),
        FilterFieldSchema(
            key="maxPlays",
            label="Max Plays",
            type=FieldType.NUMBER,
            placeholder="1000000",
        ),
    ),
)

USER_FILTER_CONFIG = FilterConfig(
    title="Filter Users",
    fields=(
        _search("Search by name, email..."),
        FilterFieldSchema(
            key="status",
            label="Status",
            type=FieldType.SELECT,
            options=(
                SelectOption("", "All Status"),
                SelectOption("active", "Active"),
                SelectOption("inactive", "Inactive"),
                SelectOption("banned", "Banned"),
            ),
        ),
        FilterFieldSchema(
            key="role",
            label="Role",
            type=FieldType.SELECT,
            options=(
                SelectOption("", "All Roles"),
                SelectOption("user", "User"),
                SelectOption("artist", "Artist"),
                SelectOption("admin", "Admin"),
            ),
        ),
        *_date_range("Joined From", "Joined To"),
    ),
)

ARTIST_FILTER_CONFIG = FilterConfig(
    title="Filter Artists",
    fields=(
        _search("Search by name, email..."),
        FilterFieldSchema(
            key="status",
            label="Status",
            type=FieldType.SELECT,
            options=(
                SelectOption("", "All Status"),
                SelectOption("active", "Active"),
                SelectOption("inactive", "Inactive"),
                SelectOption("pending", "Pending Verification"),
            ),
        ),
        FilterFieldSchema(
            key="verified",
            label="Verification",
            type=FieldType.SELECT,
            options=(
                SelectOption("", "All"),
                SelectOption("verified", "Verified"),
                SelectOption("unverified", "Unverified"),
            ),
        ),
        *_date_range("Joined From", "Joined To"),
    ),
)

ALBUM_FILTER_CONFIG = FilterConfig(
    title="Filter Albums",
    fields=(
        _search("Search by title, artist..."),
        FilterFieldSchema(
            key="status",
            label="Status",
            type=FieldType.SELECT,
            options=(
                SelectOption("", "All Status"),
                SelectOption("published", "Published"),
                SelectOption("draft", "Draft"),
                SelectOption("archived", "Archived"),
            ),
        ),
        FilterFieldSchema(
            key="artist", label="Artist", type=FieldType.SELECT, options=_ARTIST_OPTIONS
        ),
        *_date_range("Release From", "Release To"),
    ),
)

GENRE_FILTER_CONFIG = FilterConfig(
    title="Filter Genres",
    fields=(
        _search("Search by name..."),
        FilterFieldSchema(
            key="color",
            label="Color",
            type=FieldType.SELECT,
            options=(
                SelectOption("", "All Colors"),
                SelectOption("#FF6B6B", "Red"),
                SelectOption("#4ECDC4", "Teal"),
                SelectOption("#45B7D1", "Blue"),
                SelectOption("#96CEB4", "Green"),
                SelectOption("#FFEAA7", "Yellow"),
                SelectOption("#DDA0DD", "Purple"),
                SelectOption("#FFB347", "Orange"),
            ),
        ),
        *_date_range("Created From", "Created To"),
    ),
)

FILTER_CONFIGS: dict[str, FilterConfig] = {
    "songs": SONG_FILTER_CONFIG,
    "users": USER_FILTER_CONFIG,
    "artists": ARTIST_FILTER_CONFIG,
    "albums": ALBUM_FILTER_CONFIG,
    "genres": GENRE_FILTER_CONFIG,
}


def get_filter_config(name: str) -> FilterConfig:
    """Look up the filter configuration of an entity screen.

    Args:
        name: Screen name, e.g. ``"songs"``.

    Raises:
        KeyError: If no screen of that name exists.
    """
    try:
        return FILTER_CONFIGS[name]
    except KeyError:
        raise KeyError(
            f"No filter config for '{name}'; known: {', '.join(FILTER_CONFIGS)}"
        ) from None
