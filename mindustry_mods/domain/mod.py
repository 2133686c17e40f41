"""Domain entities for listed Mindustry mods."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class ListingFormatError(ValueError):
    """Raised when listing data does not match the expected mod shape."""
    pass


REQUIRED_FIELDS = (
    "name",
    "stars",
    "date_tt",
    "desc",
    "link",
    "repo",
    "delta_ago",
    "contents",
    "assets",
)
TEXT_FIELDS = ("name", "desc", "link", "repo", "delta_ago")
OPTIONAL_TEXT_FIELDS = ("wiki", "icon_raw")
TAG_FIELDS = ("contents", "assets")
NUMBER_FIELDS = ("stars", "date_tt")


@dataclass(frozen=True)
class Mod:
    """Immutable mod entry as published in the listing data file."""

    name: str
    stars: int
    date_tt: float
    desc: str
    link: str
    repo: str
    delta_ago: str
    wiki: Optional[str] = None
    icon_raw: Optional[str] = None
    contents: Tuple[str, ...] = field(default_factory=tuple)
    assets: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Mod":
        """
        Build a mod from one decoded JSON object.

        Args:
            data: Object with the listing field names (name, stars, date_tt, ...)

        Returns:
            Mod entity

        Raises:
            ListingFormatError: If the object is not a mapping, misses a required
                field or carries a value of the wrong type
        """
        if not isinstance(data, dict):
            raise ListingFormatError(f"Expected a mod object, got {type(data).__name__}")

        missing = [key for key in REQUIRED_FIELDS if key not in data]
        if missing:
            raise ListingFormatError(f"Mod entry is missing fields: {', '.join(missing)}")

        for key in TEXT_FIELDS:
            if not isinstance(data[key], str):
                raise ListingFormatError(f"Mod field {key!r} must be a string, got {data[key]!r}")

        for key in OPTIONAL_TEXT_FIELDS:
            value = data.get(key)
            if value is not None and not isinstance(value, str):
                raise ListingFormatError(f"Mod field {key!r} must be a string or null, got {value!r}")

        for key in TAG_FIELDS:
            tags = data[key]
            if not isinstance(tags, list) or not all(isinstance(tag, str) for tag in tags):
                raise ListingFormatError(f"Mod field {key!r} must be a list of strings, got {tags!r}")

        for key in NUMBER_FIELDS:
            value = data[key]
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ListingFormatError(f"Mod {data['name']!r} has non-numeric {key}: {value!r}")

        return cls(
            name=data["name"],
            stars=data["stars"],
            date_tt=float(data["date_tt"]),
            desc=data["desc"],
            link=data["link"],
            repo=data["repo"],
            delta_ago=data["delta_ago"],
            wiki=data.get("wiki"),
            icon_raw=data.get("icon_raw"),
            contents=tuple(data["contents"]),
            assets=tuple(data["assets"]),
        )

    @property
    def display_name(self) -> str:
        """Name after the last path separator, for entries named by file path."""
        return self.name.rsplit("/", 1)[-1]

    @property
    def endpoint_href(self) -> str:
        """Link to the locally rendered README page of this mod."""
        return f"../m/{self.repo.replace('/', '--')}.html"

    @property
    def committed_at(self) -> datetime:
        # date_tt is milliseconds since the epoch
        millis = int(self.date_tt)
        return datetime(1970, 1, 1, tzinfo=timezone.utc) + timedelta(
            seconds=millis // 1000, milliseconds=millis % 1000
        )


class SortOrder(Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


@dataclass(frozen=True)
class SortDirective:
    """Remembered sort state of the listing. Only sorting by stars exists."""

    order: SortOrder
    key: str = "stars"


STARS_ASCENDING = SortDirective(SortOrder.ASCENDING)
STARS_DESCENDING = SortDirective(SortOrder.DESCENDING)
