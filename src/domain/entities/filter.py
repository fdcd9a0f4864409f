"""Saved search filter domain entity and the default filter set."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

DEFAULT_FILTER_CATEGORY = "Search"

# Order is part of the contract: clients rely on these names and positions.
DEFAULT_FILTERS: tuple[tuple[str, str], ...] = (
    ("Inbox", "in:inbox"),
    ("Continue Reading", "in:inbox sort:read-desc is:unread"),
    ("Non-Feed Items", "in:library"),
    ("Highlights", "has:highlights mode:highlights"),
    ("Unlabeled", "no:label"),
    ("Oldest First", "sort:saved-asc"),
    ("Files", "type:file"),
    ("Archived", "in:archive"),
)


@dataclass
class Filter:
    """A named, positioned saved search belonging to a user."""

    user_id: UUID
    name: str
    filter: str
    position: int
    id: UUID = field(default_factory=uuid4)
    category: str = DEFAULT_FILTER_CATEGORY
    default_filter: bool = False
    visible: bool = True
    description: str | None = None
    folder: str | None = None
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)


def build_default_filters(user_id: UUID) -> list[Filter]:
    """Build the default saved searches for a new user."""
    return [
        Filter(
            user_id=user_id,
            name=name,
            filter=query,
            position=position,
            category=DEFAULT_FILTER_CATEGORY,
            default_filter=True,
        )
        for position, (name, query) in enumerate(DEFAULT_FILTERS)
    ]
