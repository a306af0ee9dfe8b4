"""Protocols for dependency injection between providers and the network."""

from typing import Any, Protocol, runtime_checkable

from discussion_threads.models.thread import Thread


@runtime_checkable
class FetcherProtocol(Protocol):
    """Protocol for page fetchers used by providers."""

    def fetch(self, url: str) -> str:
        """Return the body of the page at ``url``."""
        ...


@runtime_checkable
class ProviderProtocol(Protocol):
    """Protocol for discussion sources.

    Item ids are provider specific (an int for Hacker News, a short id string
    for Lobsters) and only need to round-trip through ``fetch_thread``.
    """

    name: str
    theme: str

    def is_match(self, url: str) -> bool:
        """Whether ``url`` belongs to this source."""
        ...

    def extract_id(self, url: str) -> Any:
        """Parse the item id out of a discussion URL."""
        ...

    def extract_id_from_content(self, content: str) -> Any:
        """Find an embedded discussion link in free text and return its item id."""
        ...

    def fetch_thread(self, item_id: Any) -> Thread:
        """Fetch and parse a discussion thread."""
        ...
