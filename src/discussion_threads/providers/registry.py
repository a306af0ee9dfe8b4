"""Explicit registry of discussion providers."""

from collections.abc import Iterable
from typing import Any

from loguru import logger

from discussion_threads.errors import ItemIdError
from discussion_threads.protocols import FetcherProtocol, ProviderProtocol
from discussion_threads.providers.hackernews import HackerNewsProvider
from discussion_threads.providers.lobsters import LobstersProvider


class ProviderRegistry:
    """Ordered set of providers, consulted first-match-wins."""

    def __init__(self, providers: Iterable[ProviderProtocol]) -> None:
        self._providers: tuple[ProviderProtocol, ...] = tuple(providers)

    @property
    def providers(self) -> tuple[ProviderProtocol, ...]:
        return self._providers

    def find_by_url(self, url: str) -> ProviderProtocol | None:
        """First provider that recognizes ``url``."""
        for provider in self._providers:
            if provider.is_match(url):
                return provider
        return None

    def resolve(self, url: str, content: str = "") -> tuple[ProviderProtocol, Any] | None:
        """Find the provider and item id for a feed item.

        The item's own URL is tried first. Failing that, ``content`` (e.g. the
        feed item's description) is scanned for an embedded discussion link,
        which is how link-aggregator feeds point at their comment pages.

        Returns:
            ``(provider, item_id)``, or None when no provider claims the item.
        """
        for provider in self._providers:
            if not provider.is_match(url):
                continue
            try:
                return provider, provider.extract_id(url)
            except ItemIdError as exc:
                logger.debug("{} matched {} but: {}", provider.name, url, exc)

        if content:
            for provider in self._providers:
                try:
                    return provider, provider.extract_id_from_content(content)
                except ItemIdError:
                    continue
        return None


def default_registry(fetcher: FetcherProtocol) -> ProviderRegistry:
    """Registry with every built-in provider, sharing one fetcher."""
    return ProviderRegistry([HackerNewsProvider(fetcher), LobstersProvider(fetcher)])
