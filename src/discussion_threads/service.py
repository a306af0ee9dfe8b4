"""Route a feed item to its provider, fetch the thread and render it."""

from loguru import logger

from discussion_threads.core.render.html import render_thread
from discussion_threads.core.tree.reconcile import reconcile_thread
from discussion_threads.errors import MalformedInputError, ProviderError
from discussion_threads.models.thread import Thread
from discussion_threads.providers.registry import ProviderRegistry


class DiscussionService:
    """End-to-end pipeline: provider → reconciler → renderer.

    Failures never produce partial markup. A thread that cannot be fetched or
    parsed yields None and a warning, and the host decides what to show
    instead (typically a plain link to the discussion).
    """

    def __init__(self, registry: ProviderRegistry) -> None:
        self.registry = registry

    def get_thread(self, url: str, content: str = "") -> Thread | None:
        """Fetch the discussion for a feed item, with comments in nested shape."""
        resolved = self.registry.resolve(url, content)
        if resolved is None:
            logger.debug("No provider for {}", url)
            return None
        provider, item_id = resolved

        try:
            thread = provider.fetch_thread(item_id)
            return reconcile_thread(thread)
        except (ProviderError, MalformedInputError) as exc:
            logger.warning("{} discussion {!r} unavailable: {}", provider.name, item_id, exc)
            return None

    def render(self, url: str, content: str = "") -> str | None:
        """HTML fragment for a feed item's discussion, or None."""
        thread = self.get_thread(url, content)
        if thread is None:
            return None
        return render_thread(thread)
