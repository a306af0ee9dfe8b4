"""Errors raised by discussion providers and the reconciler."""


class DiscussionError(Exception):
    """Base error for the discussion package."""

    pass


class MalformedInputError(DiscussionError, ValueError):
    """Comment sequence cannot be interpreted (e.g. negative depth)."""

    def __init__(self, comment_id: str, depth: int):
        self.comment_id = comment_id
        self.depth = depth
        super().__init__(f"Comment {comment_id!r} has invalid depth {depth}")


class ItemIdError(DiscussionError, ValueError):
    """Base error for item id extraction."""

    pass


class ItemIdNotFoundError(ItemIdError):
    """No item reference found where one was expected."""

    def __init__(self, provider: str, text: str):
        self.provider = provider
        super().__init__(f"No {provider} item id found in: {text[:200]}")


class MalformedItemIdError(ItemIdError):
    """An item reference was found but its token is not a valid id."""

    def __init__(self, provider: str, token: str):
        self.provider = provider
        self.token = token
        super().__init__(f"Invalid {provider} item id: {token!r}")


class ProviderError(DiscussionError):
    """Base error for failures inside a provider."""

    pass


class FetchFailedError(ProviderError):
    """Network error or unexpected HTTP status while fetching a page."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch {url}: {reason}")


class ParseFailedError(ProviderError):
    """Fetched page does not have the expected structure."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to parse {url}: {reason}")
