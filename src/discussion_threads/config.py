"""Configuration constants for discussion-threads."""

# Discussion page URLs; {} is replaced with the item id.
HN_ITEM_URL: str = "https://news.ycombinator.com/item?id={}"
LOBSTERS_STORY_URL: str = "https://lobste.rs/s/{}"

# Seconds before a page fetch is abandoned.
HTTP_TIMEOUT: float = 30.0

USER_AGENT: str = "discussion-threads/0.1 (+https://github.com/discussion-threads)"

# Hacker News indents each comment level by this many pixels.
HN_INDENT_WIDTH: int = 40

# Cache location, used only when --cache is passed.
PAGE_CACHE_PREFIX: str = "/tmp/discussion-threads-cache/page-"

# Source tags with their own theme class. Anything else renders as DEFAULT_THEME.
THEMES: dict[str, str] = {
    "hn": "hn",
    "lobsters": "lobsters",
}
DEFAULT_THEME: str = "generic"
