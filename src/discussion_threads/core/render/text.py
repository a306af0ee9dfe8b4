"""Small text formatting helpers."""


def pluralize(count: int, word: str) -> str:
    """Return ``"1 comment"`` / ``"5 comments"`` style labels."""
    if count == 1:
        return f"{count} {word}"
    return f"{count} {word}s"
