from __future__ import annotations

from .markup import BOLD_TAG, ITALIC_TAG

EMPHASIS_DELIMITERS = frozenset("*_")


def classify(delimiter: str, count: int) -> str | None:
    """Return the element tag for an emphasis run, or None for unmapped delimiters.

    One delimiter is italic and two are bold. Longer runs fall back to italic.
    """
    if delimiter not in EMPHASIS_DELIMITERS:
        return None
    if count == 2:
        return BOLD_TAG
    return ITALIC_TAG
