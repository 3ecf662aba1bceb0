"""Frequency-based keyword extraction."""
import re
from collections import Counter
from typing import Iterable

DEFAULT_KEYWORD_LIMIT = 10

# Anything that is not a CJK ideograph, ASCII letter, digit or whitespace
_NON_WORD = re.compile(r"[^\u4e00-\u9fffa-zA-Z0-9\s]")


def extract_keywords(
    content: str,
    limit: int = DEFAULT_KEYWORD_LIMIT,
    stop_words: Iterable[str] = (),
) -> list[str]:
    """Return the most frequent tokens in content.

    Tokens are lower-cased, single-character tokens are dropped, and ties
    keep the order of first occurrence.
    """
    if limit <= 0:
        return []

    stop = set(stop_words)
    cleaned = _NON_WORD.sub(" ", content.lower())
    words = [w for w in cleaned.split() if len(w) > 1 and w not in stop]

    # Counter preserves insertion order and most_common sorts stably
    return [word for word, _count in Counter(words).most_common(limit)]
