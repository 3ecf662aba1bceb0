"""Tag suggestions borrowed from similar content items."""
from typing import Iterable, NamedTuple, Sequence

DEFAULT_SIMILARITY_THRESHOLD = 0.3
DEFAULT_SIMILAR_TAG_LIMIT = 5


class CorpusEntry(NamedTuple):
    content: str
    tags: Sequence[str]


def content_similarity(content1: str, content2: str) -> float:
    """Jaccard similarity of the lower-cased whitespace token sets."""
    words1 = set(content1.lower().split())
    words2 = set(content2.lower().split())

    union = words1 | words2
    if not union:
        return 0.0
    return len(words1 & words2) / len(union)


def similar_tags(
    current_content: str,
    corpus: Iterable[tuple[str, Sequence[str]]],
    threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
    limit: int = DEFAULT_SIMILAR_TAG_LIMIT,
) -> list[str]:
    """Collect tags from corpus entries more similar than threshold.

    Returns at most limit tags, deduplicated, in first-seen order.
    """
    suggestions: dict[str, None] = {}

    for content, tags in corpus:
        if content_similarity(current_content, content) > threshold:
            for tag in tags:
                suggestions.setdefault(tag, None)

    return list(suggestions)[:max(limit, 0)]
