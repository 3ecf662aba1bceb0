"""Keyword matching of content against taxonomy categories."""
import unicodedata
from dataclasses import dataclass
from typing import Iterable

from src.tagging.taxonomy import Category


@dataclass(frozen=True)
class Match:
    category: Category
    confidence: float


def fold_text(text: str) -> str:
    """Fold width and case so full-width and mixed-case text compare equal."""
    return unicodedata.normalize("NFKC", text).casefold()


def matched_keywords(content: str, category: Category) -> list[str]:
    """Return the category's keywords found in content, in keyword order."""
    folded = fold_text(content)
    return [kw for kw in category.keywords if fold_text(kw) in folded]


def match_categories(content: str, categories: Iterable[Category]) -> list[Match]:
    """Score every category against content.

    Confidence is the fraction of a category's keywords present in the
    content, scaled by its weight and capped at 1.0. Categories with no
    hits are left out. Sorted by confidence desc, taxonomy order on ties.
    """
    if not content:
        return []

    folded = fold_text(content)
    matches: list[Match] = []

    for category in categories:
        match_count = sum(1 for kw in category.keywords if fold_text(kw) in folded)
        if match_count == 0:
            continue
        confidence = min(1.0, match_count / len(category.keywords) * category.weight)
        matches.append(Match(category=category, confidence=confidence))

    matches.sort(key=lambda m: m.confidence, reverse=True)
    return matches
