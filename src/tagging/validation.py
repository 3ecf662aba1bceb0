"""Normalization and validation of tag text.

Applies to every user-editable tag, whether generated by the analyzer or
typed in by a user. Validation failures are returned as values, never
raised, so a batch can carry on past a bad tag.
"""
from dataclasses import dataclass
from typing import Iterable, Optional

DEFAULT_MAX_TAG_LENGTH = 20
DEFAULT_MAX_TAGS = 8
MAX_SPACES = 2
INVALID_CHARS = frozenset("<>{}[]\\/")

REASON_EMPTY = "empty tag"
REASON_TOO_LONG = "too long"
REASON_TOO_MANY_WORDS = "too many words"
REASON_INVALID_CHARS = "invalid characters"
REASON_DUPLICATE = "duplicate tag"
REASON_LIMIT_REACHED = "too many tags"


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    reason: Optional[str] = None


VALID = ValidationResult(valid=True)


def normalize_tag(tag: str, lowercase: bool = True) -> str:
    """Strip, collapse whitespace runs to one space, optionally lowercase."""
    normalized = " ".join(tag.split())
    return normalized.lower() if lowercase else normalized


def validate_tag(tag: str, max_length: int = DEFAULT_MAX_TAG_LENGTH) -> ValidationResult:
    """Check a tag against the formatting rules, first failure wins."""
    text = normalize_tag(tag, lowercase=False)

    if not text:
        return ValidationResult(False, REASON_EMPTY)
    if len(text) > max_length:
        return ValidationResult(False, REASON_TOO_LONG)
    if text.count(" ") > MAX_SPACES:
        return ValidationResult(False, REASON_TOO_MANY_WORDS)
    if any(ch in INVALID_CHARS for ch in text):
        return ValidationResult(False, REASON_INVALID_CHARS)
    return VALID


def process_tags(
    tags: Iterable[str],
    max_tags: int = DEFAULT_MAX_TAGS,
    max_length: int = DEFAULT_MAX_TAG_LENGTH,
    lowercase: bool = True,
) -> list[str]:
    """Normalize and validate a batch, dropping invalid tags and duplicates.

    Keeps input order and stops once max_tags tags are accepted.
    """
    accepted: list[str] = []
    if max_tags <= 0:
        return accepted

    seen: set[str] = set()
    for raw in tags:
        normalized = normalize_tag(raw, lowercase=lowercase)
        if not validate_tag(normalized, max_length=max_length).valid:
            continue
        if normalized in seen:
            continue
        seen.add(normalized)
        accepted.append(normalized)
        if len(accepted) >= max_tags:
            break

    return accepted


def add_tag(
    tags: Iterable[str],
    text: str,
    max_tags: int = DEFAULT_MAX_TAGS,
    max_length: int = DEFAULT_MAX_TAG_LENGTH,
) -> tuple[tuple[str, ...], ValidationResult]:
    """Add one user-typed tag to an existing list.

    Returns a new tuple (the input is never mutated) and the outcome.
    """
    current = tuple(tags)
    normalized = normalize_tag(text)

    result = validate_tag(normalized, max_length=max_length)
    if not result.valid:
        return current, result
    if normalized in current:
        return current, ValidationResult(False, REASON_DUPLICATE)
    if len(current) >= max_tags:
        return current, ValidationResult(False, REASON_LIMIT_REACHED)
    return current + (normalized,), VALID
