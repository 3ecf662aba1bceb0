"""Content analyzer: the public entry point of the tagging engine.

Runs the keyword matcher and the tag selector over a piece of content,
then layers on frequency keywords, manual tag merging, similar-content
suggestions and the reason strings shown next to each suggestion.
The analyzer holds only immutable taxonomy and settings, so one instance
can be shared across callers.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from src.app.config import Settings, get_settings
from src.tagging.keywords import extract_keywords
from src.tagging.matcher import match_categories, matched_keywords
from src.tagging.quality import evaluate_tag_quality
from src.tagging.selector import PER_DIMENSION_CAP, Tag, select_tags
from src.tagging.similarity import similar_tags
from src.tagging.taxonomy import TaxonomyStore, default_taxonomy
from src.tagging.validation import normalize_tag, validate_tag

logger = logging.getLogger("smart_tags.tagging.analyzer")

LEGACY_DIMENSIONS = ("genre", "mood", "scene", "style")
MANUAL_DIMENSION = "custom"
MANUAL_CATEGORY = "manual"
MAX_REASON_KEYWORDS = 3
FALLBACK_REASON = "Recommended from content analysis"


@dataclass
class ContentAnalysis:
    content: str
    tags: list[Tag] = field(default_factory=list)
    confidence: float = 0.0
    by_dimension: dict[str, list[str]] = field(default_factory=dict)
    dimension_groups: dict[str, list[str]] = field(default_factory=dict)
    keywords: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class TagSuggestion:
    tag: Tag
    reason: str
    confidence: float
    quality: str = ""


def suggested_tag_count(content: str) -> int:
    """Advisory tag count for content of this length."""
    length = len(content)
    if length < 100:
        return 3
    if length < 300:
        return 5
    if length < 600:
        return 6
    return 8


class ContentAnalyzer:
    def __init__(
        self,
        taxonomy: Optional[TaxonomyStore] = None,
        settings: Optional[Settings] = None,
    ):
        self.taxonomy = taxonomy if taxonomy is not None else default_taxonomy()
        self.settings = settings if settings is not None else get_settings()

    def _group_by_dimension(
        self, tags: list[Tag], dimension_ids: Iterable[str]
    ) -> dict[str, list[str]]:
        groups: dict[str, list[str]] = {d: [] for d in dimension_ids}
        for tag in tags:
            if tag.dimension in groups:
                groups[tag.dimension].append(tag.text)
        return groups

    def analyze(
        self,
        content: str,
        max_tags: Optional[int] = None,
        threshold: Optional[float] = None,
    ) -> ContentAnalysis:
        """Generate smart tags for content.

        Only tags at or above the confidence threshold are returned; the
        overall confidence and the dimension groupings are computed over
        every selected tag.
        """
        all_dimensions = [d.id for d in self.taxonomy.dimensions]

        if not content or not content.strip():
            return ContentAnalysis(
                content=content,
                by_dimension=self._group_by_dimension([], LEGACY_DIMENSIONS),
                dimension_groups=self._group_by_dimension([], all_dimensions),
            )

        if max_tags is None:
            max_tags = self.settings.max_tags
        if threshold is None:
            threshold = self.settings.confidence_threshold

        matches = match_categories(content, self.taxonomy.categories)
        selected = select_tags(
            matches,
            self.taxonomy,
            max_tags=max_tags,
            per_dimension_cap=PER_DIMENSION_CAP,
        )

        confidence = (
            sum(t.confidence for t in selected) / len(selected) if selected else 0.0
        )
        tags = [t for t in selected if t.confidence >= threshold]

        logger.debug(
            "Analyzed %d chars: %d matches, %d selected, %d above %.2f",
            len(content),
            len(matches),
            len(selected),
            len(tags),
            threshold,
        )

        return ContentAnalysis(
            content=content,
            tags=tags,
            confidence=confidence,
            by_dimension=self._group_by_dimension(selected, LEGACY_DIMENSIONS),
            dimension_groups=self._group_by_dimension(selected, all_dimensions),
            keywords=self.extract_keywords(content),
        )

    def tag_reason(self, tag: Tag, content: str) -> str:
        """Explain why a tag was suggested for content."""
        category = self.taxonomy.get_category(tag.category)
        if category is None:
            return FALLBACK_REASON

        found = matched_keywords(content, category)
        if found:
            return "Detected keywords: " + ", ".join(found[:MAX_REASON_KEYWORDS])

        dimension = self.taxonomy.get_dimension(tag.dimension)
        label = dimension.name_en if dimension else tag.dimension
        return f"Inferred from {label} characteristics"

    def suggestions(self, content: str) -> list[TagSuggestion]:
        analysis = self.analyze(content)
        return [
            TagSuggestion(
                tag=tag,
                reason=self.tag_reason(tag, content),
                confidence=tag.confidence,
                quality=evaluate_tag_quality(tag.confidence),
            )
            for tag in analysis.tags
        ]

    def recommend(self, content: str) -> list[TagSuggestion]:
        """Suggestions worth showing in a tag editor.

        Applies the stricter display threshold and the suggestion limit.
        Blank or over-long content gets no suggestions.
        """
        if not content or not content.strip():
            return []
        if len(content) > self.settings.max_analysis_length:
            logger.debug(
                "Skipping recommendations: %d chars exceeds %d",
                len(content),
                self.settings.max_analysis_length,
            )
            return []

        shown = [
            s for s in self.suggestions(content)
            if s.confidence >= self.settings.display_threshold
        ]
        return shown[: self.settings.max_suggestions]

    def merge_manual(self, smart_tags: Sequence[Tag], manual_tags: Iterable[str]) -> list[Tag]:
        """Append user-supplied tags to smart tags.

        Texts that match an existing tag's text or text_en (ignoring case)
        or fail validation are skipped.
        """
        merged: list[Tag] = list(smart_tags)
        known = {t.text.lower() for t in merged} | {t.text_en.lower() for t in merged}

        for index, raw in enumerate(manual_tags):
            text = normalize_tag(raw, lowercase=False)
            result = validate_tag(text, max_length=self.settings.max_tag_length)
            if not result.valid:
                logger.debug("Skipping manual tag %r: %s", raw, result.reason)
                continue
            if text.lower() in known:
                continue

            known.add(text.lower())
            merged.append(
                Tag(
                    id=f"manual-{index}",
                    text=text,
                    text_en=text,
                    dimension=MANUAL_DIMENSION,
                    category=MANUAL_CATEGORY,
                    confidence=1.0,
                    is_manual=True,
                )
            )

        return merged

    def extract_keywords(self, content: str, limit: Optional[int] = None) -> list[str]:
        return extract_keywords(content, self.settings.keyword_limit if limit is None else limit)

    def similar_tags(
        self,
        current_content: str,
        corpus: Iterable[tuple[str, Sequence[str]]],
    ) -> list[str]:
        return similar_tags(
            current_content,
            corpus,
            threshold=self.settings.similarity_threshold,
            limit=self.settings.similar_tag_limit,
        )

    def suggested_tag_count(self, content: str) -> int:
        return suggested_tag_count(content)

    def tag_relevance(self, content: str, tag: Tag) -> float:
        """Unweighted share of the tag's category keywords present in content."""
        category = self.taxonomy.get_category(tag.category)
        if category is None:
            return 0.0
        return len(matched_keywords(content, category)) / len(category.keywords)
