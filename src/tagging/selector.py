"""Turn ranked category matches into a bounded, diverse list of tags."""
from dataclasses import dataclass

from src.tagging.matcher import Match
from src.tagging.taxonomy import TaxonomyStore

DEFAULT_MAX_TAGS = 8
PER_DIMENSION_CAP = 2


@dataclass(frozen=True)
class Tag:
    id: str
    text: str
    text_en: str
    dimension: str
    category: str
    confidence: float
    is_manual: bool = False


def select_tags(
    matches: list[Match],
    taxonomy: TaxonomyStore,
    max_tags: int = DEFAULT_MAX_TAGS,
    per_dimension_cap: int = PER_DIMENSION_CAP,
) -> list[Tag]:
    """Select tags from matches sorted by confidence desc.

    At most per_dimension_cap tags per dimension and max_tags overall.
    Matches over a dimension's cap are dropped, not deferred.
    """
    tags: list[Tag] = []
    dimension_counts: dict[str, int] = {}

    for match in matches:
        if len(tags) >= max_tags:
            break

        dimension = taxonomy.dimension_for(match.category.id)
        if dimension is None:
            continue
        if dimension_counts.get(dimension.id, 0) >= per_dimension_cap:
            continue

        dimension_counts[dimension.id] = dimension_counts.get(dimension.id, 0) + 1
        tags.append(
            Tag(
                id=f"{dimension.id}-{match.category.id}",
                text=match.category.name,
                text_en=match.category.name_en,
                dimension=dimension.id,
                category=match.category.id,
                confidence=match.confidence,
                is_manual=False,
            )
        )

    return tags
