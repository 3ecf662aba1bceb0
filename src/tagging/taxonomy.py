"""Multi-dimensional tagging taxonomy.

The taxonomy is read-only configuration: dimensions (genre, mood, scene,
style) each own an ordered list of categories, and each category carries
the keywords used for matching plus a weight that scales its confidence.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional

from src.tagging.errors import TaxonomyConfigError

logger = logging.getLogger("smart_tags.tagging.taxonomy")

DEFAULT_TAG_COLOR = "#6B7280"
DEFAULT_TAG_ICON = "Tag"
MAX_CATEGORY_WEIGHT = 1.5


@dataclass(frozen=True)
class Category:
    id: str
    name: str
    name_en: str
    description: str
    keywords: tuple[str, ...]
    weight: float = 1.0


@dataclass(frozen=True)
class Dimension:
    id: str
    name: str
    name_en: str
    description: str
    color: str
    icon: str
    categories: tuple[Category, ...]


TAXONOMY_DATA: list[dict[str, Any]] = [
    {
        "id": "genre",
        "name": "体裁",
        "name_en": "Genre",
        "description": "内容的文体类型和表现形式",
        "color": "#3B82F6",
        "icon": "BookOpen",
        "categories": [
            {
                "id": "creative-writing",
                "name": "创意写作",
                "name_en": "Creative Writing",
                "description": "小说、诗歌、散文等文学创作",
                "keywords": ["小说", "诗歌", "散文", "故事", "创作", "novel", "poetry", "story", "文学"],
            },
            {
                "id": "technical-writing",
                "name": "技术写作",
                "name_en": "Technical Writing",
                "description": "技术文档、教程、说明书等",
                "keywords": ["技术", "文档", "教程", "说明", "technical", "documentation", "tutorial"],
            },
            {
                "id": "business-writing",
                "name": "商务写作",
                "name_en": "Business Writing",
                "description": "商业计划、报告、邮件等",
                "keywords": ["商务", "商业", "报告", "计划", "business", "report", "plan", "邮件"],
            },
            {
                "id": "academic-writing",
                "name": "学术写作",
                "name_en": "Academic Writing",
                "description": "论文、研究报告、学术文章",
                "keywords": ["学术", "论文", "研究", "academic", "research", "paper", "科研"],
            },
        ],
    },
    {
        "id": "mood",
        "name": "情绪",
        "name_en": "Mood",
        "description": "内容传达的情感基调和氛围",
        "color": "#EF4444",
        "icon": "Heart",
        "categories": [
            {
                "id": "positive",
                "name": "积极",
                "name_en": "Positive",
                "description": "乐观、振奋、鼓舞人心的内容",
                "keywords": ["积极", "乐观", "振奋", "鼓舞", "positive", "optimistic", "开心", "快乐"],
            },
            {
                "id": "neutral",
                "name": "中性",
                "name_en": "Neutral",
                "description": "客观、平和、不带强烈情感色彩",
                "keywords": ["中性", "客观", "平和", "neutral", "objective", "理性", "冷静"],
            },
            {
                "id": "serious",
                "name": "严肃",
                "name_en": "Serious",
                "description": "正式、庄重、专业的语调",
                "keywords": ["严肃", "正式", "庄重", "serious", "formal", "专业", "权威"],
            },
            {
                "id": "creative",
                "name": "创意",
                "name_en": "Creative",
                "description": "富有想象力、创新性的表达",
                "keywords": ["创意", "创新", "想象", "creative", "innovative", "艺术", "灵感"],
            },
        ],
    },
    {
        "id": "scene",
        "name": "场景",
        "name_en": "Scene",
        "description": "内容适用的具体使用场景",
        "color": "#10B981",
        "icon": "MapPin",
        "categories": [
            {
                "id": "work",
                "name": "工作",
                "name_en": "Work",
                "description": "职场、办公、商务环境",
                "keywords": ["工作", "职场", "办公", "work", "office", "business", "会议"],
            },
            {
                "id": "education",
                "name": "教育",
                "name_en": "Education",
                "description": "学习、教学、培训场景",
                "keywords": ["教育", "学习", "教学", "education", "learning", "teaching", "培训"],
            },
            {
                "id": "personal",
                "name": "个人",
                "name_en": "Personal",
                "description": "个人生活、兴趣爱好",
                "keywords": ["个人", "生活", "兴趣", "personal", "life", "hobby", "日常"],
            },
            {
                "id": "social",
                "name": "社交",
                "name_en": "Social",
                "description": "社交媒体、交流互动",
                "keywords": ["社交", "交流", "互动", "social", "communication", "媒体", "分享"],
            },
        ],
    },
    {
        "id": "style",
        "name": "风格",
        "name_en": "Style",
        "description": "内容的表达风格和语言特色",
        "color": "#8B5CF6",
        "icon": "Palette",
        "categories": [
            {
                "id": "concise",
                "name": "简洁",
                "name_en": "Concise",
                "description": "简明扼要、直接有效",
                "keywords": ["简洁", "简明", "直接", "concise", "brief", "direct", "高效"],
            },
            {
                "id": "detailed",
                "name": "详细",
                "name_en": "Detailed",
                "description": "详尽全面、深入分析",
                "keywords": ["详细", "详尽", "全面", "detailed", "comprehensive", "深入", "完整"],
            },
            {
                "id": "conversational",
                "name": "对话式",
                "name_en": "Conversational",
                "description": "轻松自然、如同对话",
                "keywords": ["对话", "轻松", "自然", "conversational", "casual", "友好", "亲切"],
            },
            {
                "id": "professional",
                "name": "专业",
                "name_en": "Professional",
                "description": "专业术语、权威表达",
                "keywords": ["专业", "权威", "术语", "professional", "authoritative", "正式", "规范"],
            },
        ],
    },
]


class TaxonomyStore:
    """Immutable lookup over a validated list of dimensions."""

    def __init__(self, dimensions: Iterable[Dimension]):
        self._dimensions = tuple(dimensions)
        self._validate()

        self._categories = tuple(
            category for dimension in self._dimensions for category in dimension.categories
        )
        self._category_index = {c.id: c for c in self._categories}
        self._owner_index = {
            category.id: dimension
            for dimension in self._dimensions
            for category in dimension.categories
        }
        self._dimension_index = {d.id: d for d in self._dimensions}

    def _validate(self) -> None:
        seen_dimensions: set[str] = set()
        seen_categories: dict[str, str] = {}

        for dimension in self._dimensions:
            if dimension.id in seen_dimensions:
                raise TaxonomyConfigError(f"Duplicate dimension id: {dimension.id!r}")
            seen_dimensions.add(dimension.id)

            for category in dimension.categories:
                owner = seen_categories.get(category.id)
                if owner is not None:
                    raise TaxonomyConfigError(
                        f"Duplicate category id {category.id!r} "
                        f"in dimensions {owner!r} and {dimension.id!r}"
                    )
                seen_categories[category.id] = dimension.id

                if not category.keywords:
                    raise TaxonomyConfigError(f"Category {category.id!r} has no keywords")
                if not 0 < category.weight <= MAX_CATEGORY_WEIGHT:
                    raise TaxonomyConfigError(
                        f"Category {category.id!r} weight {category.weight} "
                        f"outside (0, {MAX_CATEGORY_WEIGHT}]"
                    )

    @property
    def dimensions(self) -> tuple[Dimension, ...]:
        return self._dimensions

    @property
    def categories(self) -> tuple[Category, ...]:
        """All categories across dimensions, in taxonomy order."""
        return self._categories

    def get_category(self, category_id: str) -> Optional[Category]:
        return self._category_index.get(category_id)

    def get_dimension(self, dimension_id: str) -> Optional[Dimension]:
        return self._dimension_index.get(dimension_id)

    def dimension_for(self, category_id: str) -> Optional[Dimension]:
        """Return the dimension that owns the given category, or None."""
        return self._owner_index.get(category_id)

    def tag_color(self, dimension_id: str) -> str:
        dimension = self.get_dimension(dimension_id)
        return dimension.color if dimension else DEFAULT_TAG_COLOR

    def tag_icon(self, dimension_id: str) -> str:
        dimension = self.get_dimension(dimension_id)
        return dimension.icon if dimension else DEFAULT_TAG_ICON


def _build_category(raw: Mapping[str, Any]) -> Category:
    return Category(
        id=raw["id"],
        name=raw["name"],
        name_en=raw.get("name_en", raw["name"]),
        description=raw.get("description", ""),
        keywords=tuple(raw.get("keywords", ())),
        weight=float(raw.get("weight", 1.0)),
    )


def load_taxonomy(data: Iterable[Mapping[str, Any]]) -> TaxonomyStore:
    """Build a TaxonomyStore from plain dimension mappings.

    Raises TaxonomyConfigError for malformed data, including missing
    required fields.
    """
    try:
        dimensions = [
            Dimension(
                id=raw["id"],
                name=raw["name"],
                name_en=raw.get("name_en", raw["name"]),
                description=raw.get("description", ""),
                color=raw.get("color", DEFAULT_TAG_COLOR),
                icon=raw.get("icon", DEFAULT_TAG_ICON),
                categories=tuple(_build_category(c) for c in raw.get("categories", ())),
            )
            for raw in data
        ]
    except KeyError as e:
        raise TaxonomyConfigError(f"Missing taxonomy field: {e.args[0]}") from e

    store = TaxonomyStore(dimensions)
    logger.info(
        "Loaded taxonomy: %d dimensions, %d categories",
        len(store.dimensions),
        len(store.categories),
    )
    return store


def default_taxonomy() -> TaxonomyStore:
    """Return a store built from the bundled taxonomy data."""
    return load_taxonomy(TAXONOMY_DATA)
