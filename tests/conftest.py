"""Shared test fixtures for the smart tag engine tests."""
import pytest

from src.app.config import Settings
from src.tagging.analyzer import ContentAnalyzer
from src.tagging.taxonomy import Category, Dimension, TaxonomyStore, default_taxonomy


@pytest.fixture()
def settings():
    """Default settings, isolated from any .env file or environment."""
    return Settings(_env_file=None)


@pytest.fixture()
def taxonomy():
    return default_taxonomy()


@pytest.fixture()
def analyzer(taxonomy, settings):
    return ContentAnalyzer(taxonomy=taxonomy, settings=settings)


@pytest.fixture()
def small_taxonomy():
    """Three dimensions with a handful of English keyword categories."""
    return TaxonomyStore(
        [
            Dimension(
                id="genre",
                name="体裁",
                name_en="Genre",
                description="",
                color="#3B82F6",
                icon="BookOpen",
                categories=(
                    Category("fiction", "小说", "Fiction", "", ("story", "novel", "plot", "hero")),
                    Category("poetry", "诗歌", "Poetry", "", ("poem", "verse")),
                    Category("essay", "散文", "Essay", "", ("essay", "story")),
                ),
            ),
            Dimension(
                id="mood",
                name="情绪",
                name_en="Mood",
                description="",
                color="#EF4444",
                icon="Heart",
                categories=(
                    Category("happy", "开心", "Happy", "", ("happy", "joy"), weight=1.5),
                    Category("calm", "平静", "Calm", "", ("calm", "quiet", "still")),
                ),
            ),
            Dimension(
                id="audience",
                name="受众",
                name_en="Audience",
                description="",
                color="#F59E0B",
                icon="Users",
                categories=(
                    Category("kids", "儿童", "Kids", "", ("kids", "children")),
                ),
            ),
        ]
    )
