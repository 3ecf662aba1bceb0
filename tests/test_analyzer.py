"""Tests for the content analyzer entry point."""
from collections import Counter

import pytest

from src.app.config import Settings
from src.tagging.analyzer import (
    FALLBACK_REASON,
    ContentAnalyzer,
    suggested_tag_count,
)
from src.tagging.selector import Tag

TECH_DOC = "这是一篇技术文档"
TECH_TUTORIAL = "技术文档教程说明 technical"
RICH_CONTENT = (
    "小说 诗歌 故事 技术 文档 教程 商务 报告 学术 论文 "
    "积极 乐观 客观 理性 严肃 正式 创意 创新 "
    "工作 职场 教育 学习 个人 生活 社交 交流 "
    "简洁 简明 详细 全面 对话 轻松 专业 权威"
)


def _smart_tag() -> Tag:
    return Tag(
        id="genre-technical-writing",
        text="技术写作",
        text_en="Technical Writing",
        dimension="genre",
        category="technical-writing",
        confidence=0.8,
    )


# ── analyze ──────────────────────────────────────────────────────


class TestAnalyze:
    @pytest.mark.parametrize("content", ["", "   ", "\n\t"])
    def test_blank_content(self, analyzer, content):
        analysis = analyzer.analyze(content)
        assert analysis.tags == []
        assert analysis.confidence == 0.0
        assert analysis.keywords == []
        assert analysis.by_dimension == {"genre": [], "mood": [], "scene": [], "style": []}

    def test_below_engine_floor_is_filtered(self, analyzer):
        """2/7 is selected internally but falls under the 0.3 floor."""
        analysis = analyzer.analyze(TECH_DOC)
        assert analysis.tags == []
        assert analysis.confidence == pytest.approx(2 / 7)
        assert analysis.by_dimension["genre"] == ["技术写作"]
        assert analysis.keywords == [TECH_DOC]

    def test_threshold_override(self, analyzer):
        analysis = analyzer.analyze(TECH_DOC, threshold=0.25)
        assert [t.id for t in analysis.tags] == ["genre-technical-writing"]
        assert analysis.tags[0].confidence == pytest.approx(2 / 7)

    def test_threshold_from_settings(self, taxonomy):
        settings = Settings(_env_file=None, confidence_threshold=0.2)
        analysis = ContentAnalyzer(taxonomy, settings).analyze(TECH_DOC)
        assert len(analysis.tags) == 1

    def test_bounds_hold(self, analyzer):
        analysis = analyzer.analyze(RICH_CONTENT)
        assert 0 < len(analysis.tags) <= 8
        assert all(n <= 2 for n in Counter(t.dimension for t in analysis.tags).values())
        assert all(t.confidence >= 0.3 for t in analysis.tags)

    def test_max_tags_override(self, analyzer):
        analysis = analyzer.analyze(RICH_CONTENT, max_tags=3, threshold=0.0)
        assert len(analysis.tags) == 3

    def test_deterministic(self, analyzer):
        assert analyzer.analyze(RICH_CONTENT) == analyzer.analyze(RICH_CONTENT)

    def test_dimension_cap_not_configurable_from_env(self, monkeypatch, taxonomy):
        """The two-per-dimension cap holds whatever the environment says."""
        monkeypatch.setenv("SMART_TAGS_PER_DIMENSION_CAP", "8")
        analysis = ContentAnalyzer(taxonomy).analyze(RICH_CONTENT, threshold=0.0)
        counts = Counter(t.dimension for t in analysis.tags)
        assert len(analysis.tags) == 8
        assert max(counts.values()) <= 2

    def test_each_call_returns_fresh_collections(self, analyzer):
        first = analyzer.analyze(RICH_CONTENT)
        first.tags.clear()
        first.by_dimension["genre"].append("extra")
        second = analyzer.analyze(RICH_CONTENT)
        assert second.tags
        assert "extra" not in second.by_dimension["genre"]

    def test_confidence_is_mean_of_selected(self, small_taxonomy, settings):
        analysis = ContentAnalyzer(small_taxonomy, settings).analyze("kids story")
        assert analysis.confidence == pytest.approx((0.5 + 0.5 + 0.25) / 3)
        assert [t.category for t in analysis.tags] == ["essay", "kids"]

    def test_legacy_grouping_drops_extra_dimensions(self, small_taxonomy, settings):
        analysis = ContentAnalyzer(small_taxonomy, settings).analyze("kids story")
        assert analysis.by_dimension == {
            "genre": ["散文", "小说"],
            "mood": [],
            "scene": [],
            "style": [],
        }
        assert analysis.dimension_groups == {
            "genre": ["散文", "小说"],
            "mood": [],
            "audience": ["儿童"],
        }

    def test_default_taxonomy_and_settings(self):
        analyzer = ContentAnalyzer()
        assert len(analyzer.taxonomy.dimensions) == 4
        assert analyzer.settings.max_tags >= 1


# ── suggestions / recommend ──────────────────────────────────────


class TestSuggestions:
    def test_reason_names_matched_keywords(self, analyzer):
        suggestions = analyzer.suggestions(TECH_TUTORIAL)
        assert len(suggestions) == 1
        suggestion = suggestions[0]
        assert suggestion.tag.category == "technical-writing"
        assert suggestion.confidence == pytest.approx(5 / 7)
        assert suggestion.reason == "Detected keywords: 技术, 文档, 教程"
        assert suggestion.quality == "good"

    def test_reason_without_keywords(self, analyzer):
        assert analyzer.tag_reason(_smart_tag(), "nothing relevant") == (
            "Inferred from Genre characteristics"
        )

    def test_reason_for_unknown_category(self, analyzer):
        manual = analyzer.merge_manual([], ["custom"])[0]
        assert analyzer.tag_reason(manual, "custom") == FALLBACK_REASON

    def test_empty_content(self, analyzer):
        assert analyzer.suggestions("") == []


class TestRecommend:
    def test_display_floor_hides_weak_tags(self, analyzer):
        """The editor's 0.6 floor is stricter than the engine's 0.3 floor."""
        assert analyzer.analyze(TECH_DOC, threshold=0.25).tags
        assert analyzer.recommend(TECH_DOC) == []

    def test_strong_tag_shown(self, analyzer):
        shown = analyzer.recommend(TECH_TUTORIAL)
        assert [s.tag.id for s in shown] == ["genre-technical-writing"]

    def test_limit(self, taxonomy):
        settings = Settings(_env_file=None, display_threshold=0.0, max_suggestions=2)
        shown = ContentAnalyzer(taxonomy, settings).recommend(RICH_CONTENT)
        assert len(shown) == 2

    def test_overlong_content(self, analyzer):
        assert analyzer.recommend(TECH_TUTORIAL * 1000) == []

    def test_blank_content(self, analyzer):
        assert analyzer.recommend("  ") == []


# ── merge_manual ─────────────────────────────────────────────────


class TestMergeManual:
    def test_same_text_not_duplicated(self, analyzer):
        merged = analyzer.merge_manual([_smart_tag()], ["技术写作"])
        assert len(merged) == 1

    def test_matches_secondary_text_ignoring_case(self, analyzer):
        merged = analyzer.merge_manual([_smart_tag()], ["technical WRITING"])
        assert len(merged) == 1

    def test_appends_manual_tags(self, analyzer):
        merged = analyzer.merge_manual([_smart_tag()], ["技术写作", "My Tag", "my tag", "a/b"])
        assert len(merged) == 2
        manual = merged[1]
        assert manual == Tag(
            id="manual-1",
            text="My Tag",
            text_en="My Tag",
            dimension="custom",
            category="manual",
            confidence=1.0,
            is_manual=True,
        )

    def test_smart_tags_untouched(self, analyzer):
        smart = [_smart_tag()]
        analyzer.merge_manual(smart, ["extra"])
        assert smart == [_smart_tag()]

    def test_normalizes_whitespace(self, analyzer):
        merged = analyzer.merge_manual([], ["  deep   learning "])
        assert merged[0].text == "deep learning"


# ── helpers ──────────────────────────────────────────────────────


class TestHelpers:
    @pytest.mark.parametrize(
        "length,expected",
        [(0, 3), (99, 3), (100, 5), (299, 5), (300, 6), (599, 6), (600, 8), (5000, 8)],
    )
    def test_suggested_tag_count(self, analyzer, length, expected):
        assert suggested_tag_count("x" * length) == expected
        assert analyzer.suggested_tag_count("x" * length) == expected

    def test_extract_keywords_uses_settings_limit(self, taxonomy):
        settings = Settings(_env_file=None, keyword_limit=2)
        analyzer = ContentAnalyzer(taxonomy, settings)
        assert analyzer.extract_keywords("aa bb cc dd") == ["aa", "bb"]
        assert analyzer.extract_keywords("aa bb cc dd", limit=3) == ["aa", "bb", "cc"]

    def test_similar_tags(self, analyzer):
        corpus = [("write a poem", ["poetry"]), ("stock market news", ["finance"])]
        assert analyzer.similar_tags("write a poem", corpus) == ["poetry"]

    def test_tag_relevance(self, analyzer):
        assert analyzer.tag_relevance(TECH_DOC, _smart_tag()) == pytest.approx(2 / 7)

    def test_tag_relevance_unknown_category(self, analyzer):
        manual = analyzer.merge_manual([], ["custom"])[0]
        assert analyzer.tag_relevance("custom", manual) == 0.0
