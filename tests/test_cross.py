"""Tests for cross-product aggregation."""

import pytest
from reviewhub.core.analyzer import analyze_all_reviews
from reviewhub.core.cross import (
    aggregate_factors,
    aspect_label,
    estimate_category_and_price_range,
    find_common_keywords,
    generate_cross_summary,
    generate_hints,
    normalize_for_grouping,
)
from reviewhub.core.models import (
    CrossFactor,
    Factor,
    ProductAnalysis,
    ProductAnalysisResult,
    ProductInfo,
    Review,
)


def _result(name, price=0, negatives=(), positives=(), requests=(), total_reviews=0):
    return ProductAnalysisResult(
        product_info=ProductInfo(name=name, price=price),
        analysis=ProductAnalysis(
            total_reviews=total_reviews,
            top_negative_sentences=list(negatives),
            top_positive_sentences=list(positives),
            improvement_requests=list(requests),
        ),
    )


@pytest.fixture
def earphone_results():
    """Three earphones sharing a battery complaint; two also ask for a fix."""
    complaint = Review("バッテリーが持たない。", 2)
    praise = Review("音質がとても良いです。", 5)
    wish = Review("バッテリーの持ちをもう少し改善してほしい。", 3)
    products = [
        (ProductInfo("Aイヤホン Pro", 1000), [complaint, praise, wish]),
        (ProductInfo("Bイヤホン Lite", 2000), [complaint, praise, wish]),
        (ProductInfo("Cイヤホン X", 3000), [complaint, praise]),
    ]
    return [
        ProductAnalysisResult(product_info=info, analysis=analyze_all_reviews(reviews))
        for info, reviews in products
    ]


class TestCategoryAndPrice:
    """Test category inference from product names."""

    def test_shared_katakana_token(self):
        assert find_common_keywords(["Aイヤホン Pro", "Bイヤホン Lite", "Cイヤホン X"]) == ["イヤホン"]

    def test_single_product_has_no_category(self):
        category, _ = estimate_category_and_price_range([ProductInfo("ワイヤレスイヤホン", 1000)])
        assert category == "unknown"

    def test_price_range_ignores_missing_prices(self):
        _, price_range = estimate_category_and_price_range([
            ProductInfo("A", 1000), ProductInfo("B", 0), ProductInfo("C", 3000),
        ])
        assert (price_range.min, price_range.max) == (1000, 3000)

    def test_no_prices(self):
        _, price_range = estimate_category_and_price_range([ProductInfo("A"), ProductInfo("B")])
        assert (price_range.min, price_range.max) == (0, 0)


@pytest.mark.parametrize("positive,negative,expected", [
    (3, 2, "neutral"),
    (4, 2, "positive"),
    (2, 4, "negative"),
    (1, 0, "positive"),
    (0, 0, "neutral"),
])
def test_aspect_label(positive, negative, expected):
    """Test the 1.5x dominance rule."""
    assert aspect_label(positive, negative) == expected


def test_normalize_for_grouping():
    assert normalize_for_grouping("バッテリーが持たないです。") == "バッテリーが持たない"
    assert len(normalize_for_grouping("あ" * 40)) == 20


def test_aggregate_factors_prefers_spread_over_volume():
    """Test that a complaint from two products outranks a frequent single-product one."""
    results = [
        _result("A", negatives=[Factor("接続が切れる。", "操作性", count=5)]),
        _result("B", negatives=[Factor("バッテリーが持たない。", "耐久性")]),
        _result("C", negatives=[Factor("バッテリーが持たないです。", "耐久性")]),
    ]
    merged = aggregate_factors(results, "negative")
    assert merged[0].sentence == "バッテリーが持たない。"
    assert merged[0].products == ["B", "C"]
    assert merged[0].total_count == 2
    assert merged[1].total_count == 5


def test_unnamed_products_get_positional_names():
    results = [_result(""), _result("")]
    summary = generate_cross_summary(results)
    assert [row.product_name for row in summary.comparison_table] == ["商品1", "商品2"]


class TestGenerateHints:
    """Test differentiation hint generation."""

    def test_shared_negative_with_matching_request(self):
        negatives = [CrossFactor("バッテリーが持たない。", "耐久性", total_count=3, products=["A", "B", "C"])]
        requests = [CrossFactor("電池を改善してほしい", "耐久性", total_count=1, products=["A"])]
        hints = generate_hints(negatives, requests)
        assert len(hints) == 1
        assert hints[0].aspect == "耐久性"
        assert hints[0].related_request == "電池を改善してほしい"
        assert hints[0].impact_score == 33

    def test_single_product_problem_is_not_a_hint(self):
        negatives = [CrossFactor("接続が切れる。", "操作性", total_count=9, products=["A"])]
        assert generate_hints(negatives, []) == []

    def test_shared_request_on_new_aspect(self):
        requests = [CrossFactor("防水機能があれば", "other", total_count=3, products=["A", "B"])]
        hints = generate_hints([], requests)
        assert len(hints) == 1
        assert hints[0].related_negative == ""
        assert hints[0].impact_score == 2 * 5 + 3


class TestCrossSummary:
    """Test the merged category-wide summary."""

    def test_zero_products(self):
        summary = generate_cross_summary([])
        assert summary.category == "unknown"
        assert summary.product_count == 0
        assert (summary.price_range.min, summary.price_range.max) == (0, 0)
        assert summary.negative_factors == []
        assert summary.differentiation_hints == []
        assert summary.comparison_table == []

    def test_shared_battery_complaint(self, earphone_results):
        summary = generate_cross_summary(earphone_results)

        assert summary.category == "イヤホン"
        assert summary.product_count == 3
        assert summary.total_reviews == 8
        assert (summary.price_range.min, summary.price_range.max) == (1000, 3000)

        top = summary.negative_factors[0]
        assert normalize_for_grouping(top.sentence) == "バッテリーが持たない"
        assert top.product_count == 3
        assert top.total_count == 3

        assert summary.positive_factors[0].product_count == 3

        assert len(summary.improvement_requests) == 1
        assert summary.improvement_requests[0].products == ["Aイヤホン Pro", "Bイヤホン Lite"]

        assert len(summary.differentiation_hints) == 1
        hint = summary.differentiation_hints[0]
        assert hint.aspect == "耐久性"
        assert hint.impact_score == 33
        assert hint.related_request == "バッテリーの持ちをもう少し改善してほしい。"

    def test_comparison_table(self, earphone_results):
        table = generate_cross_summary(earphone_results).comparison_table
        assert [row.product_name for row in table] == ["Aイヤホン Pro", "Bイヤホン Lite", "Cイヤホン X"]
        assert table[0].aspects == {"耐久性": "negative", "音質": "positive"}
        assert table[2].review_count == 2
        assert table[2].rating == 3.5

    def test_lists_are_capped(self):
        factors = [Factor(f"不満点その{i}について述べます", "品質") for i in range(12)]
        summary = generate_cross_summary([_result("A", negatives=factors)])
        assert len(summary.negative_factors) == 8

    def test_hints_computed_before_capping(self):
        """A shared complaint outside the top eight still produces a hint."""
        singles = [Factor(f"不満点その{i}について述べます", "品質", count=20) for i in range(10)]
        shared = Factor("バッテリーが持たない。", "耐久性")
        summary = generate_cross_summary([
            _result("A", negatives=singles + [shared]),
            _result("B", negatives=[shared]),
        ])
        assert all(f.aspect == "品質" for f in summary.negative_factors)
        assert [h.aspect for h in summary.differentiation_hints] == ["耐久性"]
        assert summary.differentiation_hints[0].impact_score == 22

    def test_hints_capped_at_five(self):
        shared = [Factor(f"共通の不満その{i}です。", f"aspect{i}") for i in range(7)]
        summary = generate_cross_summary([_result("A", negatives=shared), _result("B", negatives=shared)])
        assert len(summary.differentiation_hints) == 5

    def test_to_dict(self, earphone_results):
        data = generate_cross_summary(earphone_results).to_dict()
        assert data["category"] == "イヤホン"
        assert data["price_range"] == {"min": 1000, "max": 3000}
