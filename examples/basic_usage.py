"""Basic usage examples for ReviewHub."""

from reviewhub import AnalysisPipeline, ReviewAnalyzer
from reviewhub.core.models import Review
from reviewhub.core.scoring import analyze_reviews
from reviewhub.services.demo_data import get_demo_products


def example_single_product():
    """Example: sentence-level analysis of one product."""
    print("🔍 Analyzing one product")

    reviews = [
        Review(text="音質はとても良いです。ただ、バッテリーが持たないのが残念です。", rating=4),
        Review(text="バッテリーが持たない。充電ケースをもう少し小さくしてほしい。", rating=2),
        Review(text="デザインがおしゃれで気に入っています。", rating=5),
    ]
    analysis = ReviewAnalyzer().analyze(reviews)
    print(f"📊 {analysis.total_sentences} sentences from {analysis.total_reviews} reviews")
    print(f"😊 Breakdown: {analysis.sentiment_breakdown}")

    for entry in analysis.aspect_matrix:
        print(f"  {entry.aspect}: +{entry.positive_count} / -{entry.negative_count}")

    for factor in analysis.top_negative_sentences[:3]:
        print(f"  👎 {factor.sentence} ({factor.count}x)")
    for request in analysis.improvement_requests:
        print(f"  💡 {request.sentence}")


def example_cross_product():
    """Example: compare the demo products."""
    print("\n🔍 Comparing the demo products")

    run = AnalysisPipeline().run(get_demo_products())
    summary = run.summary
    print(f"🏷️  Category: {summary.category} (¥{summary.price_range.min:,.0f} - ¥{summary.price_range.max:,.0f})")

    for hint in summary.differentiation_hints:
        print(f"  🎯 {hint.hint} (impact {hint.impact_score})")

    for row in summary.comparison_table:
        print(f"  {row.product_name[:20]}: {row.rating}★ {row.aspects}")


def example_whole_text_scores():
    """Example: whole-review scores for the first demo product."""
    print("\n🔍 Whole-text scores")

    product = get_demo_products()[0]
    result = analyze_reviews(product.reviews)
    print(f"⭐ Average score: {result.average_score}")
    print(f"📊 Ratio: {result.sentiment_ratio}")


if __name__ == "__main__":
    print("🚀 ReviewHub Examples")
    print("=" * 50)

    example_single_product()
    example_cross_product()
    example_whole_text_scores()
    print("\n✅ All examples completed successfully!")
