"""Command-line interface for ReviewHub."""

import argparse
import json
import logging
import sys

from .core.config import settings
from .core.constants import FileConstants
from .core.lexicon import get_lexicon, dump_lexicon
from .core.scoring import analyze_reviews
from .services.analysis_store import AnalysisStore, AnalysisNotFoundError
from .services.demo_data import get_demo_products
from .services.pipeline import AnalysisPipeline
from .utils.data_prep import export_to_json, load_products, prepare_export

logger = logging.getLogger(__name__)

# Last run of this process, for commands that report on it
store = AnalysisStore()


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=FileConstants.LOG_FORMAT,
    )


def _print_summary(summary):
    print(f"\nCategory: {summary.category}")
    print(f"Price range: ¥{summary.price_range.min:,.0f} - ¥{summary.price_range.max:,.0f}")
    print(f"Products: {summary.product_count}, reviews: {summary.total_reviews}")

    print("\nWhat lowers ratings:")
    for i, factor in enumerate(summary.negative_factors[:5], 1):
        print(f"  {i}. [{factor.aspect}] {factor.sentence} ({factor.total_count}x, {factor.product_count} products)")

    print("\nWhat raises ratings:")
    for i, factor in enumerate(summary.positive_factors[:5], 1):
        print(f"  {i}. [{factor.aspect}] {factor.sentence} ({factor.total_count}x, {factor.product_count} products)")

    if summary.differentiation_hints:
        print("\nDifferentiation hints:")
        for hint in summary.differentiation_hints:
            print(f"  - {hint.hint} (impact {hint.impact_score})")
            print(f"    {hint.reason}")


def _run_and_report(products, args):
    pipeline = AnalysisPipeline(max_workers=getattr(args, "workers", None))
    run = pipeline.run(products)
    store.save(run)

    for result in run.analyses:
        a = result.analysis
        print(f"{result.product_info.name or '(unnamed)'}: {a.total_reviews} reviews, "
              f"{a.total_sentences} sentences, avg {a.average_rating}")
    _print_summary(store.summary())

    if args.out:
        export_to_json(prepare_export(run), args.out)
        print(f"\nResults exported to {args.out}")


def cmd_analyze(args):
    """Analyze command."""
    if args.input_file:
        products = load_products(args.input_file)
    elif settings.demo_mode_fallback:
        print("No input given, analyzing the demo dataset")
        products = get_demo_products()
    else:
        print("No input given")
        return

    if not products:
        print("No products found!")
        return
    _run_and_report(products, args)


def cmd_demo(args):
    """Demo command."""
    _run_and_report(get_demo_products(), args)


def cmd_score(args):
    """Whole-text scoring command."""
    products = load_products(args.input_file) if args.input_file else get_demo_products()
    for product in products:
        result = analyze_reviews(product.reviews)
        print(f"\n{product.info.name or '(unnamed)'}: {result.total_count} reviews, "
              f"average score {result.average_score}")
        print(f"  breakdown: {result.sentiment_breakdown} ratio: {result.sentiment_ratio}")
        top_pos = ", ".join(f"{k['word']}({k['count']})" for k in result.top_positive_keywords[:5])
        top_neg = ", ".join(f"{k['word']}({k['count']})" for k in result.top_negative_keywords[:5])
        print(f"  positive: {top_pos or '-'}")
        print(f"  negative: {top_neg or '-'}")


def cmd_summary(args):
    """Print the cross summary of a saved export."""
    with open(args.input_file, 'r', encoding='utf-8') as f:
        data = json.load(f)
    summary = data.get("summary")
    if not summary:
        raise AnalysisNotFoundError(f"No summary in {args.input_file}")
    print(json.dumps(summary, indent=2, ensure_ascii=False))


def cmd_lexicon(args):
    """Write the active lexicon to YAML."""
    dump_lexicon(get_lexicon(), args.output)
    print(f"Lexicon written to {args.output}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="ReviewHub - Sentence-level review analysis and product comparison")
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Analyze command
    analyze_parser = subparsers.add_parser('analyze', help='Analyze products from a JSON file')
    analyze_parser.add_argument('input_file', nargs='?', help='Products JSON file')
    analyze_parser.add_argument('--out', help='Output JSON file')
    analyze_parser.add_argument('--workers', type=int, default=None, help='Products analyzed in parallel')

    # Demo command
    demo_parser = subparsers.add_parser('demo', help='Analyze the built-in demo dataset')
    demo_parser.add_argument('--out', help='Output JSON file')

    # Score command
    score_parser = subparsers.add_parser('score', help='Whole-text sentiment scores per product')
    score_parser.add_argument('input_file', nargs='?', help='Products JSON file (demo data if omitted)')

    # Summary command
    summary_parser = subparsers.add_parser('summary', help='Print the cross summary of an export')
    summary_parser.add_argument('--in', dest='input_file', required=True, help='Exported JSON file')

    # Lexicon command
    lexicon_parser = subparsers.add_parser('lexicon', help='Write the active lexicon to YAML')
    lexicon_parser.add_argument('--out', dest='output', default=FileConstants.DEFAULT_LEXICON_FILE,
                                help='Output YAML file')

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    setup_logging()

    commands = {
        'analyze': cmd_analyze,
        'demo': cmd_demo,
        'score': cmd_score,
        'summary': cmd_summary,
        'lexicon': cmd_lexicon,
    }
    try:
        commands[args.command](args)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
    except FileNotFoundError as e:
        print(f"Input file not found: {e.filename}")
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(f"Invalid JSON in input file: {e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Command failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
