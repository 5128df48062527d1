"""Analysis run: per-product analysis followed by cross-product aggregation."""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..core.analyzer import ReviewAnalyzer
from ..core.config import settings
from ..core.cross import generate_cross_summary
from ..core.models import CrossSummary, ProductAnalysisResult, ProductInfo, ProductInput

logger = logging.getLogger(__name__)


@dataclass
class AnalysisRun:
    """Everything produced by one run, in input order."""
    products: List[ProductInfo] = field(default_factory=list)
    analyses: List[ProductAnalysisResult] = field(default_factory=list)
    summary: Optional[CrossSummary] = None
    elapsed: float = 0.0


class AnalysisPipeline:
    """Analyzes several products and merges them into a cross summary."""

    def __init__(self, analyzer: Optional[ReviewAnalyzer] = None, max_workers: Optional[int] = None):
        self.analyzer = analyzer or ReviewAnalyzer()
        self.max_workers = max(1, max_workers if max_workers is not None else settings.max_workers)

    def _analyze_one(self, product: ProductInput) -> ProductAnalysisResult:
        analysis = self.analyzer.analyze(product.reviews)
        logger.info(
            f"Analyzed '{product.info.name}': {analysis.total_reviews} reviews, "
            f"{analysis.total_sentences} sentences"
        )
        return ProductAnalysisResult(product_info=product.info, analysis=analysis)

    def analyze_products(self, products: Sequence[ProductInput]) -> List[ProductAnalysisResult]:
        """Per-product analysis; results always come back in input order."""
        if self.max_workers == 1 or len(products) < 2:
            return [self._analyze_one(p) for p in products]

        with ThreadPoolExecutor(max_workers=min(self.max_workers, len(products))) as executor:
            futures = [executor.submit(self._analyze_one, p) for p in products]
            return [future.result() for future in futures]

    def run(self, products: Sequence[ProductInput]) -> AnalysisRun:
        logger.info(f"Starting analysis of {len(products)} products")
        start_time = time.time()

        analyses = self.analyze_products(products)
        summary = generate_cross_summary(analyses)

        elapsed_time = time.time() - start_time
        logger.info(
            f"Analysis completed in {elapsed_time:.2f}s: category='{summary.category}', "
            f"{summary.total_reviews} reviews"
        )
        return AnalysisRun(
            products=[p.info for p in products],
            analyses=analyses,
            summary=summary,
            elapsed=elapsed_time,
        )
