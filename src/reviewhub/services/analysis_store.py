"""Single-slot store holding the most recent analysis run."""

import logging
import threading
from typing import Any, Dict, Optional

from ..core.models import CrossSummary
from .pipeline import AnalysisRun

logger = logging.getLogger(__name__)


class AnalysisNotFoundError(LookupError):
    """No analysis has been stored yet, or the product index is out of range."""


class AnalysisStore:
    """Last-write-wins holder for the latest run; the core itself stays stateless."""

    def __init__(self):
        self._lock = threading.Lock()
        self._run: Optional[AnalysisRun] = None

    def save(self, run: AnalysisRun) -> None:
        with self._lock:
            self._run = run
        logger.info(f"Stored analysis of {len(run.analyses)} products")

    def clear(self) -> None:
        with self._lock:
            self._run = None

    def latest(self) -> AnalysisRun:
        with self._lock:
            run = self._run
        if run is None:
            raise AnalysisNotFoundError("No analysis has been run yet")
        return run

    def summary(self) -> CrossSummary:
        return self.latest().summary

    def product_details(self, index: int) -> Dict[str, Any]:
        """Product info plus its full analysis, sentences reduced to the detail view."""
        run = self.latest()
        if index < 0 or index >= len(run.analyses):
            raise AnalysisNotFoundError(f"No product at index {index}")

        result = run.analyses[index]
        analysis = result.analysis.to_dict(include_sentences=False)
        analysis["all_analyzed_sentences"] = [
            s.to_detail_dict() for s in result.analysis.all_analyzed_sentences
        ]
        return {
            "product_info": result.product_info.to_dict(),
            "analysis": analysis,
        }
