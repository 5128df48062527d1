"""Services for ReviewHub."""

from .pipeline import AnalysisPipeline, AnalysisRun
from .analysis_store import AnalysisStore, AnalysisNotFoundError
from .demo_data import get_demo_products

__all__ = [
    "AnalysisPipeline",
    "AnalysisRun",
    "AnalysisStore",
    "AnalysisNotFoundError",
    "get_demo_products",
]
