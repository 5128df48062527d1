"""ReviewHub - sentence-level review analysis and cross-product comparison."""

__version__ = "1.0.0"
__author__ = "ReviewHub Team"

from .core.models import *
from .core.config import settings
from .core.analyzer import ReviewAnalyzer
from .core.cross import generate_cross_summary
from .services.pipeline import AnalysisPipeline
from .services.analysis_store import AnalysisStore

__all__ = [
    "settings",
    "ReviewAnalyzer",
    "generate_cross_summary",
    "AnalysisPipeline",
    "AnalysisStore",
]
