"""Input parsing and export shaping."""

import datetime
import json
import logging
import math
from typing import Any, Dict, List

from ..core.models import ProductInfo, ProductInput, Review

logger = logging.getLogger(__name__)


def _number(value: Any, what: str) -> float:
    """Coerce a numeric field; anything unusable becomes 0."""
    if value is None or value == "":
        return 0
    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring non-numeric {what}: {value!r}")
        return 0
    if not math.isfinite(number):
        logger.warning(f"Ignoring non-finite {what}: {value!r}")
        return 0
    return number


def parse_products(payload: Any) -> List[ProductInput]:
    """
    Build product inputs from decoded JSON.

    Accepts either a list of products or ``{"products": [...]}``. Each product
    is ``{name, price, url?, reviews: [{text, rating, title?}]}``.
    """
    if isinstance(payload, dict):
        payload = payload.get("products", [])
    if not isinstance(payload, list):
        logger.warning("Input is neither a product list nor a {'products': [...]} object")
        return []

    products = []
    for entry in payload:
        if not isinstance(entry, dict):
            logger.warning(f"Skipping malformed product entry: {entry!r}")
            continue
        reviews = []
        for review in entry.get("reviews") or []:
            if isinstance(review, dict):
                reviews.append(Review(
                    text=review.get("text", ""),
                    rating=_number(review.get("rating"), "rating"),
                    title=review.get("title") or "",
                ))
            else:
                # bare strings are accepted as unrated review text
                reviews.append(Review(text=review))
        products.append(ProductInput(
            info=ProductInfo(
                name=str(entry.get("name") or ""),
                price=_number(entry.get("price"), "price"),
                url=entry.get("url"),
            ),
            reviews=reviews,
        ))
    return products


def load_products(filename: str) -> List[ProductInput]:
    """Read a products JSON file."""
    with open(filename, "r", encoding="utf-8") as f:
        return parse_products(json.load(f))


def prepare_export(run) -> Dict[str, Any]:
    """Prepare an analysis run for JSON export."""
    return {
        "products": [p.to_dict() for p in run.products],
        "analyses": [
            {
                "product_info": result.product_info.to_dict(),
                "overview": result.analysis.overview(),
                "analysis": result.analysis.to_dict(include_sentences=False),
            }
            for result in run.analyses
        ],
        "summary": run.summary.to_dict() if run.summary else None,
        "metadata": {
            "export_timestamp": None,  # Will be set by caller
            "elapsed_seconds": round(run.elapsed, 3),
            "version": "1.0.0",
        },
    }


def export_to_json(data: Dict[str, Any], filename: str) -> None:
    """Export data to JSON file."""
    data.setdefault("metadata", {})["export_timestamp"] = datetime.datetime.now().isoformat()

    with open(filename, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
