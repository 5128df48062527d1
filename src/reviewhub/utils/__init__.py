"""Utility modules for ReviewHub."""

from .data_prep import export_to_json, prepare_export, parse_products, load_products

__all__ = [
    "export_to_json",
    "prepare_export",
    "parse_products",
    "load_products",
]
