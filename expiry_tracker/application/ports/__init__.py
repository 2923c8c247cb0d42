"""Application ports - Interfaces for external adapters."""

from .label_reader import LabelReader

__all__ = [
    "LabelReader",
]
