"""Search criteria and diacritic-tolerant matching for Recording Finder."""

from recording_finder.search.criteria import ByDay, ByText, SearchCriterion
from recording_finder.search.diacritics import (
    DiacriticEngine,
    FoldEngine,
    VariantPatternEngine,
    build_variant_pattern,
    fold,
    get_engine,
)
from recording_finder.search.filters import filter_records

__all__ = [
    "ByDay",
    "ByText",
    "SearchCriterion",
    "DiacriticEngine",
    "FoldEngine",
    "VariantPatternEngine",
    "build_variant_pattern",
    "fold",
    "get_engine",
    "filter_records",
]
