"""Shared utilities for the unitconverter package."""

from unitconverter.utils.dataloader import (
    find_data_file,
    load_yaml_file,
    format_not_found_error,
)
from unitconverter.utils.normalize import (
    normalize_name,
)
from unitconverter.utils.resolver import (
    expand_aliases,
    get_aliases,
    score_candidate,
    topk_matches,
    find_best_match,
)

__all__ = [
    # Data loading
    "find_data_file",
    "load_yaml_file",
    "format_not_found_error",
    # Normalization
    "normalize_name",
    # Resolution
    "expand_aliases",
    "get_aliases",
    "score_candidate",
    "topk_matches",
    "find_best_match",
]
