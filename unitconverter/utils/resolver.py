"""Fuzzy resolution helpers for catalog lookups.

Scores catalog rows (one row per unit, see UnitCatalog.to_frame) against a
normalized query with RapidFuzz. Symbol matches are handled exactly by the
caller; these helpers only cover names and aliases.
"""

from __future__ import annotations
from typing import Callable, Dict, List, Optional
import pandas as pd

try:
    from rapidfuzz import fuzz
except ImportError as e:
    raise ImportError("rapidfuzz not installed. pip install rapidfuzz") from e


MAX_ALIASES = 10


def expand_aliases(aliases: Optional[List[str]], max_columns: int = MAX_ALIASES) -> Dict[str, str]:
    """Expand aliases list into alias1...alias10 columns.

    Args:
        aliases: List of alias strings
        max_columns: Maximum number of alias columns to generate (default: 10)

    Returns:
        Dictionary mapping alias1...alias{max_columns} to values

    Examples:
        >>> expand_aliases(['metre', 'meters'], max_columns=3)
        {'alias1': 'metre', 'alias2': 'meters', 'alias3': ''}
    """
    aliases = list(aliases or [])
    result = {}
    for i in range(1, max_columns + 1):
        result[f"alias{i}"] = str(aliases[i - 1]) if i <= len(aliases) else ""
    return result


def get_aliases(
    row: pd.Series,
    normalize_fn: Callable[[str], str],
    max_aliases: int = MAX_ALIASES,
) -> list[str]:
    """Extract and normalize alias columns from a DataFrame row.

    Examples:
        >>> row = pd.Series({'alias1': 'metre', 'alias2': '', 'alias3': None})
        >>> get_aliases(row, lambda s: s.lower())
        ['metre']
    """
    aliases = []
    for i in range(1, max_aliases + 1):
        col = f"alias{i}"
        if col in row.index and pd.notna(row[col]) and str(row[col]).strip():
            aliases.append(normalize_fn(str(row[col])))
    return aliases


def score_candidate(
    row: pd.Series,
    query_norm: str,
    normalize_fn: Callable[[str], str],
    name_column: str = "name_norm",
) -> float:
    """Score a candidate row against a normalized query.

    Uses RapidFuzz WRatio over the name column and all alias columns, and
    returns the best score (0-100).
    """
    searchable = [row[name_column]]
    searchable.extend(get_aliases(row, normalize_fn))

    best_score = 0.0
    for s in searchable:
        if pd.notna(s) and str(s).strip():
            score = fuzz.WRatio(query_norm, str(s).lower())
            best_score = max(best_score, score)

    return best_score


def topk_matches(
    candidates: pd.DataFrame,
    query_norm: str,
    normalize_fn: Callable[[str], str],
    k: int = 5,
    name_column: str = "name_norm",
) -> list[tuple[pd.Series, float]]:
    """Return top-K matching candidates with scores, best first.

    Ties keep catalog order (the sort is stable).
    """
    if candidates.empty or k <= 0:
        return []

    scored = []
    for _, row in candidates.iterrows():
        score = score_candidate(row, query_norm, normalize_fn, name_column)
        scored.append((row.copy(), score))

    scored.sort(key=lambda x: x[1], reverse=True)
    return scored[:k]


def find_best_match(
    candidates: pd.DataFrame,
    query_norm: str,
    normalize_fn: Callable[[str], str],
    threshold: int = 90,
    name_column: str = "name_norm",
) -> Optional[pd.Series]:
    """Find the best matching candidate above a threshold.

    Returns:
        Best-matching row as Series, or None if nothing reaches the threshold
    """
    best = topk_matches(candidates, query_norm, normalize_fn, k=1, name_column=name_column)
    if not best:
        return None

    row, score = best[0]
    if score < threshold:
        return None
    return row


__all__ = [
    "MAX_ALIASES",
    "expand_aliases",
    "get_aliases",
    "score_candidate",
    "topk_matches",
    "find_best_match",
]
