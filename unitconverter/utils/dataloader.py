"""Shared data loading utilities for the unit catalog.

This module provides the data file discovery and YAML loading patterns used by
the catalog loader, with fallback search across module-local and package data.
"""

from pathlib import Path
from typing import List, Optional, Tuple


def find_data_file(
    module_file: str,
    subdirectory: str,
    filenames: List[str],
    module_local_data: bool = True,
) -> Optional[Path]:
    """Find data file by searching standard locations.

    Search priority:
    1. Module-local data: {module_dir}/data/ (if module_local_data=True)
    2. Package data: unitconverter/data/{subdirectory}/

    Args:
        module_file: __file__ from the calling module (e.g., __file__)
        subdirectory: Subdirectory name (e.g., 'units')
        filenames: List of candidate filenames to search for (e.g., ['units.yaml', 'units.yml'])
        module_local_data: If True, search module_dir/data/ first

    Returns:
        Path to found file, or None if not found

    Examples:
        >>> # From units/unitapi.py (data is in units/data/)
        >>> path = find_data_file(__file__, 'units', ['units.yaml'])
    """
    # Priority 0: Module-local data (e.g., unitconverter/units/data/)
    if module_local_data:
        data_dir = Path(module_file).parent / "data"
        for filename in filenames:
            p = data_dir / filename
            if p.exists():
                return p

    # Priority 1: Package data
    pkg_dir = Path(module_file).parent.parent
    data_dir = pkg_dir / "data" / subdirectory

    for filename in filenames:
        p = data_dir / filename
        if p.exists():
            return p

    return None


def load_yaml_file(path: Path) -> dict:
    """Load and parse YAML file.

    Args:
        path: Path to YAML file

    Returns:
        Parsed YAML data as dictionary (empty dict for an empty file)

    Raises:
        FileNotFoundError: If file does not exist
    """
    import yaml

    if not path.exists():
        raise FileNotFoundError(f"Required file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def format_not_found_error(
    subdirectory: str,
    searched_locations: List[Tuple[str, Path]],
    fix_instructions: List[str],
) -> str:
    """Format a helpful FileNotFoundError message.

    Args:
        subdirectory: Data subdirectory name (e.g., 'units')
        searched_locations: List of (description, path) tuples for locations searched
        fix_instructions: List of commands/instructions to fix the issue

    Returns:
        Formatted error message string
    """
    lines = [f"No {subdirectory} data found in standard locations.\n"]

    lines.append("Searched:")
    for i, (desc, path) in enumerate(searched_locations, 1):
        lines.append(f"  {i}. {desc}: {path}")

    lines.append("\nTo fix:")
    for instruction in fix_instructions:
        lines.append(f"  • {instruction}")

    return "\n".join(lines)


__all__ = [
    "find_data_file",
    "load_yaml_file",
    "format_not_found_error",
]
