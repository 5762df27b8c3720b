"""Text normalization for unit names and symbols.

Used by the fuzzy unit resolver so that "Metre", "metres" and "METER" land
close together before scoring.
"""

import re
import unicodedata


# Symbols that carry meaning and would be lost by ASCII transliteration
_SYMBOL_WORDS = {
    "°": " deg ",
    "µ": "u",
    "μ": "u",
    "²": "2",
    "³": "3",
    "/": " per ",
}


def normalize_name(
    s: str,
    *,
    allowed_chars: str = r"a-z0-9\s\-",
) -> str:
    """Generic normalization for fuzzy matching.

    Transformations:
      1. Spell out unit glyphs (°, µ, ², ³, /)
      2. Unicode normalization (NFKD) and ASCII transliteration
      3. Lowercase
      4. Remove punctuation (keep only allowed_chars)
      5. Collapse whitespace

    Args:
        s: Raw text to normalize
        allowed_chars: Regex character class for allowed characters (default: alphanumeric, space, hyphen)

    Returns:
        Normalized string for matching

    Examples:
        >>> normalize_name("Kilometres per Hour")
        'kilometres per hour'

        >>> normalize_name("°F")
        'deg f'

        >>> normalize_name("m²")
        'm2'
    """
    if not s:
        return ""

    for glyph, word in _SYMBOL_WORDS.items():
        s = s.replace(glyph, word)

    # Unicode normalization and ASCII conversion
    s = unicodedata.normalize("NFKD", s)
    s = s.encode("ascii", "ignore").decode("ascii")

    s = s.lower()

    # Remove punctuation except allowed characters
    s = re.sub(rf"[^{allowed_chars}]", " ", s)

    # Collapse whitespace
    s = re.sub(r"\s+", " ", s).strip()

    return s


__all__ = [
    "normalize_name",
]
