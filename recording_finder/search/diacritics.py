"""Diacritic-tolerant text matching for Recording Finder.

Two interchangeable strategies are provided behind the DiacriticEngine
protocol:

* VariantPatternEngine expands every letter of the Latvian base/variant table
  into a character class covering both forms and runs a case-insensitive
  regular expression search.
* FoldEngine strips every combining mark from both the query and the
  candidate and performs a case-insensitive substring test.
"""

import re
import unicodedata
from functools import lru_cache
from typing import Protocol, runtime_checkable

from recording_finder.config.enums import TextStrategy

# Base letter -> accented counterpart. Uppercase pairs are derived.
VARIANT_TABLE: dict[str, str] = {
    "a": "ā",
    "c": "č",
    "e": "ē",
    "g": "ģ",
    "i": "ī",
    "k": "ķ",
    "l": "ļ",
    "n": "ņ",
    "s": "š",
    "u": "ū",
    "z": "ž",
}


def _build_class_lookup() -> dict[str, str]:
    lookup: dict[str, str] = {}
    for base, variant in VARIANT_TABLE.items():
        for plain, accented in ((base, variant), (base.upper(), variant.upper())):
            char_class = f"[{plain}{accented}]"
            lookup[plain] = char_class
            lookup[accented] = char_class
    return lookup


_CLASS_LOOKUP = _build_class_lookup()


def build_variant_pattern(text: str) -> str:
    """Return a regular expression matching ``text`` with either letter form.

    Each character from the variant table (plain or accented, any case) is
    replaced by a class holding both forms; any other character is escaped
    literally. The pattern must be compiled with ``re.IGNORECASE``.
    """
    return "".join(_CLASS_LOOKUP.get(char) or re.escape(char) for char in text)


@lru_cache(maxsize=256)
def compile_variant_pattern(text: str) -> re.Pattern[str]:
    """Compile the variant pattern for ``text`` case-insensitively."""
    return re.compile(build_variant_pattern(text), re.IGNORECASE)


def fold(text: str) -> str:
    """Strip combining marks: ``"Kāposti"`` becomes ``"Kaposti"``.

    Idempotent: ``fold(fold(s)) == fold(s)``.
    """
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(char for char in decomposed if not unicodedata.combining(char))
    return unicodedata.normalize("NFC", stripped)


@runtime_checkable
class DiacriticEngine(Protocol):
    """Protocol for diacritic-tolerant matching strategies."""

    @property
    def strategy(self) -> TextStrategy:
        """Return the strategy this engine implements."""
        ...

    def normalize(self, text: str) -> str:
        """Return the normalized form of ``text`` used for comparisons."""
        ...

    def matches(self, query: str, candidate: str) -> bool:
        """Return True if ``query`` occurs in ``candidate``, ignoring case and diacritics."""
        ...


class VariantPatternEngine:
    """Match by expanding the query into plain/accented character classes."""

    @property
    def strategy(self) -> TextStrategy:
        return TextStrategy.VARIANT

    def normalize(self, text: str) -> str:
        return build_variant_pattern(text)

    def matches(self, query: str, candidate: str) -> bool:
        return compile_variant_pattern(query).search(candidate) is not None


class FoldEngine:
    """Match by folding query and candidate to their unaccented forms."""

    @property
    def strategy(self) -> TextStrategy:
        return TextStrategy.FOLD

    def normalize(self, text: str) -> str:
        return fold(text).casefold()

    def matches(self, query: str, candidate: str) -> bool:
        return self.normalize(query) in self.normalize(candidate)


def get_engine(strategy: TextStrategy | str) -> DiacriticEngine:
    """Factory function to get the engine for the given strategy.

    Args:
        strategy: The configured text strategy

    Returns:
        DiacriticEngine: The matching engine instance
    """
    engines: dict[TextStrategy, DiacriticEngine] = {
        TextStrategy.VARIANT: VariantPatternEngine(),
        TextStrategy.FOLD: FoldEngine(),
    }
    return engines[TextStrategy(strategy)]
