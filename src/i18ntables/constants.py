"""Shared constants for i18ntables.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Accessor defaults
    "DEFAULT_ACCESSOR",
    "DEFAULT_MODULE_NAME",
    # Locale defaults
    "DEFAULT_LOCALE",
    # Filename handling
    "FILENAME_SEPARATOR",
    "HASHED_SUFFIX_SEGMENTS",
    "PLAIN_SUFFIX_SEGMENTS",
    # Output layout
    "OUTPUT_SUFFIX",
    "OUTPUT_ENCODING",
]

# ============================================================================
# ACCESSOR DEFAULTS
# ============================================================================

DEFAULT_ACCESSOR = "__"
"""Identifier whose property accesses mark translatable strings (``__.key``)."""

DEFAULT_MODULE_NAME = ""
"""Module name used to derive the transpiled alias (``_<module>2.default``)."""

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

DEFAULT_LOCALE = "en"
"""Locale whose text is used when the active locale lacks a key."""

# ============================================================================
# FILENAME HANDLING
# ============================================================================

FILENAME_SEPARATOR = "."

PLAIN_SUFFIX_SEGMENTS = 1
"""Segments stripped from unhashed filenames: the extension."""

HASHED_SUFFIX_SEGMENTS = 2
"""Segments stripped from hashed filenames: content hash + extension."""

# ============================================================================
# OUTPUT LAYOUT
# ============================================================================

OUTPUT_SUFFIX = ".text.json"
"""Per-locale table file suffix: ``<root>/<locale>.text.json``."""

OUTPUT_ENCODING = "utf-8"
