"""i18ntables - per-locale translation tables extracted from build output.

Scans finished build artifacts for accessor call sites such as ``__.greeting``,
resolves every key against a localization source with default-locale fallback,
and writes one ``<locale>.text.json`` per locale keyed by logical output file.

Public API:
    TableExtractor - Driver facade (load_locales, build, emit, run)
    ExtractorConfig - Run configuration
    Asset - Build output artifact (name, content)
    AssetFilter - Include/exclude predicate over asset names
    RoutingRule - Glob -> logical name remap
    GlobRouter - Ordered, compiled routing rules
    normalize_filename - Strip extension (and hash) from a filename
    build_pattern, extract_keys - Call-site scanning
    resolve_text - Default-locale fallback lookup

Exceptions:
    ExtractorError - Base exception class
    ConfigurationError - Invalid setup (raised before any scanning)
    MissingTranslationError - Unresolved keys in strict mode
    WriteFailure - One or more locale tables could not be written

Submodules:
    i18ntables.tables - Snapshot, resolver, builder and writer
    i18ntables.locale_utils - Babel-backed locale code checks
"""

from .assets import Asset, AssetFilter
from .config import ExtractorConfig
from .errors import (
    ConfigurationError,
    ExtractorError,
    MissingTranslation,
    MissingTranslationError,
    WriteFailure,
)
from .extractor import TableExtractor
from .patterns import build_pattern, extract_keys, transpiled_alias
from .routing import GlobRouter, RoutingRule, logical_name, normalize_filename
from .tables import BuildResult, WriteSummary, resolve_text

# Version information - Auto-populated from package metadata
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("i18ntables")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Asset",
    "AssetFilter",
    "BuildResult",
    "ConfigurationError",
    "ExtractorConfig",
    "ExtractorError",
    "GlobRouter",
    "MissingTranslation",
    "MissingTranslationError",
    "RoutingRule",
    "TableExtractor",
    "WriteFailure",
    "WriteSummary",
    "__version__",
    "build_pattern",
    "extract_keys",
    "logical_name",
    "normalize_filename",
    "resolve_text",
    "transpiled_alias",
]
