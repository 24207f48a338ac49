"""Hypothesis strategies for table extraction property tests.

Provides strategies for message keys, locale data, filler text without call
sites, and build output filenames.

Event-Emitting Strategies:
- locale_maps: Emits locale_count=N
- hashed_filenames: Emits filename_segments=N
"""

from __future__ import annotations

import string

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

_LOCALE_POOL = ["en", "fr", "de", "es", "lv", "ja", "pt_BR", "zh"]

# Word characters as the scan pattern sees them (ASCII subset)
_KEY_FIRST = string.ascii_letters + "_"
_KEY_REST = string.ascii_letters + string.digits + "_"

# Filler never forms a call site: it has no "." and no "_".
_FILLER_ALPHABET = " \n\t;(){}[],+-*/=<>!?:'\""


@composite
def message_keys(draw: st.DrawFn) -> str:
    """Generate message keys made of word characters."""
    first = draw(st.sampled_from(_KEY_FIRST))
    rest = draw(st.text(alphabet=_KEY_REST, max_size=15))
    return first + rest


@composite
def filler_text(draw: st.DrawFn) -> str:
    """Generate text that contains no accessor call sites."""
    return draw(st.text(alphabet=_FILLER_ALPHABET + "abc123", max_size=40))


@composite
def locale_maps(draw: st.DrawFn, keys: list[str] | None = None) -> dict[str, dict[str, str]]:
    """Generate locale data that always contains the default locale 'en'."""
    others = draw(
        st.lists(st.sampled_from(_LOCALE_POOL[1:]), unique=True, max_size=4)
    )
    key_pool = keys if keys else draw(st.lists(message_keys(), min_size=1, max_size=6))
    data: dict[str, dict[str, str]] = {}
    for locale in ["en", *others]:
        present = draw(st.lists(st.sampled_from(key_pool), unique=True))
        data[locale] = {key: f"{locale}:{key}" for key in present}
    event(f"locale_count={len(data)}")
    return data


@composite
def hashed_filenames(draw: st.DrawFn) -> str:
    """Generate dotted build output filenames such as 'app.abcd1234.js'."""
    segment = st.text(alphabet=string.ascii_lowercase + string.digits + "-_", min_size=1, max_size=8)
    segments = draw(st.lists(segment, min_size=1, max_size=5))
    event(f"filename_segments={len(segments)}")
    return ".".join(segments)
