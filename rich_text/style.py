"""
Inline style parsing with a bounded, insertion-ordered cache.

parse_style() turns "margin-top: 2px; --gap: 4px" into
{"marginTop": "2px", "--gap": "4px"}. No validation of property names, units
or colours is done; malformed declarations are skipped, never raised.
"""

import re
import threading
from typing import Callable, Optional

from .logger import get_module_logger

logger = get_module_logger("style")

MAX_STYLE_CACHE_ENTRIES = 200

KEBAB_SEGMENT_PATTERN = re.compile(r"-([a-z])")
CAMEL_HUMP_PATTERN = re.compile(r"[A-Z]")


class StyleCache:
    """
    Bounded mapping from normalized style string to parsed style map.

    Eviction is by insertion order: when full, the oldest inserted entry is
    dropped, however recently it was read.
    """

    def __init__(self, max_entries: int = MAX_STYLE_CACHE_ENTRIES):
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self.max_entries = max_entries
        self._entries: dict[str, dict[str, str]] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def keys(self) -> list[str]:
        """Cached keys, oldest first."""
        with self._lock:
            return list(self._entries)

    def get(self, key: str) -> Optional[dict[str, str]]:
        return self._entries.get(key)

    def get_or_create(self, key: str, factory: Callable[[str], dict[str, str]]) -> dict[str, str]:
        """Return the cached map for key, building and inserting it on a miss."""
        with self._lock:
            cached = self._entries.get(key)
            if cached is not None:
                return cached

            value = factory(key)
            if len(self._entries) >= self.max_entries:
                oldest = next(iter(self._entries))
                del self._entries[oldest]
                logger.debug(f"Style cache full, evicted oldest entry: {oldest!r}")
            self._entries[key] = value
            return value


def to_camel_case(value: str) -> str:
    """Convert a kebab-case property name to camelCase."""
    return KEBAB_SEGMENT_PATTERN.sub(lambda m: m.group(1).upper(), value)


def to_kebab_case(value: str) -> str:
    """Convert a camelCase property name back to kebab-case."""
    return CAMEL_HUMP_PATTERN.sub(lambda m: "-" + m.group(0).lower(), value)


def _parse_declarations(style: str) -> dict[str, str]:
    style_props: dict[str, str] = {}

    for declaration in style.split(";"):
        prop, colon, value = declaration.partition(":")
        prop = prop.strip()
        if not colon or not prop:
            continue
        if not prop.startswith("--"):
            prop = to_camel_case(prop)
        style_props[prop] = value.strip()

    return style_props


def parse_style(style: str, cache: Optional[StyleCache] = None) -> dict[str, str]:
    """
    Parse an inline style string into a style map.

    Args:
        style: Raw value of a style attribute
        cache: Cache to use; defaults to the process-wide cache

    Returns:
        Mapping of camelCased property names (custom properties verbatim)
        to trimmed values. Equal inputs after trimming share one cached map.
    """
    normalized = style.strip()
    if not normalized:
        return {}

    if cache is None:
        cache = get_default_cache()
    return cache.get_or_create(normalized, _parse_declarations)


def style_to_css(style_map: dict[str, str]) -> str:
    """Serialize a style map back to an inline style string."""
    declarations = []
    for prop, value in style_map.items():
        name = prop if prop.startswith("--") else to_kebab_case(prop)
        declarations.append(f"{name}: {value}")
    return "; ".join(declarations)


# Process-wide cache used when no cache is injected; lives as long as the process.
_default_cache: Optional[StyleCache] = None
_default_cache_lock = threading.Lock()


def get_default_cache() -> StyleCache:
    """Get or create the default cache instance."""
    global _default_cache
    if _default_cache is None:
        with _default_cache_lock:
            if _default_cache is None:
                _default_cache = StyleCache()
    return _default_cache
