"""
Attribute merge policy and style-stripping decision.

Both functions are pure: they read their inputs and return new values.
"""

from typing import Any, Mapping, Optional, Union

from .schemas import StripStyles

# Attributes whose default and node values are combined instead of overwritten
CLASS_ATTRIBUTES = ("class", "className")


def merge_attributes(
    defaults: Optional[Mapping[str, Any]],
    node_attributes: Optional[Mapping[str, Any]]
) -> dict[str, Any]:
    """
    Combine per-tag default attributes with a node's own attributes.

    Node values win, except for class/className, where both values are kept
    space-joined with the default first.
    """
    merged = dict(defaults or {})

    for key, value in (node_attributes or {}).items():
        if key in CLASS_ATTRIBUTES and key in merged:
            merged[key] = " ".join(part for part in (merged[key], value) if part)
        else:
            merged[key] = value

    return merged


def should_strip_style(config: Union[bool, StripStyles, None], tag: str) -> bool:
    """Decide whether the style attribute of an element with this tag is removed."""
    if config is None or config is False:
        return False
    if config is True:
        return True

    targeted = config.tags is None or tag in config.tags
    return targeted and tag not in config.except_tags
