"""
rich_text

Renders rich-text document trees (JSON made of elements, text runs and
embedded block references) into render trees, HTML and plain text.
- Transformer: document tree → render tree, with override hooks
- PlainTextExtractor: document tree → flattened text
- parse_html / to_html: bridge to and from HTML

Public API surface:
  Entry points   — RichTextRenderer, render, render_html, to_plain_text
  Core classes   — Transformer, PlainTextExtractor
  Data models    — Root, Element, Text, Block, RenderElement, RenderBlock,
                   NodeMetadata, RenderOptions, PlainTextOptions, StripStyles
  Hook results   — SKIP, USE_DEFAULT, Replace
  Building blocks — parse_style, StyleCache, merge_attributes
  Error types    — RichTextError, MalformedNodeError, DocumentLoadError,
                   ConfigurationError
"""

# --- Traversals ---
from .transformer import Transformer, render
from .plain_text import PlainTextExtractor, to_plain_text
from .main import RichTextRenderer, render_html

# --- Data models ---
from .schemas import (
    Root,
    Element,
    Text,
    Block,
    RenderElement,
    RenderBlock,
    NodeMetadata,
    RenderOptions,
    PlainTextOptions,
    StripStyles,
    coerce_node,
)

# --- Hooks ---
from .hooks import SKIP, USE_DEFAULT, Replace

# --- Building blocks ---
from .style import StyleCache, parse_style, get_default_cache
from .attributes import merge_attributes
from .markup import parse_html, to_html
from .loader import load_document, load_blocks

# --- Exceptions ---
from .exceptions import RichTextError, MalformedNodeError, DocumentLoadError, ConfigurationError

__version__ = "0.1.0"
__all__ = [
    "Transformer",
    "render",
    "PlainTextExtractor",
    "to_plain_text",
    "RichTextRenderer",
    "render_html",
    "Root",
    "Element",
    "Text",
    "Block",
    "RenderElement",
    "RenderBlock",
    "NodeMetadata",
    "RenderOptions",
    "PlainTextOptions",
    "StripStyles",
    "coerce_node",
    "SKIP",
    "USE_DEFAULT",
    "Replace",
    "StyleCache",
    "parse_style",
    "get_default_cache",
    "merge_attributes",
    "parse_html",
    "to_html",
    "load_document",
    "load_blocks",
    "RichTextError",
    "MalformedNodeError",
    "DocumentLoadError",
    "ConfigurationError",
]
