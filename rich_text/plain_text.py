"""
Plain-text extraction from a document tree.

A single pre-order walk collects the text of Text nodes. Elements listed in
ignore_tags are skipped with their whole subtree and blocks contribute no
text. Text runs are concatenated as they are; no separator is inserted at
element boundaries.

first_paragraph stops the walk at the first paragraph-level element whose
text is not blank and returns only that element's text. max_length is applied
afterwards and truncates on a word boundary.
"""

from typing import Any, Iterable, Optional

from pydantic import ValidationError

from .exceptions import ConfigurationError, MalformedNodeError
from .logger import get_module_logger
from .schemas import AnyNode, Block, Element, PlainTextOptions, Root, Text, coerce_node

logger = get_module_logger("plain_text")

# Elements that count as a paragraph for first_paragraph extraction
PARAGRAPH_TAGS = frozenset([
    'p', 'h1', 'h2', 'h3', 'h4', 'h5', 'h6', 'li', 'blockquote', 'figcaption',
    'dt', 'dd', 'caption', 'pre', 'td', 'th', 'div',
])

ELLIPSIS = "…"


def truncate_words(text: str, max_length: int, ellipsis: str = ELLIPSIS) -> str:
    """
    Shorten text to at most max_length characters plus the ellipsis.

    The cut is moved back to the last whitespace so no word is split. If the
    first word alone is longer than max_length only the ellipsis remains.
    """
    if len(text) <= max_length:
        return text

    cut = text[:max_length]
    if not text[max_length].isspace():
        index = len(cut)
        while index > 0 and not cut[index - 1].isspace():
            index -= 1
        cut = cut[:index]

    return cut.rstrip() + ellipsis


class _WalkState:
    """Mutable state of one extraction pass."""

    def __init__(self):
        self.parts: list[str] = []
        self.length = 0
        self.paragraph: Optional[str] = None
        self.done = False


class PlainTextExtractor:
    """Flattens document trees into plain text."""

    def __init__(self, options: Optional[PlainTextOptions] = None, **overrides):
        try:
            if options is None:
                options = PlainTextOptions(**overrides)
            elif overrides:
                options = PlainTextOptions(**{**dict(options), **overrides})
        except ValidationError as e:
            raise ConfigurationError(
                "Invalid plain-text options",
                details={"errors": e.errors(include_url=False)}
            ) from e
        self.options = options

    def extract(self, node: Any) -> str:
        """
        Extract the plain text of a document node (or its raw JSON mapping).

        Returns:
            The flattened text; "" for a malformed node.
        """
        try:
            node = coerce_node(node)
        except MalformedNodeError as e:
            logger.debug(f"Malformed top-level node has no text: {e.message}")
            return ""

        state = _WalkState()
        self._walk(node, state)

        text = state.paragraph if state.paragraph is not None else "".join(state.parts)
        if self.options.max_length is not None:
            text = truncate_words(text, self.options.max_length)
        return text

    def _walk(self, node: AnyNode, state: _WalkState) -> None:
        if isinstance(node, Text):
            state.parts.append(node.text)
            state.length += len(node.text)
            # One character past the limit is enough to find the word boundary
            max_length = self.options.max_length
            if not self.options.first_paragraph and max_length is not None and state.length > max_length:
                state.done = True
            return

        if isinstance(node, Block):
            return

        if isinstance(node, Element):
            if node.tag in self.options.ignore_tags:
                return
            start = len(state.parts)
            self._walk_children(node, state)
            if state.done:
                return
            if self.options.first_paragraph and node.tag in PARAGRAPH_TAGS:
                paragraph = "".join(state.parts[start:])
                if paragraph.strip():
                    state.paragraph = paragraph
                    state.done = True
            return

        if isinstance(node, Root):
            self._walk_children(node, state)
            return

        logger.debug(f"Unknown node type {type(node).__name__} has no text")

    def _walk_children(self, node: AnyNode, state: _WalkState) -> None:
        for child in node.children:
            self._walk(child, state)
            if state.done:
                return


def to_plain_text(
    node: Any,
    first_paragraph: bool = False,
    max_length: Optional[int] = None,
    ignore_tags: Iterable[str] = ()
) -> str:
    """Convenience function to flatten a document tree into text."""
    if isinstance(ignore_tags, str):
        ignore_tags = (ignore_tags,)
    return PlainTextExtractor(
        first_paragraph=first_paragraph,
        max_length=max_length,
        ignore_tags=frozenset(ignore_tags)
    ).extract(node)
