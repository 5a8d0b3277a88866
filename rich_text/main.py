"""
Main orchestrator for the rich_text package.

Ties loading, transformation, HTML serialization and plain-text extraction
together behind one object configured once with RenderOptions.
"""

from pathlib import Path
from typing import Any, Optional, Union

from .loader import load_document
from .logger import get_module_logger, setup_logger
from .markup import to_html
from .plain_text import to_plain_text
from .schemas import RenderOptions
from .transformer import Transformer, build_render_options

logger = get_module_logger("main")


class RichTextRenderer:
    """
    Main entry point for rendering documents.

    1. render():       document tree → render tree
    2. render_html():  document tree → HTML string
    3. plain_text():   document tree → flattened text
    """

    def __init__(
        self,
        options: Optional[RenderOptions] = None,
        log_level: int = None,
        **overrides
    ):
        if log_level is not None:
            setup_logger(level=log_level)

        self.options = build_render_options(options, **overrides)
        self.transformer = Transformer(self.options)

        logger.info("RichTextRenderer initialized")

    def render(self, document: Any) -> Any:
        """Transform a document node or raw mapping into a render tree."""
        return self.transformer.transform(document)

    def render_html(self, document: Any) -> str:
        """Transform a document and serialize the result as HTML."""
        return to_html(self.render(document))

    def plain_text(
        self,
        document: Any,
        first_paragraph: bool = False,
        max_length: Optional[int] = None,
        ignore_tags: tuple = ()
    ) -> str:
        """Flatten a document into plain text."""
        return to_plain_text(document, first_paragraph, max_length, ignore_tags)

    def render_file(self, file_path: Union[str, Path]) -> str:
        """Load a JSON or HTML document from disk and render it to HTML."""
        file_path = Path(file_path)
        document = load_document(file_path)
        html = self.render_html(document)
        logger.info(f"Rendered {file_path.name} ({len(html)} chars)")
        return html


def render_html(document: Any, **options) -> str:
    """Convenience function to render a document straight to HTML."""
    return RichTextRenderer(**options).render_html(document)
