"""
Tree transformer: document tree → render tree.

Walks the document depth-first. Each element's children are built before the
element itself so that a node override hook receives finished children.

Output shapes:
  Root    → list of child outputs (skipped children removed)
  Text    → the text string
  Element → RenderElement, or whatever the node hook returned
  Block   → RenderBlock, or whatever the block hook returned

Any node can also produce None ("render nothing"): malformed nodes, blocks
missing from the content mapping, and hooks that return SKIP.
"""

from typing import Any, Optional, Sequence

from pydantic import ValidationError

from .attributes import merge_attributes, should_strip_style
from .exceptions import ConfigurationError, MalformedNodeError
from .hooks import Replace, Skip, resolve_hook_result
from .logger import get_module_logger
from .metadata import metadata_accessor
from .schemas import (
    AnyNode,
    Block,
    Element,
    RenderBlock,
    RenderElement,
    RenderOptions,
    Root,
    Text,
    coerce_node,
)
from .style import get_default_cache, parse_style

logger = get_module_logger("transformer")


def build_render_options(options: Optional[RenderOptions] = None, **overrides) -> RenderOptions:
    """Validate keyword options, layering them over an existing RenderOptions."""
    try:
        if options is None:
            return RenderOptions(**overrides)
        if overrides:
            return RenderOptions(**{**dict(options), **overrides})
        return options
    except ValidationError as e:
        raise ConfigurationError(
            "Invalid render options",
            details={"errors": e.errors(include_url=False)}
        ) from e


class Transformer:
    """Converts document trees into render trees."""

    def __init__(self, options: Optional[RenderOptions] = None, **overrides):
        self.options = build_render_options(options, **overrides)
        self._style_cache = (
            self.options.style_cache if self.options.style_cache is not None else get_default_cache()
        )

    def transform(self, node: Any) -> Any:
        """
        Transform a document node (or its raw JSON mapping).

        Returns:
            The render output, or None when the node renders as nothing.
            Exceptions raised by override hooks propagate unchanged.
        """
        try:
            node = coerce_node(node)
        except MalformedNodeError as e:
            logger.debug(f"Malformed top-level node rendered as nothing: {e.message}")
            return None

        return self._transform_node(node, None, ())

    def _transform_node(self, node: AnyNode, position: Optional[int],
                        parent_chain: Sequence[AnyNode]) -> Any:
        if isinstance(node, Text):
            return node.text
        if isinstance(node, Element):
            return self._transform_element(node, position, parent_chain)
        if isinstance(node, Block):
            return self._transform_block(node)
        if isinstance(node, Root):
            return self._transform_children(node, parent_chain)

        logger.debug(f"Unknown node type {type(node).__name__} rendered as nothing")
        return None

    def _transform_children(self, node: AnyNode, parent_chain: Sequence[AnyNode]) -> list:
        chain = (*parent_chain, node)
        outputs = []
        for index, child in enumerate(node.children):
            output = self._transform_node(child, index, chain)
            if output is not None:
                outputs.append(output)
        return outputs

    def _effective_attributes(self, node: Element) -> dict[str, Any]:
        """Merge tag defaults into the node's attributes and resolve the style slot."""
        attributes = merge_attributes(self.options.html_attributes.get(node.tag), node.attributes)

        style = attributes.get("style")
        if isinstance(style, str):
            if should_strip_style(self.options.strip_styles, node.tag):
                del attributes["style"]
            else:
                # Copied so hooks and consumers cannot alter the cached map
                attributes["style"] = dict(parse_style(style, self._style_cache))

        return attributes

    def _transform_element(self, node: Element, position: Optional[int],
                           parent_chain: Sequence[AnyNode]) -> Any:
        children = self._transform_children(node, parent_chain)
        attributes = self._effective_attributes(node)

        hook = self.options.replace
        if hook is not None:
            metadata = metadata_accessor(node, position, parent_chain)
            result = resolve_hook_result(hook(node.tag, children, attributes, metadata))
            if isinstance(result, Skip):
                return None
            if isinstance(result, Replace):
                return result.value

        return RenderElement(tag=node.tag, attributes=attributes, children=children)

    def _transform_block(self, node: Block) -> Any:
        if node.id not in self.options.blocks:
            logger.debug(f"Block {node.id!r} not found in content mapping, rendered as nothing")
            return None

        content = self.options.blocks[node.id]

        hook = self.options.replace_block
        if hook is not None:
            result = resolve_hook_result(hook(content, node.settings))
            if isinstance(result, Skip):
                return None
            if isinstance(result, Replace):
                return result.value

        return RenderBlock(id=node.id, content=content, settings=node.settings)


def render(node: Any, options: Optional[RenderOptions] = None, **overrides) -> Any:
    """Convenience function to transform a document tree."""
    return Transformer(options, **overrides).transform(node)
