"""
Structural metadata for node override hooks.

Hooks receive a zero-argument accessor instead of a NodeMetadata value, so
ancestors and siblings are only looked up for the nodes whose hook asks.
"""

from typing import Callable, Optional, Sequence

from .schemas import AnyNode, Element, NodeMetadata, Root

MetadataAccessor = Callable[[], NodeMetadata]


def build_metadata(
    node: AnyNode,
    position: Optional[int],
    parent_chain: Sequence[AnyNode]
) -> NodeMetadata:
    """
    Compute the metadata of a node.

    Args:
        node: The node itself
        position: Index of the node within its parent's children (None for a top-level node)
        parent_chain: Enclosing nodes from the root down to the parent
    """
    ancestors = tuple(n for n in parent_chain if isinstance(n, (Root, Element)))
    children = tuple(node.children) if isinstance(node, (Root, Element)) else ()

    previous_sibling = None
    next_sibling = None
    if ancestors and position is not None:
        siblings = ancestors[-1].children
        if position > 0:
            previous_sibling = siblings[position - 1]
        if position + 1 < len(siblings):
            next_sibling = siblings[position + 1]

    return NodeMetadata(
        ancestors=ancestors,
        children=children,
        previous_sibling=previous_sibling,
        next_sibling=next_sibling
    )


def metadata_accessor(
    node: AnyNode,
    position: Optional[int],
    parent_chain: Sequence[AnyNode]
) -> MetadataAccessor:
    """Bind a node's position and return a function computing its metadata."""
    chain = tuple(parent_chain)

    def accessor() -> NodeMetadata:
        return build_metadata(node, position, chain)

    return accessor
