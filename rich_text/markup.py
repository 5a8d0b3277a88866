"""
HTML bridge: HTML source → document tree, render tree → HTML string.

parse_html() reads HTML with BeautifulSoup (lxml parser). Elements carrying a
data-block-id attribute become Block nodes whose settings are the remaining
data-* attributes with the prefix removed.

to_html() serializes a render tree through lxml.etree using the HTML output
method, so void elements (br, img) and escaping follow HTML rules.
"""

from html import escape
from typing import Any, Optional

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString
from lxml import etree

from .logger import get_module_logger
from .schemas import AnyNode, Block, Element, RenderBlock, RenderElement, Root, Text
from .style import style_to_css

logger = get_module_logger("markup")

BLOCK_ID_ATTRIBUTE = "data-block-id"
DATA_PREFIX = "data-"


# --- HTML → document tree ---

def _tag_attributes(tag: Tag) -> dict[str, str]:
    """Flatten BeautifulSoup attributes; multi-valued ones (class, rel) are space-joined."""
    attributes = {}
    for name, value in tag.attrs.items():
        if isinstance(value, (list, tuple)):
            value = " ".join(value)
        attributes[name] = value
    return attributes


def _convert(node) -> Optional[AnyNode]:
    # Comments, doctypes, CDATA and processing instructions
    if isinstance(node, PreformattedString):
        return None

    if isinstance(node, NavigableString):
        return Text(text=str(node))

    if isinstance(node, Tag):
        attributes = _tag_attributes(node)
        block_id = attributes.pop(BLOCK_ID_ATTRIBUTE, None)
        if block_id is not None:
            settings = {
                name[len(DATA_PREFIX):]: value
                for name, value in attributes.items()
                if name.startswith(DATA_PREFIX)
            }
            return Block(id=block_id, settings=settings)

        children = [child for child in (_convert(c) for c in node.children) if child is not None]
        return Element(tag=node.name, attributes=attributes, children=children)

    return None


def parse_html(html: str) -> Root:
    """
    Build a document tree from an HTML string.

    Args:
        html: HTML document or fragment

    Returns:
        Root whose children are the converted contents of <body> (or of the
        whole parse when the parser produced no body)
    """
    soup = BeautifulSoup(html, "lxml")
    container = soup.body if soup.body is not None else soup

    children = [child for child in (_convert(c) for c in container.children) if child is not None]
    logger.debug(f"Parsed HTML into {len(children)} top-level nodes")
    return Root(children=children)


# --- render tree → HTML ---

def _html_attributes(attributes: dict[str, Any]) -> dict[str, str]:
    html_attributes = {}
    for name, value in attributes.items():
        if value is None or value is False:
            continue
        if name == "style" and isinstance(value, dict):
            value = style_to_css(value)
            if not value:
                continue
        elif value is True:
            value = ""
        html_attributes[name] = str(value)
    return html_attributes


def _set_attributes(element: etree._Element, attributes: dict[str, Any]) -> None:
    for name, value in _html_attributes(attributes).items():
        try:
            element.set(name, value)
        except ValueError:
            logger.debug(f"Dropping attribute with invalid name {name!r} on <{element.tag}>")


def _append_text(parent: etree._Element, text: str) -> None:
    if len(parent):
        last = parent[-1]
        last.tail = (last.tail or "") + text
    else:
        parent.text = (parent.text or "") + text


def _append(parent: etree._Element, item: Any) -> None:
    if item is None:
        return

    if isinstance(item, (list, tuple)):
        for child in item:
            _append(parent, child)
        return

    if isinstance(item, RenderElement):
        try:
            element = etree.SubElement(parent, item.tag)
        except ValueError:
            # Names lxml rejects (e.g. Word's "o:p") are unwrapped; children are kept
            logger.debug(f"Unwrapping element with invalid tag name {item.tag!r}")
            element = parent
        else:
            _set_attributes(element, item.attributes)
        for child in item.children:
            _append(element, child)
        return

    if isinstance(item, RenderBlock):
        etree.SubElement(parent, "div", attrib={BLOCK_ID_ATTRIBUTE: item.id})
        return

    _append_text(parent, item if isinstance(item, str) else str(item))


def to_html(output: Any) -> str:
    """
    Serialize a render tree to an HTML string.

    Accepts the result of Transformer.transform(): a string, RenderElement,
    RenderBlock, a list of those, or replacement values produced by hooks
    (written as escaped text via str()).
    """
    holder = etree.Element("div")
    _append(holder, output)

    parts = [escape(holder.text or "", quote=False)]
    parts.extend(etree.tostring(child, method="html", encoding="unicode") for child in holder)
    return "".join(parts)
