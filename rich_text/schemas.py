"""
Pydantic schemas defining the contracts between modules.

DocumentNode: the input tree (Root / Element / Text / Block), read from JSON
RenderElement / RenderBlock: default outputs of the transformer
NodeMetadata: structural view handed to node override hooks on demand
RenderOptions / PlainTextOptions: configuration surface of the two traversals

Data flow:
  raw JSON mapping → coerce_node() → DocumentNode tree
  DocumentNode + RenderOptions → Transformer → render tree
  DocumentNode + PlainTextOptions → PlainTextExtractor → str
"""

from typing import Annotated, Any, Callable, Literal, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
)

from .exceptions import MalformedNodeError
from .logger import get_module_logger
from .style import StyleCache

logger = get_module_logger("schemas")


def _coerce_children(value: Any) -> list:
    """
    Validate children one by one, dropping those that are not valid nodes.

    Each child is validated on its own; a failure drops only that child.
    """
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise ValueError("children must be a list of nodes")

    children = []
    for index, child in enumerate(value):
        if isinstance(child, NODE_TYPES):
            children.append(child)
            continue
        try:
            children.append(_NODE_ADAPTER.validate_python(child))
        except ValidationError as e:
            logger.debug(f"Dropping malformed child at index {index}: {e.error_count()} error(s)")
    return children


# --- Document tree ---

class Text(BaseModel):
    """A literal run of text."""
    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    text: str


class Block(BaseModel):
    """Opaque reference to externally resolved content."""
    model_config = ConfigDict(frozen=True)

    type: Literal["block"] = "block"
    id: str
    settings: dict[str, Any] = Field(default_factory=dict)


class Element(BaseModel):
    """A markup element: tag, attributes (including a raw style string) and children."""
    model_config = ConfigDict(frozen=True)

    type: Literal["element"] = "element"
    tag: str = Field(min_length=1)
    attributes: dict[str, str] = Field(default_factory=dict)
    children: tuple["DocumentNode", ...] = ()

    @field_validator("children", mode="before")
    @classmethod
    def drop_malformed_children(cls, value: Any) -> list:
        return _coerce_children(value)


class Root(BaseModel):
    """Top of a document: an ordered sequence of nodes."""
    model_config = ConfigDict(frozen=True)

    type: Literal["root"] = "root"
    children: tuple["DocumentNode", ...] = ()

    @field_validator("children", mode="before")
    @classmethod
    def drop_malformed_children(cls, value: Any) -> list:
        return _coerce_children(value)


DocumentNode = Annotated[Union[Root, Element, Text, Block], Field(discriminator="type")]
AnyNode = Union[Root, Element, Text, Block]
NODE_TYPES = (Root, Element, Text, Block)

Element.model_rebuild()
Root.model_rebuild()

_NODE_ADAPTER = TypeAdapter(DocumentNode)


def coerce_node(raw: Any) -> AnyNode:
    """
    Turn a raw JSON mapping into a document node.

    Node instances pass through untouched. Malformed descendants are dropped;
    a malformed top-level node raises MalformedNodeError.
    """
    if isinstance(raw, NODE_TYPES):
        return raw
    try:
        return _NODE_ADAPTER.validate_python(raw)
    except ValidationError as e:
        raise MalformedNodeError(
            "Not a document node",
            raw=raw,
            details={"errors": e.errors(include_url=False)}
        ) from e


# --- Structural metadata ---

class NodeMetadata(BaseModel):
    """Position of a node in its tree, computed on request."""
    model_config = ConfigDict(frozen=True)

    ancestors: tuple[Union[Root, Element], ...] = ()   # Root → parent, node itself excluded
    children: tuple[AnyNode, ...] = ()
    previous_sibling: Optional[AnyNode] = None
    next_sibling: Optional[AnyNode] = None


# --- Transformer output ---

class RenderElement(BaseModel):
    """Default output for an element: tag, effective attributes, built children."""
    tag: str
    attributes: dict[str, Any] = Field(default_factory=dict)   # "style" holds a parsed style map
    children: list[Any] = Field(default_factory=list)


class RenderBlock(BaseModel):
    """Default output for a resolved block; the host decides how to display it."""
    id: str
    content: Any = None
    settings: dict[str, Any] = Field(default_factory=dict)


# --- Options ---

class StripStyles(BaseModel):
    """
    Structured style-stripping policy.

    tags=None targets every tag; tags listed in `except` keep their style
    regardless of `tags`.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    tags: Optional[frozenset[str]] = None
    except_tags: frozenset[str] = Field(default_factory=frozenset, alias="except")


class RenderOptions(BaseModel):
    """Configuration for one transformer."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    html_attributes: dict[str, dict[str, str]] = Field(default_factory=dict)
    strip_styles: Union[bool, StripStyles] = False
    replace: Optional[Callable[..., Any]] = None         # (tag, children, attributes, metadata)
    replace_block: Optional[Callable[..., Any]] = None   # (content, settings)
    blocks: dict[str, Any] = Field(default_factory=dict)
    style_cache: Optional[StyleCache] = None


class PlainTextOptions(BaseModel):
    """Configuration for plain-text extraction."""
    first_paragraph: bool = False
    max_length: Optional[int] = Field(default=None, ge=0)
    ignore_tags: frozenset[str] = Field(default_factory=frozenset)
