"""Discussion markup parsing and linearization.

The discussion of a symbol arrives as serialized XML. It is parsed once into
immutable :class:`DiscussionNode` trees, each node tagged with the
:class:`NodeKind` that decides how it renders. :func:`linearize` then walks
the top-level nodes in document order and yields one Markdown fragment per
node that produces output.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, Mapping
from xml.sax.saxutils import escape

from lxml import etree

from .errors import MalformedDiscussionError
from .keys import DiscussionKey, is_callout_key, is_discussion_key
from .markdown import bullet, code_block, image, link
from .models import DocField, DocRecord, get

log = logging.getLogger(__name__)

LINK_TAG = "Link"
IMAGE_TAG = "img"

# Upstream emits "atl" in place of "alt" on some image elements
_ALT_ATTRIBUTES = ("alt", "atl")


class NodeKind(Enum):
    """How a discussion node renders, decided when the node is built."""

    PASSTHROUGH = "passthrough"  # Not a discussion tag; emitted verbatim
    CODE_LISTING = "code_listing"
    LIST_BULLET = "list_bullet"
    TEXT = "text"  # No leading child element; emitted as flattened text
    LINK = "link"
    IMAGE = "image"
    CALLOUT = "callout"  # Rendered by the callout collector instead
    WRAPPER = "wrapper"  # Structural tag; emits its first child


@dataclass(frozen=True)
class DiscussionNode:
    """A read-only node of a parsed discussion tree."""

    name: str | None
    description: str  # Serialized form of the node itself
    string_value: str | None = None  # Concatenated descendant text
    is_element: bool = False
    attributes: Mapping[str, str] = field(default_factory=dict)
    children: tuple[DiscussionNode, ...] = ()
    kind: NodeKind = NodeKind.PASSTHROUGH

    @property
    def first_element(self) -> DiscussionNode | None:
        """The first child, if that child is an element."""
        if self.children and self.children[0].is_element:
            return self.children[0]
        return None


def classify(
    name: str | None,
    children: tuple[DiscussionNode, ...],
    string_value: str | None,
) -> NodeKind:
    """Decide the rendering kind of a node from its tag and first child."""
    if not is_discussion_key(name):
        return NodeKind.PASSTHROUGH
    if name == DiscussionKey.CODE_LISTING.value:
        return NodeKind.CODE_LISTING
    if name == DiscussionKey.LIST_BULLET.value:
        return NodeKind.LIST_BULLET

    first = children[0] if children and children[0].is_element else None
    if first is None or not first.name:
        return NodeKind.TEXT
    if (
        first.name == LINK_TAG
        and string_value is not None
        and "href" in first.attributes
    ):
        return NodeKind.LINK
    if first.name == IMAGE_TAG and "src" in first.attributes:
        return NodeKind.IMAGE
    if is_callout_key(name):
        return NodeKind.CALLOUT
    return NodeKind.WRAPPER


def _text_node(text: str) -> DiscussionNode:
    return DiscussionNode(name=None, description=escape(text), string_value=text)


def _children(element) -> Iterator[DiscussionNode]:
    # Whitespace-only text between tags is layout, not content
    if element.text and element.text.strip():
        yield _text_node(element.text)
    for child in element:
        yield _build_node(child)
        if child.tail and child.tail.strip():
            yield _text_node(child.tail)


def _build_node(element) -> DiscussionNode:
    description = etree.tostring(element, encoding="unicode", with_tail=False)

    # Comments and processing instructions have no tag name
    if not isinstance(element.tag, str):
        return DiscussionNode(
            name=None, description=description, string_value=element.text
        )

    name = etree.QName(element).localname
    children = tuple(_children(element))
    string_value = "".join(element.itertext())
    return DiscussionNode(
        name=name,
        description=description,
        string_value=string_value,
        is_element=True,
        attributes=dict(element.attrib),
        children=children,
        kind=classify(name, children, string_value),
    )


def parse_discussion(markup: str) -> tuple[DiscussionNode, ...]:
    """Parse discussion XML and return the children of its root element.

    Raises:
        MalformedDiscussionError: If ``markup`` is not well-formed XML.
    """
    # One parser per call; lxml parsers must not be shared across threads
    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    try:
        root = etree.fromstring(markup.encode("utf-8"), parser)
    except (etree.XMLSyntaxError, ValueError) as e:
        raise MalformedDiscussionError(
            f"Cannot parse discussion markup: {e}", markup
        ) from e
    return tuple(_children(root))


def _render_code_listing(node: DiscussionNode) -> str:
    lines = [child.string_value for child in node.children if child.string_value]
    return code_block("\n".join(lines))


def _render_list(node: DiscussionNode) -> str | None:
    items = [bullet(child.string_value) for child in node.children if child.string_value]
    if not items:
        return None
    return "\n".join(items)


def _render_image(element: DiscussionNode) -> str:
    alt = next(
        (element.attributes[a] for a in _ALT_ATTRIBUTES if a in element.attributes),
        "",
    )
    return image(alt, element.attributes["src"])


def render_node(node: DiscussionNode) -> str | None:
    """Render a single top-level node, or None if it has no inline output."""
    kind = node.kind
    if kind is NodeKind.PASSTHROUGH:
        return node.description
    if kind is NodeKind.CODE_LISTING:
        return _render_code_listing(node)
    if kind is NodeKind.LIST_BULLET:
        return _render_list(node)
    if kind is NodeKind.TEXT:
        return node.string_value
    if kind is NodeKind.LINK:
        return link(node.string_value, node.first_element.attributes["href"])
    if kind is NodeKind.IMAGE:
        return _render_image(node.first_element)
    if kind is NodeKind.CALLOUT:
        return None
    return node.children[0].description if node.children else None


def linearize(nodes: Iterable[DiscussionNode]) -> Iterator[str]:
    """Yield the Markdown fragment of each node, in order, skipping empty ones."""
    for node in nodes:
        fragment = render_node(node)
        if fragment:
            yield fragment


def render_discussion(record: DocRecord) -> str | None:
    """Render a record's discussion markup as Markdown.

    Returns None when the record has no markup, the markup is malformed,
    or nothing in it renders inline.
    """
    markup = get(record, DocField.DOC_DISCUSSION_XML)
    if markup is None:
        return None

    try:
        nodes = parse_discussion(markup)
    except MalformedDiscussionError as e:
        log.warning(
            "Skipping discussion of %s: %s",
            get(record, DocField.NAME) or "unnamed symbol",
            e,
        )
        return None

    text = "\n\n".join(linearize(nodes))
    return text or None
