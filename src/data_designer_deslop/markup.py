from __future__ import annotations

import dataclasses
import html
import logging
from dataclasses import dataclass
from typing import Union

import lxml.html
from lxml_html_clean import Cleaner

from data_designer_deslop.core import apply_replacements

logger = logging.getLogger(__name__)

ALLOWED_TAGS = frozenset({
    "b", "strong", "i", "em", "u", "a", "span", "br", "p", "div", "ul", "ol", "li",
    "h1", "h2", "h3", "h4", "h5", "h6",
})
ALLOWED_ATTRIBUTES = frozenset({"href", "target", "rel"})
VERBATIM_TAGS = frozenset({"code", "pre"})

# Fragments are parsed into, and serialized out of, a synthetic container.
CONTAINER_TAG = "div"

_CLEANER = Cleaner(
    scripts=True,
    javascript=True,
    comments=True,
    style=True,
    page_structure=True,
    processing_instructions=True,
    forms=False,
    allow_tags=ALLOWED_TAGS | VERBATIM_TAGS,
    remove_unknown_tags=False,
    safe_attrs_only=True,
    safe_attrs=ALLOWED_ATTRIBUTES,
)

# ---------------------------------------------------------------------------
# Document tree
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TextNode:
    text: str


@dataclass(frozen=True)
class ElementNode:
    tag: str
    attributes: tuple[tuple[str, str], ...] = ()
    children: tuple[Node, ...] = ()

    @property
    def verbatim(self) -> bool:
        """Whether this element's text must be left exactly as written."""
        return self.tag.lower() in VERBATIM_TAGS


Node = Union[TextNode, ElementNode]


def replace_in_document(node: Node) -> Node:
    """Rewrite the text leaves of a sanitized tree, skipping verbatim subtrees.

    The result has the same tags, attributes and child order as the input. Nodes
    whose text did not change are returned as the same objects.
    """
    if isinstance(node, TextNode):
        replaced = apply_replacements(node.text)
        return node if replaced == node.text else TextNode(replaced)
    if node.verbatim:
        return node
    children = tuple(replace_in_document(child) for child in node.children)
    if all(new is old for new, old in zip(children, node.children)):
        return node
    return dataclasses.replace(node, children=children)


def plain_text(node: Node) -> str:
    """Concatenate every text payload in document order, dropping the markup."""
    if isinstance(node, TextNode):
        return node.text
    return "".join(plain_text(child) for child in node.children)


# ---------------------------------------------------------------------------
# lxml boundary
# ---------------------------------------------------------------------------


def _from_element(element: lxml.html.HtmlElement) -> ElementNode:
    children: list[Node] = []
    if element.text:
        children.append(TextNode(element.text))
    for child in element:
        # comments and processing instructions carry no tag name
        if isinstance(child.tag, str):
            children.append(_from_element(child))
        if child.tail:
            children.append(TextNode(child.tail))
    return ElementNode(tag=element.tag, attributes=tuple(element.attrib.items()), children=tuple(children))


def _to_element(node: ElementNode) -> lxml.html.HtmlElement:
    element = lxml.html.Element(node.tag, dict(node.attributes))
    last = None
    for child in node.children:
        if isinstance(child, ElementNode):
            last = _to_element(child)
            element.append(last)
        elif last is None:
            element.text = (element.text or "") + child.text
        else:
            last.tail = (last.tail or "") + child.text
    return element


def _fragment(markup: str) -> lxml.html.HtmlElement:
    return lxml.html.fragment_fromstring(markup, create_parent=CONTAINER_TAG)


def _inner_html(element: lxml.html.HtmlElement) -> str:
    parts = [html.escape(element.text or "", quote=False)]
    parts.extend(lxml.html.tostring(child, encoding="unicode") for child in element)
    return "".join(parts)


def parse_html(markup: str) -> ElementNode:
    """Parse an HTML fragment into a tree rooted at a synthetic container element."""
    return _from_element(_fragment(markup))


def serialize_html(node: ElementNode) -> str:
    """Serialize the children of a container node back to an HTML fragment."""
    return _inner_html(_to_element(node))


def sanitize_html(markup: str) -> str:
    """Strip every tag and attribute outside the allow-list, keeping text content.

    Scripts, styles and comments are removed along with their content.
    """
    root = _fragment(markup)
    _CLEANER(root)
    cleaned = _inner_html(root)
    logger.debug(f"Sanitized HTML fragment ({len(markup)} -> {len(cleaned)} chars)")
    return cleaned


def strip_html(markup: str) -> str:
    return plain_text(parse_html(markup))


def replace_in_html(markup: str) -> str:
    """Sanitize an HTML fragment and rewrite its prose, leaving markup and code intact."""
    tree = parse_html(sanitize_html(markup))
    return serialize_html(replace_in_document(tree))
