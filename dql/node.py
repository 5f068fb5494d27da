"""
read-only accessors over beautifulsoup nodes.
the query core only touches documents through these functions.
"""
from bs4 import BeautifulSoup
from bs4.element import Comment, Doctype, NavigableString, PageElement, Tag
from .types import *

Node = PageElement


def node_kind(node: Node) -> str:
    """one of document, element, text, comment, doctype, other"""
    if isinstance(node, BeautifulSoup): return 'document'
    if isinstance(node, Tag): return 'element'
    # doctype and comment are navigable strings too, check them first
    if isinstance(node, Doctype): return 'doctype'
    if isinstance(node, Comment): return 'comment'
    if isinstance(node, NavigableString): return 'text'
    return 'other'


def is_element(node: Node) -> bool:
    return isinstance(node, Tag) and not isinstance(node, BeautifulSoup)


def tag_name(node: Node) -> Optional[str]:
    return node.name if is_element(node) else None


def attributes(node: Node) -> Iterator[Tuple[str, str]]:
    """ordered (name, value) pairs of an element, nothing for other nodes"""
    if not isinstance(node, Tag):
        return
    for key, value in node.attrs.items():
        if isinstance(value, list):
            # builders that split class-like attributes hand back lists
            value = ' '.join(value)
        yield key, value


def child_nodes(node: Node) -> Iterator[Node]:
    if isinstance(node, Tag):
        return iter(node.contents)
    return iter(())


def descendant_nodes(node: Node) -> Iterator[Node]:
    """every node below `node` in depth-first document order, lazily"""
    if isinstance(node, Tag):
        return node.descendants
    return iter(())
