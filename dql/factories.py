import logging
from typing import Any, Iterable, Optional, Union

import requests
from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup
from bs4.element import PageElement

from .config import SourceConfig, DEFAULT_CONFIG
from .nodeset import NodeSet
from .seq import Seq, from_iterable
from .stream import open_stream

logger = logging.getLogger(__name__)


def new(reader: Any, config: Optional[SourceConfig] = None) -> NodeSet:
    """
    parse a document from a readable stream, raw bytes or markup text.
    a parse or read failure becomes a failed set carrying the exception as-is.
    """
    config = config or DEFAULT_CONFIG
    try:
        markup = reader.read() if hasattr(reader, 'read') else reader
        doc = BeautifulSoup(markup, config.features, **_builder_options(config))
    except (ParserRejectedMarkup, OSError) as e:
        logger.warning(f"could not parse document: {e}")
        return NodeSet.failed(e)
    logger.debug(f"parsed document with {config.features}")
    return from_nodes([doc])


def _builder_options(config: SourceConfig) -> dict:
    """tree builder options that keep the first of duplicated attributes"""
    options = {'multi_valued_attributes': None}
    # lxml and html5lib keep the first value on their own, html.parser replaces it
    if config.features == 'html.parser':
        options['on_duplicate_attribute'] = 'ignore'
    return options


def from_nodes(nodes: Iterable[PageElement]) -> NodeSet:
    """wrap nodes that are already parsed, no parsing happens"""
    return NodeSet(from_iterable(nodes))


def failed(error: BaseException) -> NodeSet:
    """a node set in the failed state"""
    return NodeSet.failed(error)


def source(src: Any, config: Optional[SourceConfig] = None,
           session: Optional[requests.Session] = None) -> NodeSet:
    """
    normalize any supported source into a node set:
    - NodeSet: returned unchanged
    - Seq, list or tuple of nodes: wrapped as-is
    - a parsed document or node: a one-node set
    - str: a location (url or path), opened and parsed
    - bytes: raw markup, parsed
    - a readable stream: parsed
    anything else is a programming error and raises TypeError.
    """
    config = config or DEFAULT_CONFIG
    if isinstance(src, NodeSet):
        return src
    if isinstance(src, Seq):
        return NodeSet(src)
    # navigable strings are str too, so nodes are checked before locations
    if isinstance(src, PageElement):
        return from_nodes([src])
    if isinstance(src, str):
        return _from_location(src, config, session)
    if isinstance(src, (bytes, bytearray, memoryview)):
        return new(bytes(src), config)
    if hasattr(src, 'read'):
        return new(src, config)
    if isinstance(src, (list, tuple)):
        return from_nodes(src)
    raise TypeError(f"dql.source: unsupported source type {type(src).__name__}")


def _from_location(location: str, config: SourceConfig,
                   session: Optional[requests.Session]) -> NodeSet:
    try:
        with open_stream(location, config, session) as f:
            return new(f, config)
    except (OSError, requests.RequestException) as e:
        logger.warning(f"could not open {location}: {e}")
        return NodeSet.failed(e)


# --- aliases ---
dql = source
D = source
