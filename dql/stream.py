import io
import logging
from contextlib import contextmanager
from typing import BinaryIO, Iterator, Optional
from urllib.parse import urlparse
from urllib.request import url2pathname

import requests

from .config import SourceConfig

logger = logging.getLogger(__name__)


def create_session(config: SourceConfig) -> requests.Session:
    """session carrying the configured user agent and headers"""
    session = requests.Session()
    session.headers.update({
        'User-Agent': config.user_agent,
        **config.custom_headers
    })
    return session


@contextmanager
def open_stream(location: str, config: SourceConfig,
                session: Optional[requests.Session] = None) -> Iterator[BinaryIO]:
    """
    open a location for reading: http(s) urls are fetched, file:// urls and plain
    paths are opened from disk. the resource is released when the block exits.
    """
    scheme = urlparse(location).scheme.lower()

    if scheme in ('http', 'https'):
        owns_session = session is None
        if owns_session:
            session = create_session(config)
        try:
            logger.debug(f"fetching {location}")
            response = session.get(location, timeout=config.timeout)
            try:
                response.raise_for_status()
                yield io.BytesIO(response.content)
            finally:
                response.close()
        finally:
            if owns_session:
                session.close()
        return

    path = url2pathname(urlparse(location).path) if scheme == 'file' else location
    logger.debug(f"opening {path}")
    with open(path, 'rb') as f:
        yield f
