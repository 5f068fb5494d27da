from dataclasses import dataclass
from typing import Dict, Optional


@dataclass
class SourceConfig:
    """configuration for turning raw sources into parsed documents"""
    features: str = 'lxml'  # beautifulsoup tree builder: lxml, html.parser, html5lib
    timeout: float = 10.0
    user_agent: str = 'dql/0.1'
    custom_headers: Optional[Dict[str, str]] = None

    def __post_init__(self):
        if self.custom_headers is None:
            self.custom_headers = {}
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")


DEFAULT_CONFIG = SourceConfig()
