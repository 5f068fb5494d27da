r"""
'    ________   ________    .____
'    \______ \  \_____  \   |    |
'     |    |  \  /  / \  \  |    |
'     |    `   \/   \_/.  \ |    |___
'    /_______  /\_____\ \_/ |_______ \
'            \/        \__>         \/
"""

# expose the main classes
from .seq import Seq, KeyedSeq
from .resultset import ValueSet
from .nodeset import NodeSet

# expose the factory functions
from .factories import (
    new,
    source,
    from_nodes,
    failed,
    dql,
    D
)
from .seq import empty, empty_keyed, from_iterable

# expose supporting types
from .types import Ok, Err, Failed, Value
from .errors import QueryError, EntityNotFound, TooManyEntities
from .config import SourceConfig, DEFAULT_CONFIG
from .node import node_kind, is_element, tag_name

# define what `import *` does
__all__ = [
    "Seq",
    "KeyedSeq",
    "ValueSet",
    "NodeSet",
    "new",
    "source",
    "from_nodes",
    "failed",
    "dql",
    "D",
    "empty",
    "empty_keyed",
    "from_iterable",
    "Ok",
    "Err",
    "Failed",
    "Value",
    "QueryError",
    "EntityNotFound",
    "TooManyEntities",
    "SourceConfig",
    "DEFAULT_CONFIG",
    "node_kind",
    "is_element",
    "tag_name"
]
