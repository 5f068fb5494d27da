from __future__ import annotations
from .types import *
from .errors import EntityNotFound
from .seq import Seq, KeyedSeq, empty_keyed
from .resultset import _BaseResultSet, ValueSet
from .node import (
    Node, node_kind, is_element, tag_name, attributes, child_nodes, descendant_nodes
)


class NodeSet(_BaseResultSet[Node]):
    """
    a lazy set of html nodes. every combinator returns a new set built on top of this one
    and does no work until a reducer on `.to` drives it. a failed set stays failed, with
    the same error, through any chain of combinators.
    """

    def named(self, name: str) -> 'NodeSet':
        """elements whose tag is `name`; every other node is skipped"""
        if self.is_failed:
            return self
        parent = self._state

        def produce_named(consume: Consumer[Node]) -> None:
            def match(node: Node) -> bool:
                if is_element(node) and tag_name(node) == name:
                    return consume(node)
                return True

            parent.produce(match)

        return NodeSet(Seq(produce_named))

    def children(self) -> 'NodeSet':
        """direct children of every node, concatenated in set order"""
        if self.is_failed:
            return self
        parent = self._state

        def produce_children(consume: Consumer[Node]) -> None:
            def expand(node: Node) -> bool:
                for child in child_nodes(node):
                    if not consume(child):
                        return False
                return True

            parent.produce(expand)

        return NodeSet(Seq(produce_children))

    def descendants(self) -> 'NodeSet':
        """each node followed by all of its descendants, in document order"""
        if self.is_failed:
            return self
        parent = self._state

        def produce_descendants(consume: Consumer[Node]) -> None:
            def expand(node: Node) -> bool:
                if not consume(node):
                    return False
                for descendant in descendant_nodes(node):
                    if not consume(descendant):
                        return False
                return True

            parent.produce(expand)

        return NodeSet(Seq(produce_descendants))

    def attr(self, name: str) -> ValueSet:
        """
        one result per node: Ok(value) of its first attribute called `name`,
        or Err(EntityNotFound). unlike named(), no node is ever skipped.
        """
        if self.is_failed:
            return ValueSet.failed(self.error)
        parent = self._state

        def produce_values(consume: Consumer[Value]) -> None:
            def project(node: Node) -> bool:
                for key, value in attributes(node):
                    if key == name:
                        return consume(Ok(value))
                return consume(Err(EntityNotFound(f"attribute {name!r} not found")))

            parent.produce(project)

        return ValueSet(Seq(produce_values))

    def attrs(self) -> KeyedSeq[str, str]:
        """(name, value) pairs of every node's attributes, in set order"""
        if self.is_failed:
            return empty_keyed()
        parent = self._state

        def produce_pairs(consume: KeyedConsumer[str, str]) -> None:
            def expand(node: Node) -> bool:
                for key, value in attributes(node):
                    if not consume(key, value):
                        return False
                return True

            parent.produce(expand)

        return KeyedSeq(produce_pairs)

    # --- terminal accessor hooks ---

    def _to_result(self, item: Node) -> Value:
        return Ok(item)

    def _scalar(self, item: Node) -> Node:
        return item

    def _record(self, item: Node) -> Dict[str, Any]:
        record: Dict[str, Any] = {'_kind': node_kind(item), '_tag': tag_name(item)}
        for key, value in attributes(item):
            # first occurrence wins, same as attr()
            record.setdefault(key, value)
        return record
