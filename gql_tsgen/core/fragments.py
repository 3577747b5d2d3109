"""Fragment resolution: local fragments plus externally configured ones."""

import logging
from typing import Iterable

from graphql import (
    DocumentNode,
    FragmentDefinitionNode,
    FragmentSpreadNode,
    Node,
    Visitor,
    visit,
)

from .ir import FragmentDescriptor

logger = logging.getLogger(__name__)


def _descriptor(node: FragmentDefinitionNode, is_external: bool) -> FragmentDescriptor:
    return FragmentDescriptor(
        node=node,
        name=node.name.value,
        on_type=node.type_condition.name.value,
        is_external=is_external,
    )


def resolve_fragments(
    document: DocumentNode,
    external_fragments: Iterable[FragmentDescriptor] = (),
) -> list[FragmentDescriptor]:
    """Return local fragments followed by the external ones.

    Duplicate names are passed through unchanged.
    """
    local = [
        _descriptor(definition, is_external=False)
        for definition in document.definitions
        if isinstance(definition, FragmentDefinitionNode)
    ]
    external = list(external_fragments)
    logger.debug("Resolved %d local and %d external fragments", len(local), len(external))
    return local + external


def external_fragments_from_document(document: DocumentNode) -> list[FragmentDescriptor]:
    """Turn the fragment definitions of a document into external descriptors."""
    return [
        _descriptor(definition, is_external=True)
        for definition in document.definitions
        if isinstance(definition, FragmentDefinitionNode)
    ]


class _SpreadCollector(Visitor):
    def __init__(self):
        super().__init__()
        self.names: list[str] = []

    def enter_fragment_spread(self, node: FragmentSpreadNode, *_args):
        if node.name.value not in self.names:
            self.names.append(node.name.value)


def _direct_spreads(node: Node) -> list[str]:
    collector = _SpreadCollector()
    visit(node, collector)
    return collector.names


def fragment_spreads(node: Node, fragments: Iterable[FragmentDescriptor]) -> list[str]:
    """Names of the known fragments ``node`` depends on, transitively.

    Names come back in first-spread order (depth first); spreads of unknown
    fragments are ignored.
    """
    by_name: dict[str, FragmentDescriptor] = {}
    for fragment in fragments:
        by_name.setdefault(fragment.name, fragment)

    result: list[str] = []

    def walk(current: Node):
        for name in _direct_spreads(current):
            if name in result or name not in by_name:
                continue
            result.append(name)
            walk(by_name[name].node)

    walk(node)
    return result
