"""Index of named definitions per kind, built in one enter-phase walk."""

from graphql import (
    DocumentNode,
    FragmentDefinitionNode,
    OperationDefinitionNode,
    SKIP,
    Visitor,
    visit,
)

from .ir import OperationDefinitionIndex


class OperationCollector(Visitor):
    """Records definition names; selection sets are never entered."""

    def __init__(self, index: OperationDefinitionIndex):
        super().__init__()
        self.index = index

    def enter_operation_definition(self, node: OperationDefinitionNode, *_args):
        if node.name and node.name.value:
            self.index.add(node.operation.value, node.name.value)
        return SKIP

    def enter_fragment_definition(self, node: FragmentDefinitionNode, *_args):
        self.index.add("fragment", node.name.value)
        return SKIP


def collect_operations(document: DocumentNode) -> OperationDefinitionIndex:
    """Group the document's named definitions by kind."""
    index = OperationDefinitionIndex()
    visit(document, OperationCollector(index))
    return index

