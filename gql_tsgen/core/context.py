"""Shared state of one generation run.

Provides what the emitter needs from the surrounding codegen machinery:
identifier conversion for documents and operation types, rendering of gql
document constants, and the imports those constants and types require.
"""

import logging
from typing import Optional

from graphql import ExecutableDefinitionNode, GraphQLSchema, OperationDefinitionNode, print_ast

from .config import PluginConfig
from .fragments import fragment_spreads
from .imports import gql_import_statement, namespaced_types_import
from .ir import FragmentDescriptor
from .naming import convert_name, pascal_case
from .renderer import TemplateRenderer

logger = logging.getLogger(__name__)


class CodegenContext:
    """Per-run naming, document rendering and import bookkeeping."""

    def __init__(
        self,
        schema: Optional[GraphQLSchema],
        fragments: list[FragmentDescriptor],
        config: PluginConfig,
        renderer: Optional[TemplateRenderer] = None,
    ):
        self.schema = schema
        self.fragments = fragments
        self.config = config
        self.renderer = renderer or TemplateRenderer()
        self.imports: list[str] = []
        self.collected_operations: list[OperationDefinitionNode] = []
        self.has_rendered_fragments = False

    def require_import(self, statement: Optional[str]):
        """Register an import, keeping the order of first registration."""
        if statement and statement not in self.imports:
            logger.debug("Import required: %s", statement)
            self.imports.append(statement)

    # Names

    def document_variable_name(self, node: OperationDefinitionNode) -> str:
        name = node.name.value if node.name else ""
        return convert_name(
            name,
            self.config,
            suffix=self.config.document_variable_suffix,
            use_types_prefix=False,
            use_types_suffix=False,
        )

    def fragment_variable_name(self, fragment_name: str) -> str:
        return convert_name(
            fragment_name,
            self.config,
            suffix=self.config.fragment_variable_suffix,
            use_types_prefix=False,
            use_types_suffix=False,
        )

    def _operation_type(self, node: OperationDefinitionNode, suffix: str) -> str:
        name = node.name.value if node.name else ""
        type_name = convert_name(name, self.config, suffix=suffix)
        if self.config.import_operation_types_from:
            self.require_import(namespaced_types_import(self.config))
            return f"{self.config.namespaced_import_name}.{type_name}"
        return type_name

    def operation_result_type(self, node: OperationDefinitionNode) -> str:
        """E.g. ``GetUsersQuery`` for ``query getUsers``."""
        return self._operation_type(node, pascal_case(node.operation.value))

    def operation_variables_type(self, node: OperationDefinitionNode) -> str:
        """E.g. ``GetUsersQueryVariables`` for ``query getUsers``."""
        return self._operation_type(node, f"{pascal_case(node.operation.value)}Variables")

    # Documents

    def _render_gql(self, name: str, node: ExecutableDefinitionNode) -> str:
        self.require_import(gql_import_statement(self.config.gql_import))
        references = [
            self.fragment_variable_name(fragment)
            for fragment in fragment_spreads(node, self.fragments)
        ]
        return self.renderer.render_document(name, print_ast(node), references)

    def render_document(self, node: OperationDefinitionNode) -> str:
        """The ``export const XDocument = gql`...`;`` constant for an operation."""
        self.collected_operations.append(node)
        return self._render_gql(self.document_variable_name(node), node)

    def render_fragments(self) -> str:
        """Document constants for the local fragments, in document order.

        External fragments are referenced by name but declared elsewhere.
        """
        rendered = [
            self._render_gql(self.fragment_variable_name(fragment.name), fragment.node)
            for fragment in self.fragments
            if not fragment.is_external
        ]
        self.has_rendered_fragments = bool(rendered)
        return "\n".join(rendered)
