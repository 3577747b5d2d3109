"""Import statements for the generated module."""

from typing import TYPE_CHECKING

from .config import PluginConfig

if TYPE_CHECKING:
    from .context import CodegenContext

APOLLO_TYPES = ("ApolloClient", "QueryOptions", "MutationOptions")


def baseline_import(config: PluginConfig) -> str:
    """The client types import every generated wrapper needs."""
    return f"import {{ {', '.join(APOLLO_TYPES)} }} from '{config.apollo_client_import_from}';"


def gql_import_statement(gql_import: str) -> str:
    """Build the ``gql`` tag import from a ``module`` or ``module#export`` setting.

    Examples:
        graphql-tag          -> import gql from 'graphql-tag';
        @apollo/client#gql   -> import { gql } from '@apollo/client';
        my-gql#tag           -> import { tag as gql } from 'my-gql';
    """
    module, _, export = gql_import.partition("#")
    if not export:
        return f"import gql from '{module}';"
    if export == "gql":
        return f"import {{ gql }} from '{module}';"
    return f"import {{ {export} as gql }} from '{module}';"


def namespaced_types_import(config: PluginConfig) -> str | None:
    """The ``import * as Types`` statement for operation types, if configured."""
    if not config.import_operation_types_from:
        return None
    return f"import * as {config.namespaced_import_name} from '{config.import_operation_types_from}';"


def build_imports(context: "CodegenContext") -> list[str]:
    """Return the prelude for the generated module.

    Only the baseline is returned when no operation was collected, except for
    the ``gql`` import needed by rendered fragment documents.
    """
    imports = [baseline_import(context.config)]
    if context.collected_operations:
        imports.extend(context.imports)
    elif context.has_rendered_fragments:
        imports.append(gql_import_statement(context.config.gql_import))
    return imports
