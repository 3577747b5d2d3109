"""Core modules for GraphQL client wrapper generation."""

from .collector import OperationCollector, collect_operations
from .config import PluginConfig
from .context import CodegenContext
from .emitter import build_operation_spec, emit_operation, traverse
from .errors import CodegenError, ConfigurationError, DocumentError
from .factory import create_factory
from .fragments import external_fragments_from_document, fragment_spreads, resolve_fragments
from .hooks import (
    AddHeaderHook,
    FilterOperationsHook,
    HookRunner,
    PostGenerateHook,
    PreGenerateHook,
)
from .imports import build_imports, gql_import_statement
from .ir import (
    DocumentFile,
    EmissionState,
    FragmentDescriptor,
    GeneratedOperationRecord,
    GeneratedSourceBundle,
    MutationPolicy,
    OperationDefinitionIndex,
    OperationSpec,
)
from .loader import load_documents, load_external_fragments, load_schema
from .naming import convert_name, factory_key, operation_identifier, pascal_case
from .plugin import plugin, validate
from .renderer import TemplateRenderer
from .validator import validate_output

__all__ = [
    # Entry points
    "plugin",
    "validate",
    # Config & errors
    "PluginConfig",
    "CodegenError",
    "ConfigurationError",
    "DocumentError",
    # IR types
    "DocumentFile",
    "EmissionState",
    "FragmentDescriptor",
    "GeneratedOperationRecord",
    "GeneratedSourceBundle",
    "MutationPolicy",
    "OperationDefinitionIndex",
    "OperationSpec",
    # Naming
    "convert_name",
    "factory_key",
    "operation_identifier",
    "pascal_case",
    # Generation steps
    "CodegenContext",
    "OperationCollector",
    "TemplateRenderer",
    "build_imports",
    "build_operation_spec",
    "collect_operations",
    "create_factory",
    "emit_operation",
    "external_fragments_from_document",
    "fragment_spreads",
    "gql_import_statement",
    "resolve_fragments",
    "traverse",
    "validate_output",
    # Loading
    "load_documents",
    "load_external_fragments",
    "load_schema",
    # Hooks
    "PreGenerateHook",
    "PostGenerateHook",
    "AddHeaderHook",
    "FilterOperationsHook",
    "HookRunner",
]
