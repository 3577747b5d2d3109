"""Generation entry points.

    bundle = plugin(schema, documents, PluginConfig())
    print(bundle.render())
"""

import logging
from typing import Any, Iterable, Mapping, Optional, Union

from graphql import DocumentNode, GraphQLSchema, concat_ast

from .collector import collect_operations
from .config import PluginConfig
from .context import CodegenContext
from .emitter import traverse
from .factory import create_factory
from .fragments import resolve_fragments
from .hooks import HookRunner
from .imports import build_imports
from .ir import DocumentFile, GeneratedSourceBundle
from .renderer import TemplateRenderer
from .validator import validate_output

logger = logging.getLogger(__name__)

ConfigLike = Union[PluginConfig, Mapping[str, Any], None]


def _as_config(config: ConfigLike) -> PluginConfig:
    if isinstance(config, PluginConfig):
        return config
    return PluginConfig.from_mapping(config)


def _as_document(document: Union[DocumentFile, DocumentNode]) -> DocumentNode:
    return document.document if isinstance(document, DocumentFile) else document


def plugin(
    schema: Optional[GraphQLSchema],
    documents: Iterable[Union[DocumentFile, DocumentNode]],
    config: ConfigLike = None,
    renderer: Optional[TemplateRenderer] = None,
    hooks: Optional[HookRunner] = None,
) -> GeneratedSourceBundle:
    """Generate the wrapper module for the given documents.

    Args:
        schema: The schema the documents were written against
        documents: Parsed documents (or DocumentFile wrappers)
        config: PluginConfig or a mapping of config keys
        renderer: Optional renderer, e.g. one using custom templates
        hooks: Optional hooks; pre-generation hooks see the concatenated documents

    Returns:
        The prelude imports and the module content
    """
    config = _as_config(config)
    ast = concat_ast([_as_document(document) for document in documents])
    if hooks:
        ast = hooks.run_pre_hooks(ast)

    fragments = resolve_fragments(ast, config.external_fragments)
    index = collect_operations(ast)
    logger.debug(
        "Found %d queries, %d mutations, %d subscriptions, %d fragments",
        len(index.query),
        len(index.mutation),
        len(index.subscription),
        len(index.fragment),
    )

    context = CodegenContext(schema, fragments, config, renderer)
    rendered_fragments = context.render_fragments()
    state = traverse(ast, context)

    parts = [
        rendered_fragments,
        *state.bodies,
        create_factory(state.queries, state.mutations, context.renderer, config.factory_name),
    ]
    return GeneratedSourceBundle(
        prepend=build_imports(context),
        content="\n".join(part for part in parts if part),
        records=[*state.queries, *state.mutations],
    )


def validate(
    schema: Optional[GraphQLSchema],
    documents: Iterable[Union[DocumentFile, DocumentNode]],
    config: ConfigLike,
    output_file: str,
):
    """Check the output file before generation; raises ConfigurationError."""
    validate_output(_as_config(config), output_file)
