"""Operation emitter: typed Apollo Client wrappers for each operation.

For every operation definition, in document order, the emitter renders the
gql document constant and, for queries, a wrapper function:

    export const queryGetUsersQuery = (client: ApolloClient<object>, options: ...) => {
        return client.query<GetUsersQuery, GetUsersQueryVariables>({...options, query: GetUsersDocument});
    };

and records a GeneratedOperationRecord for the factory. Mutations follow the
configured MutationPolicy; subscriptions get no wrapper and no record.
"""

import logging

from graphql import DocumentNode, NonNullTypeNode, OperationDefinitionNode

from .context import CodegenContext
from .ir import EmissionState, GeneratedOperationRecord, MutationPolicy, OperationSpec
from .naming import operation_identifier, pascal_case

logger = logging.getLogger(__name__)


def _has_required_vars(node: OperationDefinitionNode) -> bool:
    return any(
        isinstance(definition.type, NonNullTypeNode) and definition.default_value is None
        for definition in node.variable_definitions or ()
    )


def build_operation_spec(node: OperationDefinitionNode, context: CodegenContext) -> OperationSpec:
    """Derive names, types and variables of a wrapper from an operation node."""
    raw_name = node.name.value if node.name else ""
    kind = pascal_case(node.operation.value)
    name = operation_identifier(raw_name, node.operation.value, context.config)

    is_mutation = kind == "Mutation"
    options_base = "MutationOptions" if is_mutation else "QueryOptions"
    action = "mutate" if is_mutation else "query"
    document_keyword = "mutation" if is_mutation else "query"

    result_type = context.operation_result_type(node)
    variables_type = context.operation_variables_type(node)
    options_type = f"Omit<{options_base}<{variables_type}, {result_type}>, '{document_keyword}'>"

    return OperationSpec(
        name=name,
        kind=kind,
        action=action,
        document_keyword=document_keyword,
        options_type=options_type,
        result_type=result_type,
        variables_type=variables_type,
        document_variable=context.document_variable_name(node),
        variables=[
            definition.variable.name.value for definition in node.variable_definitions or ()
        ],
        has_required_vars=_has_required_vars(node),
    )


def _record(spec: OperationSpec) -> GeneratedOperationRecord:
    return GeneratedOperationRecord(
        name=spec.name,
        action=spec.action,
        type=spec.options_type,
        optional=not spec.has_required_vars,
    )


def emit_operation(node: OperationDefinitionNode, context: CodegenContext, state: EmissionState) -> str:
    """Return the wrapper source for one operation and record it in ``state``.

    Returns an empty string when no wrapper is generated.
    """
    spec = build_operation_spec(node, context)

    if not spec.is_query and not spec.is_mutation:
        logger.debug("Skipping %s: only queries and mutations get wrappers", spec.name)
        return ""

    if spec.is_mutation:
        policy = context.config.mutation_policy
        if policy == MutationPolicy.EXCLUDE:
            logger.debug("Excluding mutation %s", spec.name)
            return ""
        if policy == MutationPolicy.RECORD_ONLY:
            logger.warning(
                "No wrapper emitted for mutation %s; the factory still references %s",
                spec.name,
                spec.function_name,
            )
            state.mutations.append(_record(spec))
            return ""

    body = context.renderer.render_operation(spec)
    (state.mutations if spec.is_mutation else state.queries).append(_record(spec))
    return body


def _leave_operation_definition(
    node: OperationDefinitionNode, context: CodegenContext, state: EmissionState
) -> str:
    document = context.render_document(node)
    wrapper = emit_operation(node, context, state)
    return "\n".join([document, wrapper])


def traverse(document: DocumentNode, context: CodegenContext) -> EmissionState:
    """Walk the document's definitions in order and collect generated bodies.

    Only operation definitions produce output; fragments are rendered
    separately by the context.
    """
    state = EmissionState()
    for definition in document.definitions:
        if isinstance(definition, OperationDefinitionNode):
            state.bodies.append(_leave_operation_definition(definition, context, state))
    logger.debug(
        "Emitted %d query and %d mutation records",
        len(state.queries),
        len(state.mutations),
    )
    return state
