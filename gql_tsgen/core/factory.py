"""Factory export grouping every recorded operation.

    export const graphQlClient = (client: ApolloClient<object>) => ({
        query: {
            getUsers: (options: ...) => queryGetUsersQuery(client, options),
        },
    });
"""

import logging

from .ir import GeneratedOperationRecord
from .naming import factory_key
from .renderer import TemplateRenderer

logger = logging.getLogger(__name__)


def find_key_collisions(records: list[GeneratedOperationRecord]) -> dict[str, list[str]]:
    """Map each factory key used more than once to the identifiers sharing it."""
    by_key: dict[str, list[str]] = {}
    for record in records:
        by_key.setdefault(factory_key(record.name), []).append(record.name)
    return {key: names for key, names in by_key.items() if len(names) > 1}


def create_factory(
    queries: list[GeneratedOperationRecord],
    mutations: list[GeneratedOperationRecord],
    renderer: TemplateRenderer,
    name: str = "graphQlClient",
) -> str:
    """Render the factory export.

    ``query`` and ``mutate`` members are only present when their list is
    non-empty. Entries keep visit order; colliding keys are all emitted, so
    the last one wins in the object literal.
    """
    for namespace, records in (("query", queries), ("mutate", mutations)):
        for key, names in find_key_collisions(records).items():
            logger.warning(
                "Factory key %s.%s is shared by %s; the last one wins",
                namespace,
                key,
                ", ".join(names),
            )
    return renderer.render_factory(name, queries, mutations)
