"""Intermediate Representation (IR) for generated client wrappers.

This module defines the dataclasses passed between the traversal, the
factory assembler and the renderer, so that text formatting stays separate
from generation decisions.
"""

from dataclasses import dataclass, field
from enum import Enum

from graphql import DocumentNode, FragmentDefinitionNode


class MutationPolicy(str, Enum):
    """What to generate for mutation operations.

    RECORD_ONLY: no wrapper function, but the mutation is still listed in the
        factory under ``mutate``.
    EXCLUDE: no wrapper function and no factory entry.
    EMIT: wrapper function and factory entry, like queries.
    """
    RECORD_ONLY = "record-only"
    EXCLUDE = "exclude"
    EMIT = "emit"


@dataclass(frozen=True)
class FragmentDescriptor:
    """A fragment usable by operations, local to the documents or external."""
    node: FragmentDefinitionNode
    name: str
    on_type: str
    is_external: bool = False


@dataclass
class OperationDefinitionIndex:
    """Names seen per definition kind."""
    query: set[str] = field(default_factory=set)
    mutation: set[str] = field(default_factory=set)
    subscription: set[str] = field(default_factory=set)
    fragment: set[str] = field(default_factory=set)

    def add(self, kind: str, name: str):
        getattr(self, kind).add(name)

    def has(self, kind: str, name: str) -> bool:
        """Check whether a definition of the given kind and name was seen."""
        return name in getattr(self, kind)

    @property
    def count(self) -> int:
        """Number of indexed operations (fragments excluded)."""
        return len(self.query) + len(self.mutation) + len(self.subscription)


@dataclass
class OperationSpec:
    """Everything needed to render one operation wrapper.

    ``name`` is the emission identifier, e.g. ``GetUsersQuery``; the exported
    wrapper is ``{action}{name}``, e.g. ``queryGetUsersQuery``.
    """
    name: str
    kind: str  # PascalCase kind: 'Query', 'Mutation' or 'Subscription'
    action: str  # client method: 'query' or 'mutate'
    document_keyword: str  # options field carrying the document
    options_type: str
    result_type: str
    variables_type: str
    document_variable: str
    variables: list[str] = field(default_factory=list)
    has_required_vars: bool = False

    @property
    def function_name(self) -> str:
        return f"{self.action}{self.name}"

    @property
    def is_query(self) -> bool:
        return self.kind == "Query"

    @property
    def is_mutation(self) -> bool:
        return self.kind == "Mutation"


@dataclass(frozen=True)
class GeneratedOperationRecord:
    """Factory metadata recorded for each handled operation."""
    name: str
    action: str  # 'query' or 'mutate'
    type: str
    optional: bool = False

    @property
    def function_name(self) -> str:
        return f"{self.action}{self.name}"


@dataclass
class EmissionState:
    """Accumulator threaded through the traversal and returned at the end."""
    bodies: list[str] = field(default_factory=list)
    queries: list[GeneratedOperationRecord] = field(default_factory=list)
    mutations: list[GeneratedOperationRecord] = field(default_factory=list)


@dataclass(frozen=True)
class DocumentFile:
    """A parsed GraphQL document and where it came from."""
    location: str
    document: DocumentNode


@dataclass
class GeneratedSourceBundle:
    """Final output: prelude lines and the module body."""
    prepend: list[str]
    content: str
    records: list[GeneratedOperationRecord] = field(default_factory=list)

    def render(self) -> str:
        """Return the full file text."""
        parts = []
        if self.prepend:
            parts.append("\n".join(self.prepend))
        parts.append(self.content)
        return "\n\n".join(parts).rstrip("\n") + "\n"
