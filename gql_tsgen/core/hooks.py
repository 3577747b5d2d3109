"""Generation hooks for customizing code generation.

Provides protocols for pre- and post-generation hooks that can modify
the documents before generation or transform the generated code after.

Example usage:
    from gql_tsgen.core.hooks import PreGenerateHook, PostGenerateHook

    # Pre-generation hook to drop internal operations
    class DropInternal(PreGenerateHook):
        def pre_generate(self, document):
            return FilterOperationsHook(exclude_prefix="Internal").pre_generate(document)

    # Post-generation hook to add headers
    class AddLintDirective(PostGenerateHook):
        def post_generate(self, filename, content):
            return "/* eslint-disable */\\n" + content
"""

from typing import Protocol, runtime_checkable

from graphql import DocumentNode, OperationDefinitionNode


@runtime_checkable
class PreGenerateHook(Protocol):
    """Protocol for pre-generation hooks.

    Pre-generation hooks receive the concatenated documents before code
    generation and return the document to generate from.
    """

    def pre_generate(self, document: DocumentNode) -> DocumentNode:
        """Called before code generation.

        Args:
            document: All input documents, concatenated

        Returns:
            The (possibly modified) document to use for generation
        """
        ...


@runtime_checkable
class PostGenerateHook(Protocol):
    """Protocol for post-generation hooks.

    Post-generation hooks receive the generated code and can transform it
    before it's written to disk.
    """

    def post_generate(self, filename: str, content: str) -> str:
        """Called after code generation.

        Args:
            filename: The name of the generated file (e.g., "client.ts")
            content: The generated code content

        Returns:
            The (possibly transformed) code to write
        """
        ...


class AddHeaderHook:
    """Built-in hook to add a header to generated files.

    Example:
        hook = AddHeaderHook("/* eslint-disable */")
    """

    def __init__(self, header: str):
        self.header = header

    def post_generate(self, _filename: str, content: str) -> str:
        """Add a header to the beginning of the file."""
        if not self.header.endswith("\n"):
            header = self.header + "\n\n"
        else:
            header = self.header + "\n"
        return header + content


class FilterOperationsHook:
    """Built-in hook to filter operations by name prefix/suffix.

    Fragments and anonymous operations are always kept.

    Example:
        # Remove all operations starting with "Admin"
        hook = FilterOperationsHook(exclude_prefix="Admin")
    """

    def __init__(
        self,
        exclude_prefix: str | None = None,
        exclude_suffix: str | None = None,
        include_prefix: str | None = None,
        include_suffix: str | None = None,
    ):
        self.exclude_prefix = exclude_prefix
        self.exclude_suffix = exclude_suffix
        self.include_prefix = include_prefix
        self.include_suffix = include_suffix

    def _should_include(self, name: str) -> bool:
        """Check if an operation should be included."""
        if self.exclude_prefix and name.startswith(self.exclude_prefix):
            return False
        if self.exclude_suffix and name.endswith(self.exclude_suffix):
            return False
        if self.include_prefix and not name.startswith(self.include_prefix):
            return False
        if self.include_suffix and not name.endswith(self.include_suffix):
            return False
        return True

    def pre_generate(self, document: DocumentNode) -> DocumentNode:
        """Drop the operations whose names are filtered out."""
        definitions = [
            definition
            for definition in document.definitions
            if not isinstance(definition, OperationDefinitionNode)
            or not definition.name
            or self._should_include(definition.name.value)
        ]
        return DocumentNode(definitions=tuple(definitions))


class HookRunner:
    """Runs a collection of hooks in order."""

    def __init__(self):
        self.pre_hooks: list[PreGenerateHook] = []
        self.post_hooks: list[PostGenerateHook] = []

    def add_pre_hook(self, hook: PreGenerateHook):
        """Add a pre-generation hook."""
        self.pre_hooks.append(hook)

    def add_post_hook(self, hook: PostGenerateHook):
        """Add a post-generation hook."""
        self.post_hooks.append(hook)

    def run_pre_hooks(self, document: DocumentNode) -> DocumentNode:
        """Run all pre-generation hooks in order."""
        for hook in self.pre_hooks:
            document = hook.pre_generate(document)
        return document

    def run_post_hooks(self, filename: str, content: str) -> str:
        """Run all post-generation hooks in order."""
        for hook in self.post_hooks:
            content = hook.post_generate(filename, content)
        return content
