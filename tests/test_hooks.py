"""Tests for generation hooks."""

import pytest
from graphql import OperationDefinitionNode, parse

from gql_tsgen.core.hooks import (
    AddHeaderHook,
    FilterOperationsHook,
    HookRunner,
    PostGenerateHook,
    PreGenerateHook,
)


@pytest.fixture
def sample_document():
    """Create a sample document for testing."""
    return parse(
        """
        fragment UserFields on User { id }
        query GetUsers { users { ...UserFields } }
        query AdminStats { users { id } }
        mutation CreateUser { createUser(input: {name: "x"}) { id } }
        { users { id } }
        """
    )


def operation_names(document):
    return [
        d.name.value if d.name else None
        for d in document.definitions
        if isinstance(d, OperationDefinitionNode)
    ]


class TestAddHeaderHook:
    """Tests for AddHeaderHook."""

    def test_adds_header(self):
        hook = AddHeaderHook("/* eslint-disable */")
        result = hook.post_generate("client.ts", "export const a = 1;")
        assert result.startswith("/* eslint-disable */\n\n")

    def test_preserves_content(self):
        hook = AddHeaderHook("// Header")
        content = "export const a = 1;"
        result = hook.post_generate("client.ts", content)
        assert content in result

    def test_handles_header_with_newline(self):
        hook = AddHeaderHook("// Header\n")
        result = hook.post_generate("client.ts", "code")
        # Should not double-up newlines
        assert result == "// Header\n\ncode"


class TestFilterOperationsHook:
    """Tests for FilterOperationsHook."""

    def test_exclude_prefix(self, sample_document):
        hook = FilterOperationsHook(exclude_prefix="Admin")
        result = hook.pre_generate(sample_document)

        assert operation_names(result) == ["GetUsers", "CreateUser", None]

    def test_exclude_suffix(self, sample_document):
        hook = FilterOperationsHook(exclude_suffix="Stats")
        result = hook.pre_generate(sample_document)

        assert "AdminStats" not in operation_names(result)

    def test_include_prefix(self, sample_document):
        hook = FilterOperationsHook(include_prefix="Get")
        result = hook.pre_generate(sample_document)

        # Anonymous operations are kept
        assert operation_names(result) == ["GetUsers", None]

    def test_keeps_fragments(self, sample_document):
        hook = FilterOperationsHook(include_prefix="Nothing")
        result = hook.pre_generate(sample_document)

        assert result.definitions[0].name.value == "UserFields"


class TestHookRunner:
    """Tests for HookRunner."""

    def test_run_pre_hooks(self, sample_document):
        runner = HookRunner()
        runner.add_pre_hook(FilterOperationsHook(exclude_prefix="Admin"))

        result = runner.run_pre_hooks(sample_document)
        assert "AdminStats" not in operation_names(result)

    def test_run_post_hooks(self):
        runner = HookRunner()
        runner.add_post_hook(AddHeaderHook("// Header"))

        result = runner.run_post_hooks("client.ts", "code")
        assert result.startswith("// Header")

    def test_multiple_pre_hooks(self, sample_document):
        runner = HookRunner()
        runner.add_pre_hook(FilterOperationsHook(exclude_prefix="Admin"))
        runner.add_pre_hook(FilterOperationsHook(exclude_prefix="Create"))

        result = runner.run_pre_hooks(sample_document)
        assert operation_names(result) == ["GetUsers", None]

    def test_multiple_post_hooks(self):
        runner = HookRunner()
        runner.add_post_hook(AddHeaderHook("// Line 1"))
        runner.add_post_hook(AddHeaderHook("// Line 0"))

        result = runner.run_post_hooks("client.ts", "code")
        # Second wraps first
        assert result.index("// Line 0") < result.index("// Line 1")


class TestProtocolCompliance:
    """Tests for protocol compliance."""

    def test_add_header_is_post_hook(self):
        assert isinstance(AddHeaderHook("header"), PostGenerateHook)

    def test_filter_operations_is_pre_hook(self):
        assert isinstance(FilterOperationsHook(), PreGenerateHook)

    def test_custom_pre_hook(self):
        class CustomPreHook:
            def pre_generate(self, document):
                return document

        assert isinstance(CustomPreHook(), PreGenerateHook)

    def test_custom_post_hook(self):
        class CustomPostHook:
            def post_generate(self, filename, content):
                return content

        assert isinstance(CustomPostHook(), PostGenerateHook)
