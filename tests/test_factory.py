"""Tests for the factory assembler."""

import logging

import pytest

from gql_tsgen.core.factory import create_factory, find_key_collisions
from gql_tsgen.core.ir import GeneratedOperationRecord
from gql_tsgen.core.renderer import TemplateRenderer

QUERY_OPTIONS = "Omit<QueryOptions<GetUsersQueryVariables, GetUsersQuery>, 'query'>"
MUTATION_OPTIONS = "Omit<MutationOptions<CreateUserMutationVariables, CreateUserMutation>, 'mutation'>"


@pytest.fixture
def renderer():
    return TemplateRenderer()


@pytest.fixture
def query_record():
    return GeneratedOperationRecord(name="GetUsersQuery", action="query", type=QUERY_OPTIONS)


@pytest.fixture
def mutation_record():
    return GeneratedOperationRecord(name="CreateUserMutation", action="mutate", type=MUTATION_OPTIONS)


class TestCreateFactory:
    """Tests for create_factory."""

    def test_export_header(self, renderer):
        factory = create_factory([], [], renderer)
        assert factory.startswith("export const graphQlClient = (client: ApolloClient<object>) => ({")

    def test_custom_name(self, renderer):
        factory = create_factory([], [], renderer, name="apiClient")
        assert factory.startswith("export const apiClient = ")

    def test_empty(self, renderer):
        factory = create_factory([], [], renderer)

        assert "query:" not in factory
        assert "mutate:" not in factory
        assert factory.endswith("});")

    def test_query_entry(self, renderer, query_record):
        factory = create_factory([query_record], [], renderer)

        assert "query: {" in factory
        assert f"getUsers: (options: {QUERY_OPTIONS}) => queryGetUsersQuery(client, options)," in factory
        assert "mutate:" not in factory

    def test_mutation_entry(self, renderer, mutation_record):
        factory = create_factory([], [mutation_record], renderer)

        assert "mutate: {" in factory
        assert (
            f"createUser: (options: {MUTATION_OPTIONS}) => mutateCreateUserMutation(client, options),"
            in factory
        )
        assert "query:" not in factory

    def test_optional_options(self, renderer):
        record = GeneratedOperationRecord(
            name="ListUsersQuery", action="query", type="T", optional=True
        )
        factory = create_factory([record], [], renderer)
        assert "listUsers: (options?: T) => queryListUsersQuery(client, options)," in factory

    def test_visit_order_preserved(self, renderer):
        records = [
            GeneratedOperationRecord(name=name, action="query", type="T")
            for name in ("ZetaQuery", "AlphaQuery", "MidQuery")
        ]
        factory = create_factory(records, [], renderer)

        assert factory.index("zeta:") < factory.index("alpha:") < factory.index("mid:")

    def test_query_before_mutate(self, renderer, query_record, mutation_record):
        factory = create_factory([query_record], [mutation_record], renderer)
        assert factory.index("query: {") < factory.index("mutate: {")


class TestKeyCollisions:
    """Colliding factory keys are emitted as-is; the last entry wins in TypeScript."""

    @pytest.fixture
    def colliding(self):
        return [
            GeneratedOperationRecord(name="Get_UsersQuery", action="query", type="A"),
            GeneratedOperationRecord(name="GetUsersQuery", action="query", type="B"),
            GeneratedOperationRecord(name="GetUsersQuery", action="query", type="C"),
        ]

    def test_find_key_collisions(self, colliding):
        assert find_key_collisions(colliding) == {"getUsers": ["GetUsersQuery", "GetUsersQuery"]}

    def test_duplicates_emitted(self, renderer, colliding):
        factory = create_factory(colliding, [], renderer)

        assert factory.count("getUsers: ") == 2
        assert factory.index("getUsers: (options: B)") < factory.index("getUsers: (options: C)")

    def test_collision_logged(self, renderer, colliding, caplog):
        with caplog.at_level(logging.WARNING, logger="gql_tsgen.core.factory"):
            create_factory(colliding, [], renderer)

        assert "query.getUsers" in caplog.text
