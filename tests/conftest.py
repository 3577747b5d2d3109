"""Shared fixtures for generator tests."""

import pytest
from graphql import build_schema, parse

from gql_tsgen.core.config import PluginConfig
from gql_tsgen.core.context import CodegenContext

SCHEMA_SDL = """
type Query {
    users(first: Int, after: String): [User!]!
    user(id: ID!): User
}

type Mutation {
    createUser(input: CreateUserInput!): User
    deleteUser(id: ID!): Boolean
}

type Subscription {
    userAdded: User
}

input CreateUserInput {
    name: String!
}

type User {
    id: ID!
    name: String
    friends: [User!]!
}
"""

USERS_DOCUMENT = """
fragment UserFields on User {
    id
    name
}

query GetUsers($first: Int!, $after: String) {
    users(first: $first, after: $after) {
        ...UserFields
    }
}

query FetchUser($id: ID!) {
    user(id: $id) {
        ...UserFields
        friends {
            id
        }
    }
}
"""

MUTATIONS_DOCUMENT = """
mutation CreateUser($input: CreateUserInput!) {
    createUser(input: $input) {
        id
    }
}
"""

SUBSCRIPTION_DOCUMENT = """
subscription OnUserAdded {
    userAdded {
        id
    }
}
"""


@pytest.fixture
def schema():
    return build_schema(SCHEMA_SDL)


@pytest.fixture
def users_document():
    return parse(USERS_DOCUMENT)


@pytest.fixture
def mutations_document():
    return parse(MUTATIONS_DOCUMENT)


@pytest.fixture
def subscription_document():
    return parse(SUBSCRIPTION_DOCUMENT)


@pytest.fixture
def config():
    return PluginConfig()


@pytest.fixture
def context(schema, config):
    """A context without fragments."""
    return CodegenContext(schema, [], config)
