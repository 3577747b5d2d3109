"""Typed Apollo Client wrappers generated from GraphQL documents."""

__version__ = "0.1.0"
