"""Loading of schema and document files using graphql-core."""

import glob
import logging
import os
from typing import Iterable

from graphql import GraphQLError, GraphQLSchema, build_ast_schema, concat_ast, parse

from .errors import DocumentError
from .fragments import external_fragments_from_document
from .ir import DocumentFile, FragmentDescriptor

logger = logging.getLogger(__name__)

SCHEMA_EXTENSIONS = (".graphql", ".graphqls", ".gql")
DOCUMENT_EXTENSIONS = (".graphql", ".gql")


def _collect_files(path: str, extensions: tuple[str, ...]) -> list[str]:
    """Collect matching files from a file or directory path."""
    files = []
    if os.path.isfile(path):
        if path.endswith(extensions):
            files.append(path)
    else:
        for root, _, filenames in os.walk(path):
            for filename in filenames:
                if filename.endswith(extensions):
                    files.append(os.path.join(root, filename))
    return sorted(files)


def _parse_file(file_path: str):
    with open(file_path, encoding="utf-8") as f:
        content = f.read()
    try:
        return parse(content)
    except GraphQLError as e:
        raise DocumentError(e.message, location=file_path) from e


def load_schema(schema_path: str) -> GraphQLSchema:
    """Build a schema from a file or from every schema file under a directory."""
    files = _collect_files(schema_path, SCHEMA_EXTENSIONS)
    if not files:
        raise DocumentError("No schema files found", location=schema_path)

    logger.debug("Loading schema from %d file(s)", len(files))
    ast = concat_ast([_parse_file(file_path) for file_path in files])
    try:
        return build_ast_schema(ast)
    except (GraphQLError, TypeError) as e:
        raise DocumentError(f"Invalid schema: {e}", location=schema_path) from e


def expand_document_paths(patterns: Iterable[str]) -> list[str]:
    """Resolve files, directories and glob patterns to a sorted list of files."""
    paths: set[str] = set()
    for pattern in patterns:
        if os.path.isdir(pattern):
            paths.update(_collect_files(pattern, DOCUMENT_EXTENSIONS))
        elif os.path.isfile(pattern):
            paths.add(pattern)
        else:
            matches = [m for m in glob.glob(pattern, recursive=True) if os.path.isfile(m)]
            if not matches:
                logger.warning("No documents match %s", pattern)
            paths.update(matches)
    return sorted(paths)


def load_documents(patterns: Iterable[str]) -> list[DocumentFile]:
    """Parse every document matched by ``patterns``."""
    documents = [
        DocumentFile(location=file_path, document=_parse_file(file_path))
        for file_path in expand_document_paths(patterns)
    ]
    logger.debug("Loaded %d document(s)", len(documents))
    return documents


def load_external_fragments(path: str) -> list[FragmentDescriptor]:
    """Read fragment definitions that are declared outside the generated module."""
    return external_fragments_from_document(_parse_file(path))
