"""Loading of GraphQL schemas and operation documents.

A schema source is one of:
    - an SDL file (.graphql, .graphqls, .gql)
    - a directory, searched recursively for SDL files
    - an introspection result saved as .json
    - an http(s) URL, queried with the introspection query
"""

import glob
import json
import logging
import os
from pathlib import Path
from typing import Any, Iterable

import httpx
from graphql import (
    DocumentNode,
    GraphQLError,
    GraphQLSchema,
    Source,
    build_ast_schema,
    build_client_schema,
    concat_ast,
    get_introspection_query,
    parse,
)

from .auth import Auth, NoAuth
from .errors import SchemaLoadError

logger = logging.getLogger(__name__)

GRAPHQL_EXTENSIONS = (".graphql", ".graphqls", ".gql")


def load_schema(
    source: str,
    auth: Auth | None = None,
    timeout: float = 30.0,
    transport: httpx.BaseTransport | None = None,
) -> GraphQLSchema:
    """Load a schema from a file, directory, introspection dump or URL.

    Args:
        source: Path or URL of the schema
        auth: Authentication for URL sources
        timeout: Request timeout in seconds for URL sources
        transport: Optional httpx transport, mainly for tests

    Raises:
        SchemaLoadError: If the source cannot be read or parsed
        httpx.HTTPStatusError: If the endpoint answers with an error status
    """
    if source.startswith(("http://", "https://")):
        return build_client_schema(
            fetch_introspection(source, auth or NoAuth(), timeout, transport)
        )

    path = Path(source)
    if path.suffix == ".json":
        try:
            return build_client_schema(
                _introspection_data(json.loads(path.read_text()))
            )
        except (OSError, KeyError, ValueError, TypeError, GraphQLError) as e:
            raise SchemaLoadError(f"Invalid introspection file {source}: {e}") from e

    files = collect_files(path)
    if not files:
        raise SchemaLoadError(f"No GraphQL schema files found in {source}")
    logger.debug("Loading schema from %d file(s)", len(files))
    try:
        return build_ast_schema(concat_ast(_parse_files(files)))
    except (GraphQLError, TypeError) as e:
        raise SchemaLoadError(f"Invalid schema {source}: {e}") from e


def fetch_introspection(
    url: str,
    auth: Auth,
    timeout: float = 30.0,
    transport: httpx.BaseTransport | None = None,
) -> dict[str, Any]:
    """Run the introspection query against an endpoint and return its data."""
    headers = {"Content-Type": "application/json"}
    headers.update(auth.get_headers())
    logger.debug("Fetching introspection from %s", url)
    with httpx.Client(timeout=timeout, headers=headers, transport=transport) as client:
        response = client.post(url, json={"query": get_introspection_query()})
        response.raise_for_status()
        result = response.json()

    if result.get("errors"):
        error_messages = "; ".join(e.get("message", str(e)) for e in result["errors"])
        raise SchemaLoadError(f"Introspection failed: {error_messages}", result["errors"])
    return _introspection_data(result)


def _introspection_data(result: dict[str, Any]) -> dict[str, Any]:
    data = result.get("data", result)
    if not isinstance(data, dict) or "__schema" not in data:
        raise SchemaLoadError("Introspection result has no __schema")
    return data


def load_documents(paths: Iterable[str]) -> list[DocumentNode]:
    """Parse operation documents from files, directories or glob patterns.

    Every matching file becomes one document, in sorted path order.
    """
    files: list[str] = []
    for pattern in paths:
        if any(c in pattern for c in "*?["):
            matches = sorted(glob.glob(pattern, recursive=True))
            files.extend(m for m in matches if os.path.isfile(m))
        else:
            path = Path(pattern)
            if not path.exists():
                raise SchemaLoadError(f"Document path not found: {pattern}")
            files.extend(collect_files(path))
    # A file matched by several patterns is loaded once.
    files = list(dict.fromkeys(files))
    logger.debug("Loading %d document(s)", len(files))
    try:
        return _parse_files(files)
    except GraphQLError as e:
        raise SchemaLoadError(f"Invalid document: {e.message}") from e


def collect_files(path: Path) -> list[str]:
    """Collect GraphQL files from a file or (recursively) a directory."""
    if path.is_file():
        return [str(path)]
    files = []
    for root, _, filenames in os.walk(path):
        for filename in filenames:
            if filename.endswith(GRAPHQL_EXTENSIONS):
                files.append(os.path.join(root, filename))
    return sorted(files)


def _parse_files(files: list[str]) -> list[DocumentNode]:
    documents = []
    for file_path in files:
        with open(file_path) as f:
            documents.append(parse(Source(f.read(), file_path)))
    return documents
