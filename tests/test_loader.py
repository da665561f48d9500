"""Tests for schema and document loading."""

import json

import httpx
import pytest
from graphql import introspection_from_schema

from gql_gogen.core.auth import BearerAuth
from gql_gogen.core.errors import SchemaLoadError
from gql_gogen.core.loader import load_documents, load_schema


# =============================================================================
# Tests: SDL
# =============================================================================


class TestLoadSdl:
    """Schemas written in SDL."""

    def test_single_file(self, tmp_path, schema_sdl):
        path = tmp_path / "schema.graphql"
        path.write_text(schema_sdl)
        schema = load_schema(str(path))
        assert schema.get_type("User") is not None

    def test_directory_with_extensions(self, tmp_path):
        (tmp_path / "a_base.graphqls").write_text("type Query { a: Int }")
        nested = tmp_path / "nested"
        nested.mkdir()
        (nested / "b_ext.graphqls").write_text("extend type Query { b: String }")
        (tmp_path / "notes.txt").write_text("not a schema")
        schema = load_schema(str(tmp_path))
        assert set(schema.query_type.fields) == {"a", "b"}

    def test_empty_directory(self, tmp_path):
        with pytest.raises(SchemaLoadError, match="No GraphQL schema files"):
            load_schema(str(tmp_path))

    def test_syntax_error(self, tmp_path):
        path = tmp_path / "schema.graphql"
        path.write_text("type Query {")
        with pytest.raises(SchemaLoadError, match="Invalid schema"):
            load_schema(str(path))


# =============================================================================
# Tests: Introspection
# =============================================================================


@pytest.fixture
def introspection(schema):
    return introspection_from_schema(schema)


class TestLoadIntrospectionFile:
    """Introspection results saved as JSON."""

    def test_wrapped_in_data(self, tmp_path, introspection):
        path = tmp_path / "schema.json"
        path.write_text(json.dumps({"data": introspection}))
        assert load_schema(str(path)).get_type("Post") is not None

    def test_bare(self, tmp_path, introspection):
        path = tmp_path / "schema.json"
        path.write_text(json.dumps(introspection))
        assert load_schema(str(path)).get_type("Role") is not None

    def test_not_introspection(self, tmp_path):
        path = tmp_path / "schema.json"
        path.write_text(json.dumps({"data": {"users": []}}))
        with pytest.raises(SchemaLoadError, match="__schema"):
            load_schema(str(path))

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "schema.json"
        path.write_text("{not json")
        with pytest.raises(SchemaLoadError, match="Invalid introspection file"):
            load_schema(str(path))

    def test_invalid_introspection(self, tmp_path):
        path = tmp_path / "schema.json"
        path.write_text(json.dumps({"__schema": {"types": "oops"}}))
        with pytest.raises(SchemaLoadError, match="Invalid introspection file"):
            load_schema(str(path))


class TestLoadFromUrl:
    """Introspection query against an endpoint."""

    def test_fetch(self, introspection):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, json={"data": introspection})

        schema = load_schema(
            "https://api.example.com/graphql",
            auth=BearerAuth("secret"),
            transport=httpx.MockTransport(handler),
        )
        assert schema.get_type("User") is not None
        assert requests[0].method == "POST"
        assert requests[0].headers["Authorization"] == "Bearer secret"
        assert "__schema" in json.loads(requests[0].content)["query"]

    def test_graphql_errors(self):
        def handler(request):
            return httpx.Response(200, json={"errors": [{"message": "forbidden"}]})

        with pytest.raises(SchemaLoadError, match="forbidden") as exc:
            load_schema(
                "https://api.example.com/graphql",
                transport=httpx.MockTransport(handler),
            )
        assert exc.value.errors == [{"message": "forbidden"}]

    def test_http_error(self):
        def handler(request):
            return httpx.Response(500)

        with pytest.raises(httpx.HTTPStatusError):
            load_schema(
                "http://localhost/graphql",
                transport=httpx.MockTransport(handler),
            )


# =============================================================================
# Tests: Documents
# =============================================================================


class TestLoadDocuments:
    """Operation documents."""

    def test_files_and_directories(self, tmp_path):
        (tmp_path / "b.graphql").write_text("query B { users { id } }")
        (tmp_path / "a.gql").write_text("query A { users { id } }")
        documents = load_documents([str(tmp_path)])
        names = [d.definitions[0].name.value for d in documents]
        assert names == ["A", "B"]

    def test_glob_pattern(self, tmp_path):
        sub = tmp_path / "ops"
        sub.mkdir()
        (sub / "one.graphql").write_text("query One { users { id } }")
        (tmp_path / "skip.txt").write_text("nope")
        documents = load_documents([str(tmp_path / "**" / "*.graphql")])
        assert len(documents) == 1

    def test_duplicates_loaded_once(self, tmp_path):
        path = tmp_path / "q.graphql"
        path.write_text("query Q { users { id } }")
        assert len(load_documents([str(path), str(tmp_path / "*.graphql")])) == 1

    def test_missing_path(self, tmp_path):
        with pytest.raises(SchemaLoadError, match="not found"):
            load_documents([str(tmp_path / "missing.graphql")])

    def test_syntax_error(self, tmp_path):
        path = tmp_path / "bad.graphql"
        path.write_text("query {")
        with pytest.raises(SchemaLoadError, match="Invalid document"):
            load_documents([str(path)])

    def test_no_paths(self):
        assert load_documents([]) == []
