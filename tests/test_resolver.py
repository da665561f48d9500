"""Tests for field type resolution."""

import pytest
from graphql import parse_type

from gql_gogen.core.errors import UnknownTypeError, UnsupportedTypeError
from gql_gogen.core.resolver import FieldDecl, resolve_field_type


def resolve(type_source, catalog, field_name="field"):
    return resolve_field_type(parse_type(type_source), field_name, catalog)


class TestNullability:
    """Pointer and omitempty follow the outermost NonNull."""

    def test_nullable_named(self, catalog):
        decl = resolve("String", catalog)
        assert decl.go_type == "*String"
        assert decl.is_pointer
        assert decl.is_omittable

    def test_non_null_named(self, catalog):
        decl = resolve("String!", catalog)
        assert decl.go_type == "String"
        assert not decl.is_pointer
        assert not decl.is_omittable

    def test_nullable_list(self, catalog):
        assert resolve("[User]", catalog).go_type == "*[]User"

    def test_non_null_list(self, catalog):
        decl = resolve("[User]!", catalog)
        assert decl.go_type == "[]User"
        assert not decl.is_omittable

    def test_non_null_element_in_nullable_list(self, catalog):
        assert resolve("[String!]", catalog).go_type == "*[]String"

    def test_non_null_element_resets_outer_non_null(self, catalog):
        decl = resolve("[String!]!", catalog)
        assert decl.go_type == "*[]String"
        assert decl.is_omittable

    def test_nested_lists(self, catalog):
        assert resolve("[[Int]]!", catalog).go_type == "[][]Int"
        assert resolve("[[Int]]", catalog).go_type == "*[][]Int"


class TestNaming:
    """Field and type names."""

    def test_field_name_is_exported(self, catalog):
        decl = resolve("String", catalog, "createdAt")
        assert decl.target_name == "CreatedAt"
        assert decl.field_name == "createdAt"

    def test_id_acronym(self, catalog):
        decl = resolve("ID", catalog, "id")
        assert decl.render() == '  ID *ID `json:"id,omitempty"`'

    def test_custom_scalar(self, catalog):
        assert resolve("DateTime", catalog).type_rendering == "DateTime"

    def test_unknown_type(self, catalog):
        with pytest.raises(UnknownTypeError) as exc:
            resolve("Missing!", catalog, "broken")
        assert exc.value.field_name == "broken"


class TestRender:
    """One Go struct field per declaration."""

    def test_optional(self, catalog):
        assert resolve("String", catalog, "name").render() == (
            '  Name *String `json:"name,omitempty"`'
        )

    def test_required(self, catalog):
        assert resolve("[Post]!", catalog, "posts").render() == (
            '  Posts []Post `json:"posts"`'
        )

    def test_custom_indent(self):
        decl = FieldDecl("a", "A", "Int", is_pointer=False, is_omittable=False)
        assert decl.render(indent="\t") == '\tA Int `json:"a"`'


class TestUnsupported:
    """Unknown type expression nodes abort generation."""

    def test_unsupported_node(self, catalog):
        with pytest.raises(UnsupportedTypeError) as exc:
            resolve_field_type(object(), "weird", catalog)
        assert exc.value.field_name == "weird"
        assert "weird" in str(exc.value)
