"""Field type resolution.

Maps a GraphQL type expression (``NamedType`` wrapped in any number of
``NonNullType`` / ``ListType`` nodes) to a Go struct field declaration.
"""

from dataclasses import dataclass

from graphql import ListTypeNode, NamedTypeNode, NonNullTypeNode, TypeNode

from .catalog import TypeCatalog
from .errors import UnsupportedTypeError
from .naming import format_name


@dataclass
class FieldDecl:
    """A resolved Go struct field."""
    field_name: str  # GraphQL name, used in the JSON tag
    target_name: str  # exported Go field name
    type_rendering: str  # e.g. "[]String"
    is_pointer: bool = True
    is_omittable: bool = True

    @property
    def go_type(self) -> str:
        return f"{'*' if self.is_pointer else ''}{self.type_rendering}"

    @property
    def tag(self) -> str:
        options = ",omitempty" if self.is_omittable else ""
        return f'`json:"{self.field_name}{options}"`'

    def render(self, indent: str = "  ") -> str:
        """Render the declaration as one line of a Go struct body."""
        return f"{indent}{self.target_name} {self.go_type} {self.tag}"


def resolve_field_type(
    type_node: TypeNode,
    field_name: str,
    catalog: TypeCatalog,
    prefix: str = "",
    non_null: bool = False,
) -> FieldDecl:
    """Resolve a type expression into a field declaration.

    Args:
        type_node: GraphQL type expression of the field or variable
        field_name: GraphQL name of the field, for the JSON tag
        catalog: Schema type catalog used to name the leaf type
        prefix: Accumulated ``[]`` markers, one per list wrapper
        non_null: Whether the enclosing wrapper was NonNull

    Only the outermost NonNull decides pointer-ness. Once a list wrapper has
    been unwrapped, a NonNull wrapper resets ``non_null`` to False, so
    ``[T!]!`` renders as ``*[]T``.

    Raises:
        UnsupportedTypeError: For a node that is not Named, NonNull or List
        UnknownTypeError: If the named type is not in the catalog
    """
    if isinstance(type_node, NamedTypeNode):
        type_name = catalog.target_name(type_node.name.value, field_name)
        return FieldDecl(
            field_name=field_name,
            target_name=format_name(field_name),
            type_rendering=f"{prefix}{type_name}",
            is_pointer=not non_null,
            is_omittable=not non_null,
        )
    if isinstance(type_node, NonNullTypeNode):
        return resolve_field_type(
            type_node.type, field_name, catalog, prefix, prefix == ""
        )
    if isinstance(type_node, ListTypeNode):
        return resolve_field_type(
            type_node.type, field_name, catalog, prefix + "[]", non_null
        )
    raise UnsupportedTypeError(type_node, field_name)
