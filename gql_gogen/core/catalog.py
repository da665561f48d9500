"""Schema type catalog.

Classifies every named type of a GraphQL schema and maps it to the Go type
name (and, for scalars, the Go primitive) used by the generated code. The
catalog is built once per schema and is read-only afterwards, so several
generator runs over the same schema may share it.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from graphql import (
    DocumentNode,
    EnumTypeDefinitionNode,
    GraphQLSchema,
    InputObjectTypeDefinitionNode,
    InterfaceTypeDefinitionNode,
    ObjectTypeDefinitionNode,
    ScalarTypeDefinitionNode,
    UnionTypeDefinitionNode,
    parse,
    print_schema,
)

from .errors import UnknownTypeError
from .naming import format_name

logger = logging.getLogger(__name__)

# Built-in GraphQL scalars keep their own names and map to fixed Go primitives.
BUILTIN_SCALARS = {
    "Int": "int32",
    "Float": "float64",
    "Boolean": "bool",
    "String": "string",
    "ID": "string",
}

# Custom scalars are opaque to the generator.
CUSTOM_SCALAR_PRIMITIVE = "string"


class TypeCategory(Enum):
    """Kinds of named schema types relevant to code generation."""
    SCALAR = "scalar"
    ENUM = "enum"
    INPUT = "input"
    OBJECT = "object"
    UNION = "union"


@dataclass(frozen=True)
class CatalogEntry:
    """How one schema type is represented in Go."""
    schema_name: str
    target_name: str
    category: TypeCategory
    target_primitive: str | None = None  # scalars only


@dataclass(frozen=True)
class TypeCatalog:
    """Immutable lookup from schema type names to their Go representation."""
    entries: Mapping[str, CatalogEntry]
    enums: tuple[EnumTypeDefinitionNode, ...] = ()
    inputs: tuple[InputObjectTypeDefinitionNode, ...] = ()
    objects: tuple[ObjectTypeDefinitionNode | InterfaceTypeDefinitionNode, ...] = ()
    unions: tuple[UnionTypeDefinitionNode, ...] = ()

    @classmethod
    def from_schema(cls, schema: GraphQLSchema) -> "TypeCatalog":
        """Build the catalog from an executable schema."""
        return cls.from_document(parse(print_schema(schema)))

    @classmethod
    def from_document(cls, document: DocumentNode) -> "TypeCatalog":
        """Build the catalog from a schema SDL document.

        Only top-level type definitions are classified. Any other node kind
        (schema definition, directives, extensions) is ignored.
        """
        entries: dict[str, CatalogEntry] = {
            name: CatalogEntry(name, name, TypeCategory.SCALAR, primitive)
            for name, primitive in BUILTIN_SCALARS.items()
        }
        enums = []
        inputs = []
        objects = []
        unions = []

        for definition in document.definitions:
            if isinstance(definition, ScalarTypeDefinitionNode):
                category = TypeCategory.SCALAR
            elif isinstance(definition, EnumTypeDefinitionNode):
                category = TypeCategory.ENUM
                enums.append(definition)
            elif isinstance(definition, InputObjectTypeDefinitionNode):
                category = TypeCategory.INPUT
                inputs.append(definition)
            elif isinstance(
                definition, (ObjectTypeDefinitionNode, InterfaceTypeDefinitionNode)
            ):
                category = TypeCategory.OBJECT
                objects.append(definition)
            elif isinstance(definition, UnionTypeDefinitionNode):
                category = TypeCategory.UNION
                unions.append(definition)
            else:
                continue

            name = definition.name.value
            entries[name] = CatalogEntry(
                schema_name=name,
                target_name=format_name(name),
                category=category,
                target_primitive=(
                    CUSTOM_SCALAR_PRIMITIVE if category is TypeCategory.SCALAR else None
                ),
            )

        logger.debug(
            "Catalogued %d types (%d enums, %d inputs, %d objects, %d unions)",
            len(entries), len(enums), len(inputs), len(objects), len(unions),
        )
        return cls(
            entries=MappingProxyType(entries),
            enums=tuple(enums),
            inputs=tuple(inputs),
            objects=tuple(objects),
            unions=tuple(unions),
        )

    def get(self, schema_name: str) -> CatalogEntry | None:
        """Return the entry for a schema type, or None."""
        return self.entries.get(schema_name)

    def target_name(self, schema_name: str, field_name: str = "") -> str:
        """Return the Go type name for a schema type.

        Raises:
            UnknownTypeError: If the type is not in the catalog
        """
        entry = self.entries.get(schema_name)
        if entry is None:
            raise UnknownTypeError(schema_name, field_name)
        return entry.target_name

    @property
    def scalars(self) -> list[CatalogEntry]:
        """Scalar entries, built-ins first, then in schema order."""
        return [e for e in self.entries.values() if e.category is TypeCategory.SCALAR]
