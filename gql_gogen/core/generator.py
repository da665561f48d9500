"""Go code generator for GraphQL schemas and operations.

Assembles the generated file:
    1. package clause and import block
    2. shared client code (``base.go.j2``)
    3. one block per operation: Variables type, Response type, client method
    4. schema types: scalars, enums, inputs, objects, unions

Example:
    generator = GolangGenerator(schema, GolangConfig(package_name="api"))
    code = generator.generate(documents)
"""

import logging
from typing import Iterable, Optional

from graphql import DocumentNode, GraphQLSchema

from .catalog import TypeCatalog
from .config import GolangConfig
from .emitter import section
from .hooks import HookRunner
from .naming import format_name
from .resolver import resolve_field_type
from .synthesizer import OperationOutput, OperationSynthesizer, collect_fragments
from .templates import TemplateRenderer

logger = logging.getLogger(__name__)

GO_IMPORTS = [
    "bytes",
    "encoding/json",
    "fmt",
    "io/ioutil",
    "net/http",
    "strings",
]


class GolangGenerator:
    """Generates one Go source file from a schema and operation documents.

    The catalog is computed from the schema unless one is given, which lets
    several generators share the catalog of an unchanged schema.
    """

    def __init__(
        self,
        schema: GraphQLSchema,
        config: Optional[GolangConfig] = None,
        catalog: Optional[TypeCatalog] = None,
        hooks: Optional[HookRunner] = None,
    ):
        self.schema = schema
        self.config = config or GolangConfig()
        self.catalog = catalog or TypeCatalog.from_schema(schema)
        self.hooks = hooks or HookRunner()
        self.renderer = TemplateRenderer(self.config.template_dir)
        # Operations emitted by the last generate() call
        self.operations: list[OperationOutput] = []

    def generate(self, documents: Optional[Iterable[DocumentNode]] = None) -> str:
        """Generate the complete Go source.

        Raises:
            GenerationError: On the first unsupported construct; nothing is
                returned in that case
        """
        documents = self.hooks.run_pre_hooks(list(documents or []))
        synthesizer = OperationSynthesizer(
            self.schema, self.catalog, self.renderer, collect_fragments(documents)
        )
        lines = [
            *self.generate_package(),
            *self.generate_imports(),
            self.renderer.render_base(),
        ]
        self.operations = []
        for document in documents:
            for output in synthesizer.operations(document):
                self.operations.append(output)
                lines.extend(output.lines())
        lines.extend(self.generate_schema())
        logger.debug("Generated %d lines", len(lines))
        return self.hooks.run_post_hooks("\n".join(lines))

    def generate_package(self) -> list[str]:
        return [
            f"package {self.config.package_name}",
            "",
            "// Code generated by gql-gogen ; DO NOT EDIT.",
            "",
        ]

    def generate_imports(self) -> list[str]:
        return ["import (", *(f'  "{name}"' for name in GO_IMPORTS), ")", ""]

    def generate_schema(self) -> list[str]:
        """Generate the Go types of the schema."""
        lines = [
            *self.generate_scalars(),
            *self.generate_enums(),
            *self.generate_inputs(),
            *self.generate_objects(),
        ]
        if self.catalog.unions:
            lines.extend(self.generate_unions())
        return lines

    def generate_scalars(self) -> list[str]:
        lines = section("Scalars")
        for entry in self.catalog.scalars:
            lines.append(f"type {entry.target_name} {entry.target_primitive}")
        return lines

    def generate_enums(self) -> list[str]:
        lines = section("Enums")
        for node in self.catalog.enums:
            go_type = self.catalog.target_name(node.name.value)
            lines.extend(["", f"type {go_type} string", "const ("])
            for value in node.values or ():
                name = value.name.value
                lines.append(f'  {go_type}{format_name(name)} {go_type} = "{name}"')
            lines.append(")")
        return lines

    def generate_inputs(self) -> list[str]:
        lines = section("Inputs")
        for node in self.catalog.inputs:
            lines.extend(self._generate_struct(node))
        return lines

    def generate_objects(self) -> list[str]:
        lines = section("Objects")
        for node in self.catalog.objects:
            lines.extend(self._generate_struct(node))
        return lines

    def generate_unions(self) -> list[str]:
        """Unions are kept as raw JSON, to be decoded by the caller."""
        lines = section("Unions")
        for node in self.catalog.unions:
            lines.append(
                f"type {self.catalog.target_name(node.name.value)} = json.RawMessage"
            )
        return lines

    def _generate_struct(self, node) -> list[str]:
        lines = ["", f"type {self.catalog.target_name(node.name.value)} struct {{"]
        for field in node.fields or ():
            decl = resolve_field_type(field.type, field.name.value, self.catalog)
            lines.append(decl.render())
        lines.append("}")
        return lines
