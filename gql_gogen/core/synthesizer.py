"""Operation struct synthesis.

For each named query or mutation of a document, emits:
    - ``<Name>Variables``: one field per declared variable
    - ``<Name>Response``: nested anonymous structs mirroring the selection sets
    - the request/response code rendered by the ``TemplateRenderer``

Selections are walked depth first with an explicit work stack. Each entry
carries the schema type it is selected on, so the output type of every field
is looked up directly in the schema.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Mapping

from graphql import (
    DocumentNode,
    FieldNode,
    FragmentDefinitionNode,
    FragmentSpreadNode,
    GraphQLNamedType,
    GraphQLNonNull,
    GraphQLOutputType,
    GraphQLSchema,
    GraphQLString,
    InlineFragmentNode,
    OperationDefinitionNode,
    OperationType,
    SelectionSetNode,
    get_named_type,
    get_nullable_type,
    is_interface_type,
    is_list_type,
    is_non_null_type,
    is_object_type,
    print_ast,
)

from .catalog import TypeCatalog
from .emitter import StructEmitter, json_tag, section
from .errors import GenerationError, UnknownFieldError
from .naming import format_name
from .resolver import resolve_field_type
from .templates import TemplateRenderer

logger = logging.getLogger(__name__)

# Leaf fields are decoded as strings whatever their GraphQL scalar type.
LEAF_TYPE = "string"

TYPENAME_FIELD = "__typename"


@dataclass
class SelectedField:
    """All selections of one response key within a selection set."""
    response_key: str
    output_type: GraphQLOutputType
    # Sub-selections paired with the type they select on
    selection_sets: list[tuple[SelectionSetNode, GraphQLNamedType]] = field(
        default_factory=list
    )

    @property
    def is_leaf(self) -> bool:
        return not self.selection_sets


@dataclass
class OperationOutput:
    """Generated Go code for one operation."""
    name: str
    signature: str
    variables: list[str]
    response: list[str]
    code: str

    @property
    def has_variables(self) -> bool:
        return bool(self.variables)

    def lines(self) -> list[str]:
        return [
            *section(self.signature),
            *self.variables,
            *self.response,
            "",
            self.code,
        ]


def struct_shape(output_type: GraphQLOutputType) -> str:
    """Go type prefix for a struct field of the given output type.

    Nullable outputs become pointers and every list level adds ``[]``:
    ``T!`` -> "", ``T`` -> "*", ``[T]!`` -> "[]", ``[T]`` -> "*[]".
    """
    shape = "" if is_non_null_type(output_type) else "*"
    inner = get_nullable_type(output_type)
    while is_list_type(inner):
        shape += "[]"
        inner = get_nullable_type(inner.of_type)
    return shape


class OperationSynthesizer:
    """Emits Go types and client code for the operations of a document."""

    def __init__(
        self,
        schema: GraphQLSchema,
        catalog: TypeCatalog,
        renderer: TemplateRenderer,
        fragments: Mapping[str, FragmentDefinitionNode] | None = None,
    ):
        self.schema = schema
        self.catalog = catalog
        self.renderer = renderer
        self.fragments = dict(fragments or {})

    def synthesize(self, document: DocumentNode) -> list[str]:
        """Generate the code of every supported operation, in document order."""
        lines = []
        for output in self.operations(document):
            lines.extend(output.lines())
        return lines

    def operations(self, document: DocumentNode) -> list[OperationOutput]:
        """Generate every supported operation of a document."""
        fragments = {**self.fragments, **collect_fragments([document])}
        outputs = []
        for definition in document.definitions:
            if not isinstance(definition, OperationDefinitionNode):
                continue
            output = self.synthesize_operation(definition, fragments)
            if output is not None:
                outputs.append(output)
        return outputs

    def synthesize_operation(
        self,
        operation: OperationDefinitionNode,
        fragments: Mapping[str, FragmentDefinitionNode] | None = None,
    ) -> OperationOutput | None:
        """Generate one operation, or None for unsupported operations."""
        # Without a name there is no Go identifier to generate.
        if operation.name is None:
            logger.debug("Skipping anonymous %s", operation.operation.value)
            return None
        if operation.operation == OperationType.SUBSCRIPTION:
            logger.debug("Skipping subscription %s", operation.name.value)
            return None

        fragments = self.fragments if fragments is None else fragments
        name = format_name(operation.name.value)
        printed = print_ast(operation)
        variables = self.generate_variables(name, operation)
        response = self.generate_response(name, operation, fragments)
        operation_text = "\n\n".join(
            [printed] + [print_ast(f) for f in used_fragments(operation, fragments)]
        )
        code = self.renderer.render(name, operation_text, bool(variables))
        logger.debug(
            "Generated %s (%d variables)", name, len(operation.variable_definitions or ())
        )
        return OperationOutput(
            name=name,
            signature=printed.split("{", 1)[0].strip(),
            variables=variables,
            response=response,
            code=code,
        )

    def generate_variables(
        self, name: str, operation: OperationDefinitionNode
    ) -> list[str]:
        """Generate ``type <name>Variables struct {...}``, or nothing."""
        if not operation.variable_definitions:
            return []
        lines = [f"type {name}Variables struct {{"]
        for definition in operation.variable_definitions:
            decl = resolve_field_type(
                definition.type, definition.variable.name.value, self.catalog
            )
            lines.append(decl.render())
        lines.extend(["}", ""])
        return lines

    def generate_response(
        self,
        name: str,
        operation: OperationDefinitionNode,
        fragments: Mapping[str, FragmentDefinitionNode],
    ) -> list[str]:
        """Generate ``type <name>Response struct {...}``."""
        root_type = self.schema.get_root_type(operation.operation)
        if root_type is None:
            raise GenerationError(
                f"schema has no {operation.operation.value} root type"
            )

        emitter = StructEmitter()
        emitter.open_type(f"{name}Response")
        # None marks the end of a struct.
        stack: list[SelectedField | None] = [None]
        stack.extend(
            reversed(self.collect_fields([(operation.selection_set, root_type)], fragments))
        )
        while stack:
            selected = stack.pop()
            if selected is None:
                emitter.close_struct()
                continue
            go_name = format_name(selected.response_key)
            tag = json_tag(selected.response_key)
            if selected.is_leaf:
                emitter.field(go_name, LEAF_TYPE, tag)
                continue
            emitter.open_struct(go_name, tag, struct_shape(selected.output_type))
            stack.append(None)
            stack.extend(
                reversed(self.collect_fields(selected.selection_sets, fragments))
            )
        return emitter.finish()

    def collect_fields(
        self,
        selection_sets: Iterable[tuple[SelectionSetNode, GraphQLNamedType]],
        fragments: Mapping[str, FragmentDefinitionNode],
    ) -> list[SelectedField]:
        """Flatten selection sets into fields keyed by response key.

        Fragment spreads and inline fragments are expanded in place. Fields
        sharing a response key keep the position of the first one and merge
        their sub-selections.
        """
        collected: dict[str, SelectedField] = {}
        visited: set[str] = set()

        def collect(selection_set: SelectionSetNode, parent_type: GraphQLNamedType):
            for selection in selection_set.selections:
                if isinstance(selection, FieldNode):
                    add_field(selection, parent_type)
                elif isinstance(selection, InlineFragmentNode):
                    type_condition = selection.type_condition
                    collect(
                        selection.selection_set,
                        self._named_type(type_condition.name.value)
                        if type_condition
                        else parent_type,
                    )
                elif isinstance(selection, FragmentSpreadNode):
                    fragment_name = selection.name.value
                    if fragment_name in visited:
                        continue
                    visited.add(fragment_name)
                    fragment = fragments.get(fragment_name)
                    if fragment is None:
                        raise GenerationError(f'unknown fragment "{fragment_name}"')
                    collect(
                        fragment.selection_set,
                        self._named_type(fragment.type_condition.name.value),
                    )

        def add_field(node: FieldNode, parent_type: GraphQLNamedType):
            key = node.alias.value if node.alias else node.name.value
            selected = collected.get(key)
            if selected is None:
                output_type = self._field_type(parent_type, node.name.value)
                selected = collected[key] = SelectedField(key, output_type)
            if node.selection_set:
                # Each occurrence selects on its own field type, which differs
                # between the branches of a union or interface.
                selected.selection_sets.append(
                    (
                        node.selection_set,
                        get_named_type(self._field_type(parent_type, node.name.value)),
                    )
                )

        for selection_set, parent_type in selection_sets:
            collect(selection_set, parent_type)
        fields = list(collected.values())
        check_go_names(fields)
        return fields

    def _named_type(self, name: str) -> GraphQLNamedType:
        named = self.schema.get_type(name)
        if named is None:
            raise GenerationError(f'unknown type "{name}" in type condition')
        return named

    @staticmethod
    def _field_type(parent_type: GraphQLNamedType, field_name: str) -> GraphQLOutputType:
        if field_name == TYPENAME_FIELD:
            return GraphQLNonNull(GraphQLString)
        if is_object_type(parent_type) or is_interface_type(parent_type):
            field_def = parent_type.fields.get(field_name)
            if field_def is not None:
                return field_def.type
        raise UnknownFieldError(parent_type.name, field_name)


def collect_fragments(
    documents: Iterable[DocumentNode],
) -> dict[str, FragmentDefinitionNode]:
    """Index the fragment definitions of the given documents by name."""
    return {
        definition.name.value: definition
        for document in documents
        for definition in document.definitions
        if isinstance(definition, FragmentDefinitionNode)
    }


def check_go_names(fields: Iterable[SelectedField]) -> None:
    """Reject response keys that normalize to the same Go field name."""
    seen: dict[str, str] = {}
    for selected in fields:
        go_name = format_name(selected.response_key)
        first = seen.setdefault(go_name, selected.response_key)
        if first != selected.response_key:
            raise GenerationError(
                f'response keys "{first}" and "{selected.response_key}" '
                f'both map to Go field "{go_name}"'
            )


def used_fragments(
    operation: OperationDefinitionNode,
    fragments: Mapping[str, FragmentDefinitionNode],
) -> list[FragmentDefinitionNode]:
    """Fragments spread by an operation, transitively, in discovery order."""
    used: dict[str, FragmentDefinitionNode] = {}
    pending = [operation.selection_set]
    while pending:
        selection_set = pending.pop(0)
        for selection in selection_set.selections:
            if isinstance(selection, FragmentSpreadNode):
                fragment = fragments.get(selection.name.value)
                if fragment is not None and fragment.name.value not in used:
                    used[fragment.name.value] = fragment
                    pending.append(fragment.selection_set)
            elif selection.selection_set:
                pending.append(selection.selection_set)
    return list(used.values())
