"""Generation hooks for customizing code generation.

Pre-generation hooks can rewrite the operation documents before any Go code
is produced; post-generation hooks transform the final Go source.

Example usage:
    from gql_gogen.core.hooks import AddHeaderHook, FilterOperationsHook, HookRunner

    hooks = HookRunner()
    hooks.add_pre_hook(FilterOperationsHook(exclude_prefix="Internal"))
    hooks.add_post_hook(AddHeaderHook("// Copyright 2024 My Company"))
"""

from typing import Protocol, runtime_checkable

from graphql import DocumentNode, OperationDefinitionNode


@runtime_checkable
class PreGenerateHook(Protocol):
    """Protocol for pre-generation hooks.

    Example:
        class DropMutations:
            def pre_generate(self, documents):
                return [strip_mutations(d) for d in documents]
    """

    def pre_generate(self, documents: list[DocumentNode]) -> list[DocumentNode]:
        """Called before code generation.

        Args:
            documents: The parsed operation documents

        Returns:
            The (possibly modified) documents to generate code for
        """
        ...


@runtime_checkable
class PostGenerateHook(Protocol):
    """Protocol for post-generation hooks."""

    def post_generate(self, content: str) -> str:
        """Called with the complete generated Go source.

        Returns:
            The (possibly transformed) source
        """
        ...


class AddHeaderHook:
    """Built-in hook to put a comment block at the top of the generated file.

    Example:
        hook = AddHeaderHook("// Copyright 2024 My Company")
    """

    def __init__(self, header: str):
        self.header = header

    def post_generate(self, content: str) -> str:
        if not self.header.endswith("\n"):
            header = self.header + "\n\n"
        else:
            header = self.header + "\n"
        return header + content


class FilterOperationsHook:
    """Built-in hook to keep or drop operations by name prefix.

    Fragments and anonymous operations are never filtered.

    Example:
        # Drop every operation whose name starts with "Debug"
        hook = FilterOperationsHook(exclude_prefix="Debug")
    """

    def __init__(
        self,
        exclude_prefix: str | None = None,
        include_prefix: str | None = None,
    ):
        self.exclude_prefix = exclude_prefix
        self.include_prefix = include_prefix

    def _should_include(self, definition) -> bool:
        if not isinstance(definition, OperationDefinitionNode) or definition.name is None:
            return True
        name = definition.name.value
        if self.exclude_prefix and name.startswith(self.exclude_prefix):
            return False
        if self.include_prefix and not name.startswith(self.include_prefix):
            return False
        return True

    def pre_generate(self, documents: list[DocumentNode]) -> list[DocumentNode]:
        return [
            DocumentNode(
                definitions=tuple(
                    d for d in document.definitions if self._should_include(d)
                ),
                loc=document.loc,
            )
            for document in documents
        ]


class HookRunner:
    """Runs a collection of hooks in order."""

    def __init__(self):
        self.pre_hooks: list[PreGenerateHook] = []
        self.post_hooks: list[PostGenerateHook] = []

    def add_pre_hook(self, hook: PreGenerateHook):
        self.pre_hooks.append(hook)

    def add_post_hook(self, hook: PostGenerateHook):
        self.post_hooks.append(hook)

    def run_pre_hooks(self, documents: list[DocumentNode]) -> list[DocumentNode]:
        """Run all pre-generation hooks in order."""
        for hook in self.pre_hooks:
            documents = hook.pre_generate(documents)
        return documents

    def run_post_hooks(self, content: str) -> str:
        """Run all post-generation hooks in order."""
        for hook in self.post_hooks:
            content = hook.post_generate(content)
        return content
