"""Line emitter for nested Go struct declarations.

``StructEmitter`` keeps an explicit stack of open structs: every
``open_struct`` pushes a frame and every ``close_struct`` pops one and writes
the closing brace with the field's JSON tag. The stack depth always equals
the nesting depth of the struct being written.
"""

from dataclasses import dataclass

from .errors import GenerationError

INDENT = "  "


def section(name: str) -> list[str]:
    """Banner comment introducing a section of the generated file."""
    return ["", "//", f"// {name}", "//", ""]


def json_tag(key: str) -> str:
    return f'`json:"{key}"`'


@dataclass
class _Frame:
    name: str
    tag: str  # empty for a top-level type declaration


class StructEmitter:
    """Writes one (possibly nested) Go struct type declaration."""

    def __init__(self):
        self.lines: list[str] = []
        self._frames: list[_Frame] = []

    @property
    def depth(self) -> int:
        """Number of structs currently open."""
        return len(self._frames)

    @property
    def _indent(self) -> str:
        return INDENT * self.depth

    def open_type(self, type_name: str):
        """Open a top-level ``type <name> struct {`` declaration."""
        if self._frames:
            raise GenerationError(
                f"cannot declare type {type_name} inside struct {self._frames[-1].name}"
            )
        self.lines.append(f"type {type_name} struct {{")
        self._frames.append(_Frame(type_name, ""))

    def open_struct(self, name: str, tag: str, shape: str = ""):
        """Open an anonymous struct field.

        Args:
            name: Go field name
            tag: Struct tag written when the field is closed
            shape: Type prefix before ``struct``: "", "*", "[]" or "*[]"
        """
        if not self._frames:
            raise GenerationError(f"field {name} declared outside of a type")
        self.lines.append(f"{self._indent}{name} {shape}struct {{")
        self._frames.append(_Frame(name, tag))

    def field(self, name: str, go_type: str, tag: str):
        """Write a plain field in the innermost open struct."""
        if not self._frames:
            raise GenerationError(f"field {name} declared outside of a type")
        self.lines.append(f"{self._indent}{name} {go_type} {tag}")

    def close_struct(self):
        """Close the innermost open struct."""
        if not self._frames:
            raise GenerationError("no open struct to close")
        frame = self._frames.pop()
        closing = f"{self._indent}}}"
        if frame.tag:
            closing = f"{closing} {frame.tag}"
        self.lines.append(closing)

    def finish(self) -> list[str]:
        """Return the emitted lines, checking every struct was closed."""
        if self._frames:
            names = ", ".join(frame.name for frame in self._frames)
            raise GenerationError(f"unclosed structs: {names}")
        return self.lines
