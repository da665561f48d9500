"""Jinja2 rendering of the fixed Go boilerplate.

Custom templates may be supplied through ``template_dir``:
    renderer = TemplateRenderer(template_dir="./my_templates")

Template lookup order:
1. User's template directory (if provided)
2. Package default templates

Available templates to override:
    - base.go.j2 — client type and GraphQL error types
    - operation.go.j2 — request/response code of one operation
"""

from pathlib import Path
from typing import Optional

from jinja2 import (
    ChoiceLoader,
    Environment,
    FileSystemLoader,
    PackageLoader,
    StrictUndefined,
    select_autoescape,
)

from .errors import GenerationError


def go_raw_string(text: str) -> str:
    """Quote text as a Go raw string literal.

    Raw strings cannot contain backticks, so each one is spliced in as an
    interpreted string.
    """
    return "`" + text.replace("`", '` + "`" + `') + "`"


class TemplateRenderer:
    """Renders the Go code wrapping each operation.

    ``render`` only depends on its arguments: the operation's Go name, its
    printed GraphQL source and whether a ``<name>Variables`` type exists.
    """

    BASE_TEMPLATE = "base.go.j2"
    OPERATION_TEMPLATE = "operation.go.j2"

    def __init__(self, template_dir: Optional[str] = None):
        loaders = []
        if template_dir:
            template_path = Path(template_dir)
            if not template_path.is_dir():
                raise GenerationError(f"Template directory not found: {template_dir}")
            loaders.append(FileSystemLoader(str(template_path)))
        loaders.append(PackageLoader("gql_gogen", "templates"))

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(),
            undefined=StrictUndefined,
        )
        self.env.filters["go_raw_string"] = go_raw_string

    def render(self, name: str, operation: str, has_variables: bool) -> str:
        """Render the request/response code of one operation."""
        template = self.env.get_template(self.OPERATION_TEMPLATE)
        return template.render(
            name=name, operation=operation, has_variables=has_variables
        )

    def render_base(self) -> str:
        """Render the code shared by every operation."""
        return self.env.get_template(self.BASE_TEMPLATE).render()
