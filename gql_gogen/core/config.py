"""Generator configuration."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_PACKAGE_NAME = "graphql"


class GolangConfig(BaseModel):
    """Options of a generation run.

    Keys may be given in snake_case or in the camelCase used by
    graphql-codegen configuration files:

        {"packageName": "api", "templateDir": "./templates"}
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    package_name: str = Field(default=DEFAULT_PACKAGE_NAME, alias="packageName")
    # Directory of Jinja2 templates overriding the packaged ones
    template_dir: str | None = Field(default=None, alias="templateDir")

    @classmethod
    def from_file(cls, path: str | Path) -> "GolangConfig":
        """Load a JSON configuration file.

        Raises:
            pydantic.ValidationError: If the file content is not a valid config
        """
        return cls.model_validate_json(Path(path).read_text())
