"""Tests for the generator configuration."""

import json

import pytest
from pydantic import ValidationError

from gql_gogen.core.config import GolangConfig


class TestGolangConfig:
    """Configuration values and aliases."""

    def test_defaults(self):
        config = GolangConfig()
        assert config.package_name == "graphql"
        assert config.template_dir is None

    def test_snake_case(self):
        assert GolangConfig(package_name="api").package_name == "api"

    def test_camel_case_alias(self):
        config = GolangConfig.model_validate({"packageName": "api", "templateDir": "t"})
        assert config.package_name == "api"
        assert config.template_dir == "t"

    def test_unknown_key(self):
        with pytest.raises(ValidationError):
            GolangConfig.model_validate({"packgeName": "typo"})

    def test_from_file(self, tmp_path):
        path = tmp_path / "codegen.json"
        path.write_text(json.dumps({"packageName": "client"}))
        assert GolangConfig.from_file(path).package_name == "client"

    def test_from_invalid_file(self, tmp_path):
        path = tmp_path / "codegen.json"
        path.write_text(json.dumps({"packageName": 3}))
        with pytest.raises(ValidationError):
            GolangConfig.from_file(str(path))
