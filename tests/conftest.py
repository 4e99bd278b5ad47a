# File: tests/conftest.py
# Contains pytest fixtures shared by the engine, generator and CLI tests.

import logging
from pathlib import Path
from typing import Any, Callable, Dict, List

import pytest
from faker import Faker
# Jinja for rendering test definition files
from jinja2 import Environment, FileSystemLoader


# --- Constants ---
TEST_CONFIG_TEMPLATES_DIR = Path(__file__).parent / "config_templates"


@pytest.fixture(scope="session")
def jinja_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(TEST_CONFIG_TEMPLATES_DIR),
        trim_blocks=True,
        lstrip_blocks=True,
    )


@pytest.fixture
def definition_types() -> List[Dict[str, Any]]:
    """Types used by the generator and CLI tests, in the definition file layout."""
    return [
        {
            "name": "Token",
            "kind": "struct",
            "members": [
                {"ident": "access_token", "transform": "c Cc"},
                {"ident": "refresh_token", "name": "refreshToken"},
                {"ident": "expires_in"},
            ],
        },
        {
            "name": "Variant",
            "kind": "enum",
            "members": [
                {"ident": "AVeryLong2Variant", "transform": "1__|_"},
                {"ident": "LastVeryLong7Variant", "transform": "CcC cCc CcC _1_|*-*"},
                {"ident": "Plain"},
            ],
        },
    ]


@pytest.fixture
def write_definition_file(tmp_path: Path, jinja_env: Environment) -> Callable[..., Path]:
    """
    Renders tests/config_templates/definitions.yaml.j2 into tmp_path.
    Returns a function taking the template variables and returning the file path.
    """

    def _write(types: List[Dict[str, Any]], output_file: Path = None, format_code: bool = False) -> Path:
        template = jinja_env.get_template("definitions.yaml.j2")
        content = template.render(
            output_file=str(output_file or tmp_path / "accessors.py"),
            format_code=format_code,
            types=types,
        )
        config_path = tmp_path / "definitions.yaml"
        config_path.write_text(content, encoding="utf-8")
        return config_path

    return _write


@pytest.fixture
def fake() -> Faker:
    Faker.seed(20240601)
    return Faker()


@pytest.fixture
def restore_root_logging():
    """setup_colored_logging replaces the root handlers; put the originals back."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
