"""
Accessor Module Code Generator

This module renders every type of a definition file and writes the
resulting accessors module to disk.
"""

import logging
from pathlib import Path
from typing import List, Optional

from fieldcase_generator.ast_codegen.accessors import generate_accessors_code
from fieldcase_generator.codegen_utils import format_python_code_using_black
from fieldcase_generator.config_validation import GeneratorConfigSchema
from fieldcase_generator.exceptions import CodeGenerationError
from fieldcase_generator.introspection import TypeMembers

logger = logging.getLogger(__name__)


class CodeGenerator:
    """Generates the accessors module for a list of types."""

    def __init__(
        self,
        types: List[TypeMembers],
        output_file: Path,
        module_docstring: Optional[str] = None,
        format_code: bool = True,
    ):
        self.types = types
        self.output_file = Path(output_file)
        self.module_docstring = module_docstring
        self.format_code = format_code

    @classmethod
    def from_config(cls, config: GeneratorConfigSchema) -> "CodeGenerator":
        return cls(
            types=config.to_type_members(),
            output_file=Path(config.output_file),
            module_docstring=config.module_docstring,
            format_code=config.format_code,
        )

    def generate_code(self) -> str:
        """Render all types and return the module source."""
        code = generate_accessors_code(self.types, self.module_docstring)
        if self.format_code:
            code = format_python_code_using_black(self.output_file, code)
        return code

    def write(self) -> Path:
        """Generate the module and write it to the output file."""
        code = self.generate_code()
        try:
            self.output_file.parent.mkdir(parents=True, exist_ok=True)
            self.output_file.write_text(code, encoding="utf-8")
        except OSError as e:
            raise CodeGenerationError(
                f"Could not write {self.output_file}: {e}",
                component="module",
            ) from e
        logger.info(f"Generated file: {self.output_file}")
        return self.output_file


def generate_accessors_module(config: GeneratorConfigSchema) -> Path:
    """Generate the accessors module described by a validated definition file."""
    generator = CodeGenerator.from_config(config)
    logger.info(f"Generating accessors for {len(generator.types)} types...")
    return generator.write()
