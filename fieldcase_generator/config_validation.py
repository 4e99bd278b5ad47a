# File: fieldcase_generator/config_validation.py
from argparse import Namespace
import sys
import logging
import keyword
from typing import List, Optional, Dict, Any, Literal, Self
import yaml
from pathlib import Path

from pydantic import (
    BaseModel,
    Field,
    ValidationError,
    field_validator,
    model_validator,
    ConfigDict,
)

from .constants import AccessorNames, DefaultConfig
from .domain.expression import parse_expression
from .exceptions import ConfigurationError, MalformedExpressionError
from .introspection import MemberInfo, TypeMembers

logger = logging.getLogger(__name__)

# --- Helper Functions for Validation ---


def is_valid_python_identifier(name: str) -> bool:
    """Check if a string is a valid Python identifier and not a keyword."""
    return name.isidentifier() and not keyword.iskeyword(name)


# --- Pydantic Models for the Definition File Schema ---
class MemberDefinitionSchema(BaseModel):
    """Schema for one struct field or enum variant."""

    ident: str = Field(..., min_length=1, description="Field or variant identifier as declared.")
    name: Optional[str] = Field(default=None, description="Replacement name.")
    transform: Optional[str] = Field(default=None, description="Transform expression, e.g. 'c Cc|_'.")

    model_config = ConfigDict(extra="forbid")

    @field_validator("ident")
    @classmethod
    def check_ident(cls, v: str) -> str:
        """Ensure the identifier could be declared on a Python class."""
        if not v.isidentifier():
            raise ValueError(f"'{v}' is not a valid identifier.")
        return v

    @field_validator("transform")
    @classmethod
    def check_transform(cls, v: Optional[str]) -> Optional[str]:
        """Parse the expression so a malformed one is reported at load time."""
        if v is not None:
            try:
                parse_expression(v)
            except MalformedExpressionError as e:
                raise ValueError(f"{e.reason} (at {e.token!r})") from e
        return v

    def to_member_info(self) -> MemberInfo:
        return MemberInfo(ident=self.ident, name=self.name, transform=self.transform)


class TypeDefinitionSchema(BaseModel):
    """Schema for a struct or enum whose accessor is generated."""

    name: str = Field(..., min_length=1, description="Class name of the generated accessor holder.")
    kind: Literal["struct", "enum"] = Field(
        default="struct", description="'struct' generates fields(), 'enum' generates variants()."
    )
    members: List[MemberDefinitionSchema] = Field(
        default_factory=list,
        description="Members in order; a bare string is an identifier without options.",
    )

    model_config = ConfigDict(extra="forbid")

    @field_validator("name")
    @classmethod
    def check_valid_identifier(cls, v: str) -> str:
        """Validate the type name is a valid Python identifier."""
        if not is_valid_python_identifier(v):
            raise ValueError(
                f"'{v}' is not a valid Python identifier or is a reserved keyword."
            )
        if v in AccessorNames.GENERATED_CODE_BUILTINS:
            raise ValueError(
                f"'{v}' would shadow a builtin used by the generated accessors module."
            )
        return v

    @field_validator("members", mode="before")
    @classmethod
    def expand_bare_members(cls, v: Any) -> Any:
        """Turn bare strings into member definitions without options."""
        if not isinstance(v, list):
            return v
        return [{"ident": item} if isinstance(item, str) else item for item in v]

    @model_validator(mode="after")
    def check_unique_members(self) -> Self:
        """Ensure no identifier is declared twice on the same type."""
        seen = set()
        for member in self.members:
            if member.ident in seen:
                raise ValueError(f"Member '{member.ident}' is declared more than once on '{self.name}'.")
            seen.add(member.ident)
        return self

    def to_type_members(self) -> TypeMembers:
        return TypeMembers(
            name=self.name,
            kind=self.kind,
            members=[m.to_member_info() for m in self.members],
        )


class GeneratorConfigSchema(BaseModel):
    """Pydantic schema defining the expected structure and types of a definition file."""

    output_file: str = Field(
        DefaultConfig.OUTPUT_FILE,
        min_length=1,
        description="Path of the generated accessors module.",
    )
    module_docstring: Optional[str] = Field(
        default=DefaultConfig.MODULE_DOCSTRING,
        description="Docstring of the generated module (null for none).",
    )
    format_code: bool = Field(
        default=DefaultConfig.FORMAT_CODE,
        description="Whether to format the generated module with Black.",
    )
    types: List[TypeDefinitionSchema] = Field(
        ..., description="Types to generate accessors for."
    )

    @model_validator(mode="after")
    def check_unique_types(self) -> Self:
        """Ensure type names are unique, since each becomes a class in one module."""
        seen = set()
        for type_definition in self.types:
            if type_definition.name in seen:
                raise ValueError(f"Type '{type_definition.name}' is defined more than once.")
            seen.add(type_definition.name)
        if not self.types:
            logger.warning("The definition file declares no types.")
        return self

    model_config = ConfigDict(
        extra="ignore",  # Allow and ignore extra fields from input dict
    )

    def to_type_members(self) -> List[TypeMembers]:
        return [t.to_type_members() for t in self.types]


# --- Validation Function ---
def validate_and_parse_config(config_dict: Dict[str, Any]) -> GeneratorConfigSchema:
    """
    Validates a raw configuration dictionary against the GeneratorConfigSchema.
    Exits with error messages if validation fails.
    """
    try:
        validated_config = GeneratorConfigSchema.model_validate(config_dict)
        logger.debug(
            "Configuration dictionary parsed and validated successfully against schema."
        )
        return validated_config
    except ValidationError as e:
        logger.critical(
            "Configuration validation failed! Please check your definition file or arguments."
        )
        print("\n--- Configuration Errors ---", file=sys.stderr)
        for error in e.errors():
            loc_parts = [str(loc_item) for loc_item in error.get("loc", ())]
            loc_str = " -> ".join(loc_parts) if loc_parts else "Model Level"
            msg = error.get("msg", "Unknown validation error")

            print(f"  - Location: '{loc_str}'", file=sys.stderr)
            print(f"    Error:    {msg}", file=sys.stderr)

            if "transform" in loc_parts:
                print(
                    "    Hint:     Run 'fieldcase-generator render <ident> --transform <expr>' to try the expression.",
                    file=sys.stderr,
                )

        print("----------------------------", file=sys.stderr)
        sys.exit(1)


def load_config(config_path: Optional[str], cli_args: Namespace) -> GeneratorConfigSchema:
    """
    Loads the definition file from YAML, merges with CLI arguments,
    validates the result, and returns a validated Pydantic model instance.
    Raises ConfigurationError if the file is missing or is not valid YAML,
    and exits with error messages if validation fails.
    """
    raw_config: Dict[str, Any] = {}

    # 1. Load from YAML file if path is provided
    if config_path:
        config_file = Path(config_path)
        if not config_file.is_file():
            raise ConfigurationError("Definition file not found", config_file=config_path)
        try:
            with open(config_file, "r", encoding="utf-8") as f:
                yaml_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Error parsing YAML: {e}", config_file=config_path) from e

        if yaml_config and isinstance(yaml_config, dict):
            raw_config.update(yaml_config)
            logger.debug(f"Loaded configuration from {config_path}")
        elif yaml_config:
            logger.warning(
                f"Content in definition file {config_path} is not a dictionary. Ignoring file content."
            )

    # 2. Override with CLI arguments (only those explicitly provided)
    cli_dict = vars(cli_args)
    overridden_keys = set()
    for key, value in cli_dict.items():
        if value is not None and key != "types" and key in GeneratorConfigSchema.model_fields:
            raw_config[key] = value
            overridden_keys.add(key)
    if overridden_keys:
        logger.debug(f"Overridden config keys from CLI arguments: {overridden_keys}")

    # 3. Validate
    logger.info("Validating definition file...")
    validated_config: GeneratorConfigSchema = validate_and_parse_config(raw_config)

    # 4. Post-validation adjustments
    validated_config.output_file = str(Path(validated_config.output_file).resolve())

    logger.info("Definition file loaded and validated successfully.")
    return validated_config
