import ast
import logging
from typing import List, Optional

from fieldcase_generator.ast_codegen.base import (
    add_location,
    create_class_def,
    create_docstring,
    create_static_method,
    create_tuple_of_strings,
)
from fieldcase_generator.constants import AccessorNames, DefaultConfig
from fieldcase_generator.exceptions import CodeGenerationError
from fieldcase_generator.introspection import TypeMembers


logger = logging.getLogger(__name__)

# Return annotation of every accessor
ACCESSOR_RETURN_ANNOTATION = "tuple[str, ...]"


def create_accessor_method(type_members: TypeMembers) -> ast.FunctionDef:
    """Creates the static fields()/variants() method returning the rendered names."""
    names = type_members.render()
    logger.debug(
        f"Rendered {type_members.kind} {type_members.name}.{type_members.accessor}(): {names}"
    )
    returns = ast.parse(ACCESSOR_RETURN_ANNOTATION, mode="eval").body
    return create_static_method(
        name=type_members.accessor,
        body=[add_location(ast.Return(value=create_tuple_of_strings(list(names))))],
        returns=returns,
    )


def create_accessor_class(type_members: TypeMembers) -> ast.ClassDef:
    """Creates the AST ClassDef node holding the accessor of one type."""
    if type_members.name in AccessorNames.GENERATED_CODE_BUILTINS:
        raise CodeGenerationError(
            f"Type name '{type_members.name}' would shadow a builtin used by the generated module",
            component="module",
            type_name=type_members.name,
            suggestions=["Rename the type, e.g. capitalize it"],
        )

    noun = "field" if type_members.kind == "struct" else "variant"
    body: List[ast.stmt] = [
        create_docstring(f"Rendered {noun} names of {type_members.name}."),
        create_accessor_method(type_members),
    ]
    return create_class_def(name=type_members.name, body=body)


def generate_accessors_ast(
    types: List[TypeMembers], module_docstring: Optional[str] = DefaultConfig.MODULE_DOCSTRING
) -> ast.Module:
    """Generates the complete AST Module for the accessors file."""
    module_body: List[ast.stmt] = []
    if module_docstring:
        module_body.append(create_docstring(module_docstring))

    for type_members in types:
        module_body.append(create_accessor_class(type_members))

    if not types:
        logger.warning("No types to generate accessors for, the module will be empty.")

    return ast.fix_missing_locations(add_location(ast.Module(body=module_body, type_ignores=[])))


def generate_accessors_code(
    types: List[TypeMembers], module_docstring: Optional[str] = DefaultConfig.MODULE_DOCSTRING
) -> str:
    """Generates the Python code string for the accessors module."""
    module_ast = generate_accessors_ast(types, module_docstring)
    return ast.unparse(module_ast) + "\n"
