import ast
from typing import List, Optional


def add_location(node):
    """Add location info to AST nodes"""
    node.lineno = 1
    node.col_offset = 0
    return node


def create_docstring(content: str) -> ast.Expr:
    """Creates an AST node for a docstring."""
    return add_location(ast.Expr(value=create_string_constant(content)))


def create_string_constant(value: str) -> ast.Constant:
    """Creates an AST Constant node for a string."""
    return add_location(ast.Constant(value=value))


def create_tuple_of_strings(items: List[str]) -> ast.Tuple:
    """Creates an AST Tuple node containing string constants."""
    return add_location(ast.Tuple(
        elts=[create_string_constant(item) for item in items],
        ctx=ast.Load()
    ))


def create_name(identifier: str) -> ast.Name:
    """Creates an AST Name node for loading a name."""
    return add_location(ast.Name(id=identifier, ctx=ast.Load()))


def create_static_method(
    name: str, body: List[ast.stmt], returns: Optional[ast.expr] = None
) -> ast.FunctionDef:
    """Creates an AST node for an argument-less @staticmethod."""
    return add_location(ast.FunctionDef(
        name=name,
        args=add_location(ast.arguments(
            posonlyargs=[],
            args=[],
            kwonlyargs=[],
            kw_defaults=[],
            defaults=[],
        )),
        body=body,
        decorator_list=[create_name("staticmethod")],
        returns=returns,
        type_params=[],
    ))


def create_class_def(name: str, body: List[ast.stmt], bases: Optional[List[str]] = None) -> ast.ClassDef:
    """Creates an AST node for a class definition."""
    return add_location(ast.ClassDef(
        name=name,
        bases=[create_name(base) for base in bases or []],
        keywords=[],
        body=body,
        decorator_list=[],
        type_params=[],
    ))
