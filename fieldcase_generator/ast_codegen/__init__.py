"""
Accessor AST Code Generator Module

This module generates Python classes exposing static fields()/variants()
accessors that return rendered member names.
"""

from .accessors import generate_accessors_ast, generate_accessors_code
from .code_generator import CodeGenerator, generate_accessors_module


__all__ = [
    'generate_accessors_ast',
    'generate_accessors_code',
    'CodeGenerator',
    'generate_accessors_module',
]
