"""
Member collection from Python type definitions.

Struct-like types (dataclasses, pydantic models and plain annotated classes)
contribute their fields; ``enum.Enum`` subclasses contribute their variants.
Each member may carry a ``name`` override and a ``transform`` expression,
given either per member or through a ``__fieldcase__`` class attribute::

    @dataclass
    class Token:
        access_token: str = field(metadata={"fieldcase": {"transform": "c Cc"}})
        refresh_token: str

    class Color(Enum):
        __fieldcase__ = {"DarkRed": {"transform": "c|-"}}
        DarkRed = 1

    fields(Token)     # ('accessToken', 'refresh_token')
    variants(Color)   # ('dark-red',)
"""

import dataclasses
import inspect
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional, Tuple, get_origin

from pydantic import BaseModel

from .constants import AccessorNames, MemberOptions
from .domain.naming import render_name
from .exceptions import (
    CodeGenerationError,
    MalformedExpressionError,
    MemberOptionsError,
    TypeIntrospectionError,
)


logger = logging.getLogger(__name__)


@dataclass
class MemberInfo:
    """A field or variant identifier with its naming options."""

    ident: str
    name: Optional[str] = None
    transform: Optional[str] = None

    def render(self) -> str:
        return render_name(self.ident, self.name, self.transform)


def validate_member_options(options: Any, type_name: str, member: str) -> Dict[str, str]:
    """
    Check the naming options given for one member.

    Returns:
        The options as a plain dict

    Raises:
        MemberOptionsError: On a non-mapping, an unknown key or a non-string value
    """
    if options is None:
        return {}
    if not isinstance(options, Mapping):
        raise MemberOptionsError(
            f"Options for '{member}' must be a mapping, got {type(options).__name__}",
            type_name=type_name,
            member=member,
        )

    for key, value in options.items():
        if key not in MemberOptions.ALL:
            raise MemberOptionsError(
                f"Unrecognized option '{key}' on '{member}'",
                type_name=type_name,
                member=member,
            )
        if not isinstance(value, str):
            raise MemberOptionsError(
                f"Option '{key}' on '{member}' must be a string, got {type(value).__name__}",
                type_name=type_name,
                member=member,
            )
    return dict(options)


def _class_options(cls: type) -> Mapping:
    options = getattr(cls, MemberOptions.CLASS_ATTRIBUTE, None) or {}
    if not isinstance(options, Mapping):
        raise MemberOptionsError(
            f"{MemberOptions.CLASS_ATTRIBUTE} must map member names to options",
            type_name=cls.__name__,
        )
    return options


def _build_members(
    cls: type, idents: List[str], member_options: Dict[str, Any]
) -> List[MemberInfo]:
    class_options = _class_options(cls)
    unknown = [key for key in class_options if key not in idents]
    if unknown:
        raise MemberOptionsError(
            f"{MemberOptions.CLASS_ATTRIBUTE} names unknown members: {', '.join(map(str, unknown))}",
            type_name=cls.__name__,
        )

    members = []
    for ident in idents:
        options = validate_member_options(class_options.get(ident), cls.__name__, ident)
        options.update(validate_member_options(member_options.get(ident), cls.__name__, ident))
        members.append(
            MemberInfo(
                ident=ident,
                name=options.get(MemberOptions.NAME),
                transform=options.get(MemberOptions.TRANSFORM),
            )
        )
    return members


def _is_class_var(annotation: Any) -> bool:
    if annotation is ClassVar or get_origin(annotation) is ClassVar:
        return True
    return isinstance(annotation, str) and annotation.startswith(("ClassVar", "typing.ClassVar"))


def collect_fields(cls: type) -> List[MemberInfo]:
    """
    Collect the fields of a struct-like class in declaration order.

    Raises:
        TypeIntrospectionError: If ``cls`` is not a struct-like class
        MemberOptionsError: If naming options are invalid
    """
    if not isinstance(cls, type) or issubclass(cls, Enum):
        raise TypeIntrospectionError(
            f"Cannot collect fields from {cls!r}",
            type_name=getattr(cls, "__name__", repr(cls)),
            expected="a dataclass, a pydantic model or an annotated class",
        )

    member_options: Dict[str, Any] = {}
    if dataclasses.is_dataclass(cls):
        idents = []
        for f in dataclasses.fields(cls):
            idents.append(f.name)
            member_options[f.name] = f.metadata.get(MemberOptions.METADATA_KEY)
    elif issubclass(cls, BaseModel):
        idents = []
        for field_name, field_info in cls.model_fields.items():
            idents.append(field_name)
            extra = field_info.json_schema_extra
            if isinstance(extra, dict):
                member_options[field_name] = extra.get(MemberOptions.METADATA_KEY)
    else:
        annotations = inspect.get_annotations(cls)
        idents = [
            name
            for name, annotation in annotations.items()
            if name != MemberOptions.CLASS_ATTRIBUTE and not _is_class_var(annotation)
        ]
        if not idents:
            raise TypeIntrospectionError(
                f"{cls.__name__} declares no fields",
                type_name=cls.__name__,
                expected="a dataclass, a pydantic model or an annotated class",
            )

    logger.debug(f"Found {len(idents)} fields on {cls.__name__}")
    return _build_members(cls, idents, member_options)


def collect_variants(enum_cls: type) -> List[MemberInfo]:
    """
    Collect the variants of an enum in definition order. Aliases are skipped.

    Raises:
        TypeIntrospectionError: If ``enum_cls`` is not an Enum subclass
        MemberOptionsError: If naming options are invalid
    """
    if not isinstance(enum_cls, type) or not issubclass(enum_cls, Enum):
        raise TypeIntrospectionError(
            f"Cannot collect variants from {enum_cls!r}",
            type_name=getattr(enum_cls, "__name__", repr(enum_cls)),
            expected="an enum.Enum subclass",
        )

    idents = [member.name for member in enum_cls]
    logger.debug(f"Found {len(idents)} variants on {enum_cls.__name__}")
    return _build_members(enum_cls, idents, {})


def render_members(
    type_name: str, members: List[MemberInfo], component: str
) -> Tuple[str, ...]:
    """
    Render every member of a type.

    Raises:
        CodeGenerationError: If a member's transform expression is malformed,
            naming the type, the member and the offending token
    """
    names = []
    for member in members:
        try:
            names.append(member.render())
        except MalformedExpressionError as e:
            raise CodeGenerationError(
                f"Invalid transform on {type_name}.{member.ident}: {e.reason} ({e.token!r})",
                component=component,
                type_name=type_name,
                member=member.ident,
                context={"expression": repr(e.expression)},
            ) from e
    return tuple(names)


def fields(cls: type) -> Tuple[str, ...]:
    """Return the rendered field names of a struct-like class."""
    members = collect_fields(cls)
    return render_members(cls.__name__, members, AccessorNames.FIELDS)


def variants(enum_cls: type) -> Tuple[str, ...]:
    """Return the rendered variant names of an enum."""
    members = collect_variants(enum_cls)
    return render_members(enum_cls.__name__, members, AccessorNames.VARIANTS)


def fieldcase(cls: type) -> type:
    """
    Class decorator adding a static ``fields()`` (or ``variants()`` for enums)
    accessor that returns the rendered member names.

    Names are rendered once, when the class is decorated, so a malformed
    expression fails at definition time.
    """
    if isinstance(cls, type) and issubclass(cls, Enum):
        accessor, names = AccessorNames.VARIANTS, variants(cls)
    else:
        accessor, names = AccessorNames.FIELDS, fields(cls)

    if accessor in cls.__dict__:
        raise TypeIntrospectionError(
            f"{cls.__name__} already defines '{accessor}'",
            type_name=cls.__name__,
        )

    def accessor_method() -> Tuple[str, ...]:
        return names

    accessor_method.__name__ = accessor
    accessor_method.__qualname__ = f"{cls.__name__}.{accessor}"
    setattr(cls, accessor, staticmethod(accessor_method))
    return cls


@dataclass
class TypeMembers:
    """A type name, its kind ('struct' or 'enum') and its members."""

    name: str
    kind: str
    members: List[MemberInfo] = dataclasses.field(default_factory=list)

    @property
    def accessor(self) -> str:
        return AccessorNames.BY_KIND[self.kind]

    def render(self) -> Tuple[str, ...]:
        return render_members(self.name, self.members, self.accessor)


def describe_type(cls: type) -> TypeMembers:
    """Collect the members of a Python type for accessor generation."""
    if isinstance(cls, type) and issubclass(cls, Enum):
        members = collect_variants(cls)
        return TypeMembers(cls.__name__, "enum", members)
    members = collect_fields(cls)
    return TypeMembers(cls.__name__, "struct", members)
