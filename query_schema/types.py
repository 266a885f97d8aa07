"""
Read-only descriptions of catalog entries.

Downstream generators mostly need a handful of facts about each field: its
name, the declared type as written, whether it is nullable or a list, the
named type at its core, and its directives. This module derives those facts
from the AST nodes held in the catalog without resolving references between
types.

Invariants:
    - Descriptions are frozen and derived purely from the AST
    - type_text is the declared type reference exactly as printed by graphql-core
    - Field order matches declaration order

Example:
    >>> info = describe_type(catalog.get("Video"))
    >>> [(f.name, f.type_text) for f in info.fields]
    [('title', 'String'), ('isFeatured', 'Boolean!')]
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from graphql import print_ast, value_from_ast_untyped
from graphql.language import (
    DirectiveNode,
    FieldDefinitionNode,
    ListTypeNode,
    NamedTypeNode,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    TypeNode,
)


@dataclass(frozen=True)
class FieldInfo:
    """Description of one field definition.

    Attributes:
        name: Field name
        type_text: Declared type reference, e.g. '[String!]!'
        base_type: Named type at the core of the reference, e.g. 'String'
        nullable: False when the outermost type is non-null
        is_list: Whether the reference contains a list wrapper
        directives: Directive name -> argument values
        description: Field description string, if any
    """

    name: str
    type_text: str
    base_type: str
    nullable: bool = True
    is_list: bool = False
    directives: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    description: str = ""

    def has_directive(self, name: str) -> bool:
        return name in self.directives

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation for serialization."""
        result: Dict[str, Any] = {
            "name": self.name,
            "type": self.type_text,
            "base_type": self.base_type,
            "nullable": self.nullable,
            "is_list": self.is_list,
        }
        if self.directives:
            result["directives"] = self.directives
        if self.description:
            result["description"] = self.description
        return result


@dataclass(frozen=True)
class ObjectTypeInfo:
    """Description of one object type and its fields."""

    name: str
    fields: Tuple[FieldInfo, ...] = ()
    description: str = ""

    def get_field(self, name: str) -> Optional[FieldInfo]:
        for f in self.fields:
            if f.name == name:
                return f
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation for serialization."""
        result: Dict[str, Any] = {
            "name": self.name,
            "fields": [f.to_dict() for f in self.fields],
        }
        if self.description:
            result["description"] = self.description
        return result


def type_text(type_node: TypeNode) -> str:
    """Render a type reference the way it is written in SDL."""
    return print_ast(type_node)


def unwrap_type(type_node: TypeNode) -> NamedTypeNode:
    """Strip list and non-null wrappers down to the named type."""
    while isinstance(type_node, (ListTypeNode, NonNullTypeNode)):
        type_node = type_node.type
    return type_node


def _is_list(type_node: TypeNode) -> bool:
    while isinstance(type_node, (ListTypeNode, NonNullTypeNode)):
        if isinstance(type_node, ListTypeNode):
            return True
        type_node = type_node.type
    return False


def directive_arguments(directive: DirectiveNode) -> Dict[str, Any]:
    """Return a directive's literal arguments as plain Python values."""
    return {
        arg.name.value: value_from_ast_untyped(arg.value)
        for arg in directive.arguments or ()
    }


def describe_field(node: FieldDefinitionNode) -> FieldInfo:
    """Describe a single field definition node."""
    return FieldInfo(
        name=node.name.value,
        type_text=type_text(node.type),
        base_type=unwrap_type(node.type).name.value,
        nullable=not isinstance(node.type, NonNullTypeNode),
        is_list=_is_list(node.type),
        directives={
            d.name.value: directive_arguments(d) for d in node.directives or ()
        },
        description=node.description.value if node.description else "",
    )


def describe_type(node: ObjectTypeDefinitionNode) -> ObjectTypeInfo:
    """Describe an object type definition node and all of its fields."""
    return ObjectTypeInfo(
        name=node.name.value,
        fields=tuple(describe_field(f) for f in node.fields or ()),
        description=node.description.value if node.description else "",
    )
