"""
Schema Templates
================

Declarative description of the typed shape a raw JSON value decodes into.

A schema is a tree of three node kinds:

- ``Leaf``: take the value verbatim
- ``Record(model, fields)``: build ``model`` from a mapping, decoding the
  fields named in ``fields`` against their own nodes
- ``ListOf(element)``: decode every list element against ``element``

Templates are checked once, when they are declared. The decoder trusts them.
"""

import types
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Type, Union, get_args, get_origin

from pydantic import BaseModel


JSONValue = Union[None, bool, int, float, str, List["JSONValue"], Dict[str, "JSONValue"]]


@dataclass(frozen=True)
class Leaf:
    """Accept the value unchanged."""


@dataclass(frozen=True)
class Record:
    """Decode a mapping into an instance of ``model``."""

    model: Type[BaseModel]
    fields: Mapping[str, "SchemaNode"] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not (isinstance(self.model, type) and issubclass(self.model, BaseModel)):
            raise TypeError(f"Record model must be a pydantic model class, got {self.model!r}")

        unknown = set(self.fields) - set(self.model.model_fields)
        if unknown:
            raise ValueError(
                f"{self.model.__name__} has no fields named {sorted(unknown)}"
            )

        for name, node in self.fields.items():
            if not isinstance(node, SCHEMA_NODE_TYPES):
                raise TypeError(
                    f"{self.model.__name__}.{name} must be a schema node, got {node!r}"
                )

        object.__setattr__(self, "fields", types.MappingProxyType(dict(self.fields)))

    def __hash__(self) -> int:
        return hash((self.model, frozenset(self.fields.items())))


@dataclass(frozen=True)
class ListOf:
    """Decode each element of a list against a single element schema."""

    element: "SchemaNode"

    def __post_init__(self) -> None:
        if not isinstance(self.element, SCHEMA_NODE_TYPES):
            raise TypeError(f"ListOf element must be a schema node, got {self.element!r}")


SchemaNode = Union[Leaf, Record, ListOf]
SCHEMA_NODE_TYPES = (Leaf, Record, ListOf)

LEAF = Leaf()


def schema_for(model: Type[BaseModel]) -> Record:
    """
    Derive a schema template from a model's field annotations.

    ``Model`` and ``Optional[Model]`` become ``Record``, ``List[Model]`` becomes
    ``ListOf(Record)``. Everything else is a leaf and is left out of ``fields``.

    Args:
        model: Pydantic model class to describe

    Returns:
        Record template for ``model``
    """
    nested: Dict[str, SchemaNode] = {}
    for name, info in model.model_fields.items():
        node = _schema_for_annotation(info.annotation)
        if not isinstance(node, Leaf):
            nested[name] = node
    return Record(model, nested)


def _schema_for_annotation(annotation: Any) -> SchemaNode:
    origin = get_origin(annotation)

    if origin is Union or origin is types.UnionType:
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return _schema_for_annotation(args[0])
        return LEAF

    if origin is list:
        args = get_args(annotation)
        if args:
            element = _schema_for_annotation(args[0])
            if not isinstance(element, Leaf):
                return ListOf(element)
        return LEAF

    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return schema_for(annotation)

    return LEAF
