"""
Decode Engine
=============

Recursive, schema-driven mapping of a parsed JSON value onto typed records.

Decoding is lenient. A value whose shape disagrees with the schema never
raises: a record schema over a non-mapping yields a record of defaults, a
list schema over a non-list yields ``[]``. Keys the model does not declare
are dropped. Leaf values are passed through without coercion.
"""

from collections.abc import Mapping
from functools import partial
from typing import Any, Callable, Dict, List

from .schema import JSONValue, Leaf, ListOf, Record, SchemaNode


def decode(value: JSONValue, schema: SchemaNode) -> Any:
    """
    Decode ``value`` against ``schema``.

    Args:
        value: Parsed JSON value
        schema: Schema template describing the target shape

    Returns:
        Model instance, list, or the untouched value for leaves
    """
    if isinstance(schema, Record):
        return _decode_record(value, schema)
    if isinstance(schema, ListOf):
        return _decode_list(value, schema)
    return value


def decoder_for(schema: SchemaNode) -> Callable[[JSONValue], Any]:
    """Bind ``schema`` into a one-argument decode function."""
    return partial(_decode_with, schema)


def _decode_with(schema: SchemaNode, value: JSONValue) -> Any:
    return decode(value, schema)


def _decode_record(value: JSONValue, schema: Record) -> Any:
    source = value if isinstance(value, Mapping) else {}
    values: Dict[str, Any] = {}

    for name, info in schema.model.model_fields.items():
        key = info.alias or name
        nested = schema.fields.get(name)

        if key in source:
            raw = source[key]
        elif nested is None or isinstance(nested, Leaf):
            # model default
            continue
        else:
            raw = None

        values[key] = raw if nested is None else decode(raw, nested)

    return schema.model.model_construct(**values)


def _decode_list(value: JSONValue, schema: ListOf) -> List[Any]:
    if not isinstance(value, (list, tuple)):
        return []
    return [decode(element, schema.element) for element in value]
