from collections.abc import Mapping
from typing import Any, cast

from graphql import (
    FloatValueNode,
    IntValueNode,
    ListValueNode,
    NullValueNode,
    ObjectValueNode,
    Undefined,
    ValueNode,
    VariableNode,
)

from contentful_graphql_validator.utilities.predicates import is_not_null_or_undefined

Variables = Mapping[str, Any]


def resolve_value_node(value_node: ValueNode, variables: Variables) -> Any:
    if value_node.kind == NullValueNode.kind:
        return None

    if value_node.kind == IntValueNode.kind:
        return int(cast(IntValueNode, value_node).value)

    if value_node.kind == FloatValueNode.kind:
        return float(cast(FloatValueNode, value_node).value)

    if value_node.kind == ObjectValueNode.kind:
        obj: dict[str, Any] = {}
        for field in cast(ObjectValueNode, value_node).fields:
            obj[field.name.value] = resolve_value_node(field.value, variables)

        return obj

    if value_node.kind == ListValueNode.kind:
        return [
            resolve_value_node(value, variables)
            for value in cast(ListValueNode, value_node).values
        ]

    if value_node.kind == VariableNode.kind:
        value = variables.get(cast(VariableNode, value_node).name.value, Undefined)
        return value if is_not_null_or_undefined(value) else None

    # strings, booleans and enums keep their raw value
    return value_node.value  # type: ignore[attr-defined]


# JSON spelling of scalars, `undefined` for missing variables
def format_variable_value(value: Any) -> str:
    if value is Undefined:
        return 'undefined'
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'true' if value else 'false'

    return str(value)
