from collections.abc import Sequence
from typing import Union

from graphql import (
    FieldNode,
    FragmentDefinitionNode,
    InlineFragmentNode,
    Node,
    NonNullTypeNode,
    OperationDefinitionNode,
    SelectionSetNode,
    TypeNode,
)

# What `graphql.visit` passes as `ancestors`: nodes and the node lists
# holding them, from the document down to (excluding) the visited node.
AncestorChain = Sequence[Union[Node, Sequence[Node]]]

Container = Union[OperationDefinitionNode, FragmentDefinitionNode]

# Layers that don't change what a selection is nested under.
TRANSPARENT_NODES = (SelectionSetNode, InlineFragmentNode)

BOUNDARY_NODES = (OperationDefinitionNode, FragmentDefinitionNode)


def is_transparent(ancestor: Union[Node, Sequence[Node]]) -> bool:
    return not isinstance(ancestor, Node) or isinstance(ancestor, TRANSPARENT_NODES)


def is_boundary(ancestor: Union[Node, Sequence[Node]]) -> bool:
    return isinstance(ancestor, BOUNDARY_NODES)


def is_blocking(ancestor: Union[Node, Sequence[Node]]) -> bool:
    return isinstance(ancestor, FieldNode)


# Boolean! => Boolean, only one level deep.
def unwrap_non_null_type(type_node: TypeNode) -> TypeNode:
    if isinstance(type_node, NonNullTypeNode):
        return type_node.type

    return type_node


def get_name(node: Union[FieldNode, FragmentDefinitionNode]) -> str:
    return node.name.value
