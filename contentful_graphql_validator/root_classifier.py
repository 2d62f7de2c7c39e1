from dataclasses import dataclass
from typing import Optional, Union

from graphql import DocumentNode, FieldNode, FragmentSpreadNode

from contentful_graphql_validator.utilities.graphql_ import (
    AncestorChain,
    Container,
    is_blocking,
    is_boundary,
    is_transparent,
)


@dataclass(frozen=True)
class RootResult:
    is_root: bool
    # the operation or fragment definition the node sits at the root of
    container: Optional[Container] = None


NOT_IN_ROOT = RootResult(is_root=False)


def is_in_root(
    node: Union[FieldNode, FragmentSpreadNode], ancestors: AncestorChain
) -> RootResult:
    """Determine whether a field or fragment spread sits at the root of a document.

    A selection is at the root of its operation or fragment definition when
    no field lies between the two; inline fragments don't count::

        query {
          field1            # root
          ... on Type {
            field2          # root
          }
          field3 {
            field4          # nested in field3
            ...Fragment     # nested in field3
          }
        }

    The ancestors are walked upward, never indexed, so the result doesn't
    depend on how many list layers the parser puts between nodes.
    """
    for index in range(len(ancestors) - 1, -1, -1):
        ancestor = ancestors[index]

        if is_blocking(ancestor):
            return NOT_IN_ROOT

        if is_boundary(ancestor):
            # a definition only counts when it belongs to a document
            if index > 0 and isinstance(ancestors[0], DocumentNode):
                return RootResult(is_root=True, container=ancestor)  # type: ignore[arg-type]
            return NOT_IN_ROOT

        if not is_transparent(ancestor):
            return NOT_IN_ROOT

    return NOT_IN_ROOT
