import logging
from dataclasses import dataclass
from typing import Optional, cast

from graphql import (
    DocumentNode,
    FragmentDefinitionNode,
    FragmentSpreadNode,
    OperationDefinitionNode,
    Visitor,
    visit,
)

from contentful_graphql_validator.errors import FragmentCycleError
from contentful_graphql_validator.root_classifier import is_in_root
from contentful_graphql_validator.utilities.graphql_ import AncestorChain, get_name

logger = logging.getLogger(__name__)

FragmentName = str


@dataclass(frozen=True)
class FragmentUsage:
    node: FragmentSpreadNode
    ancestors: tuple


class FragmentUsageIndex:
    """Where each fragment of a document is spread.

    ```graphql
    query {
      ...MyFragment # usage
    }

    fragment MyFragment on Type {
      field
    }
    ```
    """

    document: DocumentNode

    _usages: dict[FragmentName, list[FragmentUsage]]

    def __init__(self, document: DocumentNode):
        self.document = document
        self._usages = {}

    def usages_of(self, fragment: FragmentDefinitionNode) -> list[FragmentUsage]:
        fragment_name = get_name(fragment)

        usages = self._usages.get(fragment_name)
        if usages is not None:
            return usages

        usages = []

        # noinspection PyMethodMayBeStatic
        class FragmentSpreadVisitor(Visitor):
            def enter_fragment_spread(
                self, node: FragmentSpreadNode, _key, _parent, _path, ancestors: AncestorChain
            ) -> None:
                if node.name.value == fragment_name:
                    # `visit` keeps reusing the same ancestors list
                    usages.append(FragmentUsage(node=node, ancestors=tuple(ancestors)))

        visit(self.document, FragmentSpreadVisitor())

        logger.debug('Fragment %s is spread %d time(s)', fragment_name, len(usages))
        self._usages[fragment_name] = usages

        return usages


class RootReachabilityResolver:
    """Tells whether a fragment ends up at the root of the operation.

    ```graphql
    query {
      ...MyFragment # used in operation root
      field {
        ...MyFragment # used in nested field
      }
    }

    fragment MyFragment on Type {
    }
    ```

    A fragment spread at the root of another fragment is used in root when
    that fragment is, recursively.
    """

    document: DocumentNode
    fragment_usages: FragmentUsageIndex

    _used_in_root: dict[FragmentName, bool]

    def __init__(
        self, document: DocumentNode, fragment_usages: Optional[FragmentUsageIndex] = None
    ):
        self.document = document
        self.fragment_usages = (
            fragment_usages if fragment_usages is not None else FragmentUsageIndex(document)
        )
        self._used_in_root = {}

    def is_used_in_root(self, fragment: FragmentDefinitionNode) -> bool:
        return self._resolve(fragment, [])

    def _resolve(
        self, fragment: FragmentDefinitionNode, path: list[FragmentDefinitionNode]
    ) -> bool:
        fragment_name = get_name(fragment)

        used_in_root = self._used_in_root.get(fragment_name)
        if used_in_root is not None:
            return used_in_root

        if any(get_name(visited) == fragment_name for visited in path):
            raise FragmentCycleError([*path, fragment])

        path.append(fragment)
        try:
            used_in_root = self._is_any_usage_in_root(fragment, path)
        finally:
            path.pop()

        logger.debug('Fragment %s used in root: %s', fragment_name, used_in_root)
        self._used_in_root[fragment_name] = used_in_root

        return used_in_root

    def _is_any_usage_in_root(
        self, fragment: FragmentDefinitionNode, path: list[FragmentDefinitionNode]
    ) -> bool:
        for usage in self.fragment_usages.usages_of(fragment):
            result = is_in_root(usage.node, usage.ancestors)
            if not result.is_root:
                continue

            if isinstance(result.container, OperationDefinitionNode):
                return True

            if self._resolve(cast(FragmentDefinitionNode, result.container), path):
                return True

        return False
