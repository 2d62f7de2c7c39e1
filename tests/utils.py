from typing import Any

from graphql import DocumentNode, FragmentDefinitionNode, Node, Visitor, visit


def collect_nodes(document: DocumentNode, *node_types: type) -> list[tuple[Any, tuple]]:
    """Visit the document and return matching nodes with a copy of their ancestors."""
    collected = []

    class CollectingVisitor(Visitor):
        def enter(self, node: Node, _key, _parent, _path, ancestors):
            if isinstance(node, node_types):
                collected.append((node, tuple(ancestors)))

    visit(document, CollectingVisitor())
    return collected


def get_fragment(document: DocumentNode, name: str) -> FragmentDefinitionNode:
    return next(
        definition
        for definition in document.definitions
        if isinstance(definition, FragmentDefinitionNode) and definition.name.value == name
    )


def get_fragments(document: DocumentNode) -> list[FragmentDefinitionNode]:
    return [
        definition
        for definition in document.definitions
        if isinstance(definition, FragmentDefinitionNode)
    ]
