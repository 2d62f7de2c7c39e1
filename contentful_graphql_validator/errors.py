from typing import Optional

from graphql import (
    DocumentNode,
    FieldNode,
    FragmentDefinitionNode,
    GraphQLError,
    Node,
    OperationDefinitionNode,
    VariableDefinitionNode,
)


class DocumentValidationError(GraphQLError):
    """Base class of every violation reported by `validate_document`."""


class OperationCountError(DocumentValidationError):
    def __init__(self, document: Optional[DocumentNode] = None):
        super().__init__('The document must have exactly 1 operation.', document)


class OperationTypeError(DocumentValidationError):
    def __init__(self, node: OperationDefinitionNode):
        super().__init__('The operation must be a query', node)


class VariableTypeError(DocumentValidationError):
    def __init__(self, node: VariableDefinitionNode):
        super().__init__('The preview variable must be of type Boolean', node)


class ArgumentTypeError(DocumentValidationError):
    field_name: str

    def __init__(self, node: FieldNode):
        self.field_name = node.name.value
        super().__init__(
            f'Field with non-boolean preview argument value: {self.field_name}', node
        )


class PreviewMismatchError(DocumentValidationError):
    field_name: str
    variable_value: str

    def __init__(self, node: FieldNode, variable_value: str):
        self.field_name = node.name.value
        self.variable_value = variable_value
        super().__init__(
            f"Preview mismatch for field '{self.field_name}'. "
            f"The variable is '{variable_value}', but the argument has another value",
            node,
        )


class RootPreviewMissingError(DocumentValidationError):
    field_name: str

    def __init__(self, node: FieldNode):
        self.field_name = node.name.value
        super().__init__(
            f'Root field does not have a preview argument set to true: {self.field_name}', node
        )


class FragmentCycleError(DocumentValidationError):
    # visiting order, ending with the fragment seen twice
    fragment_names: list[str]

    def __init__(self, fragments: list[FragmentDefinitionNode]):
        self.fragment_names = [fragment.name.value for fragment in fragments]
        nodes: list[Node] = list(fragments[:-1])
        super().__init__(
            f'A fragment cycle has been detected: {"->".join(self.fragment_names)}', nodes
        )
