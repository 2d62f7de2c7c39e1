import logging
from typing import Any

from graphql import (
    ArgumentNode,
    DocumentNode,
    FieldNode,
    FragmentDefinitionNode,
    ListTypeNode,
    NamedTypeNode,
    OperationDefinitionNode,
    OperationType,
    Undefined,
    VariableDefinitionNode,
)

from contentful_graphql_validator.errors import (
    ArgumentTypeError,
    OperationTypeError,
    PreviewMismatchError,
    RootPreviewMissingError,
    VariableTypeError,
)
from contentful_graphql_validator.fragment_usages import (
    FragmentUsageIndex,
    RootReachabilityResolver,
)
from contentful_graphql_validator.root_classifier import is_in_root
from contentful_graphql_validator.utilities.graphql_ import AncestorChain, unwrap_non_null_type
from contentful_graphql_validator.utilities.predicates import is_boolean_or_null
from contentful_graphql_validator.utilities.values import (
    Variables,
    format_variable_value,
    resolve_value_node,
)

logger = logging.getLogger(__name__)

PREVIEW = 'preview'

BOOLEAN_TYPE_NAME = 'Boolean'


class ValidationContext:
    """State shared by the checks run against a single document.

    The fragment caches are only valid for `document`; build a new context
    for every document being validated.
    """

    document: DocumentNode
    fragment_usages: FragmentUsageIndex
    root_reachability: RootReachabilityResolver

    def __init__(self, document: DocumentNode):
        self.document = document
        self.fragment_usages = FragmentUsageIndex(document)
        self.root_reachability = RootReachabilityResolver(document, self.fragment_usages)

    def resolve_argument_value(self, argument: ArgumentNode, variables: Variables) -> Any:
        return resolve_value_node(argument.value, variables)

    def is_fragment_used_in_root(self, fragment: FragmentDefinitionNode) -> bool:
        return self.root_reachability.is_used_in_root(fragment)

    def validate_field(
        self, node: FieldNode, ancestors: AncestorChain, variables: Variables
    ) -> None:
        preview_var = variables.get(PREVIEW, Undefined)

        # every `preview` argument must agree with the `preview` variable,
        # `null` standing for `false`
        preview_arg: Any = None
        for argument in node.arguments or ():
            if argument.name.value != PREVIEW:
                continue

            preview_arg = self.resolve_argument_value(argument, variables)

            if not is_boolean_or_null(preview_arg):
                logger.debug('Field %s has preview argument %r', node.name.value, preview_arg)
                raise ArgumentTypeError(node)

            if bool(preview_var) != bool(preview_arg):
                raise PreviewMismatchError(node, format_variable_value(preview_var))

        # when reading preview content every root field has to ask for it
        if preview_var and not preview_arg:
            result = is_in_root(node, ancestors)
            if result.is_root and (
                isinstance(result.container, OperationDefinitionNode)
                or self.is_fragment_used_in_root(result.container)  # type: ignore[arg-type]
            ):
                raise RootPreviewMissingError(node)

    # noinspection PyMethodMayBeStatic
    def validate_operation(self, node: OperationDefinitionNode) -> None:
        if node.operation != OperationType.QUERY:
            logger.debug('Rejecting %s operation', node.operation.value)
            raise OperationTypeError(node)

    # noinspection PyMethodMayBeStatic
    def validate_variable_definition(self, node: VariableDefinitionNode) -> None:
        if node.variable.name.value != PREVIEW:
            return

        type_ = unwrap_non_null_type(node.type)
        if (
            isinstance(type_, ListTypeNode)
            or not isinstance(type_, NamedTypeNode)
            or type_.name.value != BOOLEAN_TYPE_NAME
        ):
            raise VariableTypeError(node)
