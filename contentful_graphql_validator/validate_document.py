import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from graphql import (
    DocumentNode,
    FieldNode,
    OperationDefinitionNode,
    VariableDefinitionNode,
    Visitor,
    parse,
    visit,
)

from contentful_graphql_validator.errors import OperationCountError
from contentful_graphql_validator.utilities.graphql_ import AncestorChain
from contentful_graphql_validator.validation_context import ValidationContext

logger = logging.getLogger(__name__)


@dataclass
class ValidateDocumentInput:
    # the GraphQL document to validate, parsed or as source text
    document: Union[DocumentNode, str]
    # the variables sent with the query; `preview` tells whether preview
    # content will be read
    variables: dict[str, Any] = field(default_factory=dict)


@dataclass
class ValidateDocumentOptions:
    # forwarded to `graphql.parse` for source text documents
    no_location: bool = False


class DocumentValidator(Visitor):
    context: ValidationContext
    variables: dict[str, Any]
    operation_count: int

    def __init__(self, context: ValidationContext, variables: dict[str, Any]):
        super().__init__()
        self.context = context
        self.variables = variables
        self.operation_count = 0

    def enter_operation_definition(self, node: OperationDefinitionNode, *_) -> None:
        self.context.validate_operation(node)
        self.operation_count += 1

    def enter_variable_definition(self, node: VariableDefinitionNode, *_) -> None:
        self.context.validate_variable_definition(node)

    def enter_field(
        self, node: FieldNode, _key, _parent, _path, ancestors: AncestorChain
    ) -> None:
        self.context.validate_field(node, ancestors, self.variables)


def validate_document(
    input_: ValidateDocumentInput,
    options: Optional[ValidateDocumentOptions] = None,
) -> None:
    """Validate a GraphQL document for the Contentful GraphQL API.

    A document is valid if all of the following is true:

    - The document has exactly one `query` operation.
    - If the `query` defines a `$preview` variable, it's of type `Boolean` or `Boolean!`.
    - All fields have a consistent `preview` argument value: either `true` or `false | null`.
    - If preview content is queried, all `query` root fields have their `preview`
      argument set to `true`.

    The first violation found, in document order, is raised as a
    `DocumentValidationError`::

        document = '''
          query {
            myType {
              myField
            }
          }
        '''

        # valid
        validate_document(ValidateDocumentInput(document, {'preview': False}))

        # invalid: `myType` must have the `preview` argument set to `true`
        validate_document(ValidateDocumentInput(document, {'preview': True}))
    """
    if options is None:
        options = ValidateDocumentOptions()

    document = input_.document
    if isinstance(document, str):
        document = parse(document, no_location=options.no_location)

    logger.debug(
        'Validating document with %d definition(s), variables: %s',
        len(document.definitions),
        sorted(input_.variables),
    )

    validator = DocumentValidator(ValidationContext(document), input_.variables)
    visit(document, validator)

    if validator.operation_count != 1:
        logger.debug('Document has %d operation(s)', validator.operation_count)
        raise OperationCountError(document)
