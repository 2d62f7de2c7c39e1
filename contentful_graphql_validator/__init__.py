from contentful_graphql_validator.errors import (
    ArgumentTypeError,
    DocumentValidationError,
    FragmentCycleError,
    OperationCountError,
    OperationTypeError,
    PreviewMismatchError,
    RootPreviewMissingError,
    VariableTypeError,
)
from contentful_graphql_validator.validate_document import (
    DocumentValidator,
    ValidateDocumentInput,
    ValidateDocumentOptions,
    validate_document,
)
from contentful_graphql_validator.validation_context import ValidationContext

__all__ = [
    'ArgumentTypeError',
    'DocumentValidationError',
    'DocumentValidator',
    'FragmentCycleError',
    'OperationCountError',
    'OperationTypeError',
    'PreviewMismatchError',
    'RootPreviewMissingError',
    'ValidateDocumentInput',
    'ValidateDocumentOptions',
    'ValidationContext',
    'VariableTypeError',
    'validate_document',
]
