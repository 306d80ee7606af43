"""Public contracts for operation translation."""
from uniplex.manage.contracts.operation import (
    HttpMethod,
    Operation,
    OperationDescriptor,
    TranslatedRequest,
    Translator,
    schema,
)

__all__ = [
    "HttpMethod",
    "Operation",
    "OperationDescriptor",
    "TranslatedRequest",
    "Translator",
    "schema",
]
