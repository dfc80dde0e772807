from .base import ApplicationError, ErrorCode, ErrorLevel
from .errors import (
    AuthenticationError,
    DocumentValidationError,
    EmbeddingError,
    InsertError,
    QueryError,
    SearchError,
)
