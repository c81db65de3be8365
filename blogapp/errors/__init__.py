from blogapp.errors.auth import (
    ForbiddenError,
    InvalidCredentialsError,
    UserAuthenticationError,
    auth_exception_handler,
)
from blogapp.errors.base import BaseAppError, app_exception_handler, create_exception_handler
from blogapp.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DuplicateEntryError,
    RecordNotFoundError,
    database_exception_handler,
)
from blogapp.errors.password_hasher import (
    PasswordHashingError,
    PasswordRehashError,
    password_hashing_exception_handler,
)
from blogapp.errors.validation import (
    ValidationError,
    app_validation_exception_handler,
    validation_exception_handler,
)

__all__ = [
    "BaseAppError",
    "app_exception_handler",
    "create_exception_handler",
    "PasswordHashingError",
    "PasswordRehashError",
    "password_hashing_exception_handler",
    "DatabaseConnectionError",
    "DatabaseError",
    "DuplicateEntryError",
    "RecordNotFoundError",
    "database_exception_handler",
    "ForbiddenError",
    "InvalidCredentialsError",
    "UserAuthenticationError",
    "auth_exception_handler",
    "ValidationError",
    "app_validation_exception_handler",
    "validation_exception_handler",
]
