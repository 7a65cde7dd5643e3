"""Exceptions raised by the DataObjects store."""
from sqlalchemy.exc import SQLAlchemyError


class DataObjectsError(Exception):
    """Base class for store errors."""


class ConfigurationError(DataObjectsError, ImportError):
    """
    No adapter could be loaded for a configuration.

    Raised when the requested dialect has no registered adapter, when the
    database driver cannot be imported or when the connection cannot be
    established. The original error is chained as ``__cause__``.
    """


class SchemaError(DataObjectsError):
    """The statements table could not be created or found."""


class StoreClosedError(DataObjectsError):
    """An operation was attempted on a closed store."""


# SQL execution failures are not wrapped
BackendExecutionError = SQLAlchemyError
