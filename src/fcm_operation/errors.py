"""Operation error hierarchy.

Every error carries a ``code`` so failures can be reported as structured
results.  Errors raised by ``firebase_admin`` carry their own ``code``
(e.g. ``INVALID_ARGUMENT``, ``NOT_FOUND``) and are reported as-is.
"""

UNKNOWN_ERROR_CODE = "UNKNOWN_ERROR"


class OperationError(Exception):
    """Base class for errors raised by the messaging operation."""

    code = "OPERATION_ERROR"


class InvalidOptionsError(OperationError):
    """Options are missing a required value or have the wrong shape."""

    code = "INVALID_OPTIONS"


class InvalidRecipientTypeError(InvalidOptionsError):
    code = "INVALID_RECIPIENT_TYPE"


class InitializationError(OperationError):
    """Credentials could not be resolved or the Firebase app not created."""

    code = "INITIALIZATION_FAILED"
