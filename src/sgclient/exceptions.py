"""Errors raised by sgclient.

Every error derives from :class:`SgclientError` and carries the process
exit code the CLI should use for it (see :mod:`sgclient.exit_codes`)::

    SgclientError          1
        InvalidFormatError 2   malformed spec text or route variables
        InvalidUsageError  2   bad arguments
        AuthError          3   401 / 403, unusable credentials
        NotFoundError      4   404
        ServerError        5   other HTTP errors
        ConnectionError_   6   network failures
        ConfigError        1   unreadable or invalid configuration

The codec and the services let errors from the transport and from nested
spec parsing pass through untouched.
"""

from sgclient.exit_codes import (
    EXIT_AUTH_FAILURE,
    EXIT_CONNECTION_ERROR,
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_NOT_FOUND,
    EXIT_SERVER_ERROR,
)


class SgclientError(Exception):
    """Root of the sgclient error hierarchy.

    Args:
        message: Shown to the user on stderr.
        exit_code: Overrides the class default for this instance.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidFormatError(SgclientError, ValueError):
    """Spec text or a route-variable mapping does not follow its grammar."""

    exit_code = EXIT_INVALID_USAGE


class InvalidUsageError(SgclientError):
    """A call was made with missing or contradictory arguments."""

    exit_code = EXIT_INVALID_USAGE


class AuthError(SgclientError):
    exit_code = EXIT_AUTH_FAILURE


class NotFoundError(SgclientError):
    exit_code = EXIT_NOT_FOUND


class ServerError(SgclientError):
    exit_code = EXIT_SERVER_ERROR


class ConnectionError_(SgclientError):
    """The server could not be reached.  The underscore avoids the builtin name."""

    exit_code = EXIT_CONNECTION_ERROR


class ConfigError(SgclientError):
    exit_code = EXIT_GENERIC_FAILURE
