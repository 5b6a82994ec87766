"""Classes containing the exceptions for reporting errors.

(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

import logging

from typing import Any, NoReturn, Optional  # pylint: disable=unused-import

from . import session

__all__ = ['Warning', 'Error', 'InterfaceError', 'DatabaseError',
           'DataError', 'OperationalError', 'IntegrityError', 'InternalError',
           'ProgrammingError', 'NotSupportedError', 'CqlSyntaxError',
           'StatementClosedError', 'RecoverableError', 'SchemaMismatchError',
           'TransientConnectionError', 'NonTransientConnectionError',
           'backend_error_handler']

_log = logging.getLogger(__name__)

WAS_CLOSED_STMT = "statement is closed"
NO_SERVER = "no server is available to run the query"
SCHEMA_MISMATCH = "schema does not match across nodes, (try again later)"
TRANSPORT_FAILURE = "transport failure, the connection was closed"
TIMED_OUT = "query timed out"


class Warning(Exception):  # pylint: disable=redefined-builtin
    def __init__(self, value):
        super(Warning, self).__init__(value)
        self.__value = value

    def __str__(self):
        return str(self.__value)


class Error(Exception):
    """Base class of all driver errors.

    :cvar transient: True if the same call may succeed when retried on the
                     same connection.
    :cvar recoverable: True if the caller can retry after a delay without
                       changing its input.
    """

    transient = False
    recoverable = False

    def __init__(self, value):
        super(Error, self).__init__(value)
        self.__value = value

    def __str__(self):
        return str(self.__value)


class InterfaceError(Error):
    pass


class DatabaseError(Error):
    pass


class DataError(DatabaseError):
    pass


class OperationalError(DatabaseError):
    pass


class IntegrityError(DatabaseError):
    pass


class InternalError(DatabaseError):
    pass


class ProgrammingError(DatabaseError):
    pass


class NotSupportedError(DatabaseError):
    pass


class CqlSyntaxError(ProgrammingError):
    """The query or one of the statement options is malformed."""

    pass


class StatementClosedError(InterfaceError):
    """An operation was attempted on a closed statement."""

    def __init__(self, value=WAS_CLOSED_STMT):
        super(StatementClosedError, self).__init__(value)


class RecoverableError(OperationalError):
    """The failure may go away if the caller retries later."""

    recoverable = True


class SchemaMismatchError(RecoverableError):
    """The cluster has not converged on a single schema yet."""

    def __init__(self, value=SCHEMA_MISMATCH):
        super(SchemaMismatchError, self).__init__(value)


class TransientConnectionError(OperationalError):
    """The query can be retried on the same connection."""

    transient = True
    recoverable = True


class NonTransientConnectionError(OperationalError):
    """The server is unreachable or the connection is broken."""

    pass


def backend_error_handler(error, cql, connection):
    # type: (session.ProtocolException, Optional[str], Any) -> NoReturn
    """Raise the driver error corresponding to a server session failure.

    When the transport itself failed the connection is closed so that the
    caller has to reconnect; problems closing it are ignored.

    :param error: The failure raised by the session.
    :param cql: The query that was being executed.
    :param connection: The connection the query was sent on, or None.
    """
    if isinstance(error, session.InvalidRequestException):
        raise CqlSyntaxError("%s\n'%s'" % (error, cql)) from error
    elif isinstance(error, session.UnavailableException):
        raise NonTransientConnectionError(NO_SERVER) from error
    elif isinstance(error, session.TimedOutException):
        raise TransientConnectionError(str(error) if error.why else TIMED_OUT) from error
    elif isinstance(error, session.SchemaDisagreementException):
        raise SchemaMismatchError() from error

    if connection is not None:
        try:
            connection.close()
        except Exception as ex:  # pylint: disable=broad-except
            _log.debug("Failed to close connection after transport failure: %s", ex)
    raise NonTransientConnectionError("%s: %s" % (TRANSPORT_FAILURE, error)) from error
