"""The boundary between the driver and a CQL server session.

(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

__all__ = ["ProtocolException", "InvalidRequestException",
           "UnavailableException", "TimedOutException",
           "SchemaDisagreementException", "TransportException",
           "CqlResult", "Session"]

# This module describes what the driver expects from the transport that
# carries CQL to the server.  Opening sockets, authenticating and
# reconnecting are the job of a concrete Session implementation: the driver
# only ever asks it to run one query at a given consistency level and to
# close.  Failures reported by the server or the transport are raised as
# ProtocolException subclasses and translated by the statement layer.

from typing import Any, List, Optional, Sequence, Tuple  # pylint: disable=unused-import

from . import protocol


class ProtocolException(Exception):
    """Base class of every failure raised by a server session.

    Anything raised as a plain ProtocolException (or a subclass not listed
    here) is taken to mean the transport itself is broken.
    """

    def __init__(self, why=None):
        # type: (Optional[str]) -> None
        super(ProtocolException, self).__init__(why)
        self.why = why

    def __str__(self):
        # type: () -> str
        return self.why or self.__class__.__name__


class InvalidRequestException(ProtocolException):
    """The server rejected the query as invalid."""

    pass


class UnavailableException(ProtocolException):
    """Not enough replicas were available to satisfy the consistency level."""

    pass


class TimedOutException(ProtocolException):
    """The replicas did not respond in time."""

    pass


class SchemaDisagreementException(ProtocolException):
    """The nodes of the cluster do not agree on the schema yet."""

    pass


class TransportException(ProtocolException):
    """The connection to the server failed."""

    pass


class CqlResult(object):
    """Raw result of a CQL query as returned by the server.

    :ivar kind: One of protocol.ROWS, protocol.INT or protocol.VOID.
    :ivar rows: For ROWS, a list of sequences of column values.
    :ivar schema: For ROWS, a list of (column name, CQL type name) pairs.
    :ivar num: For INT, the count reported by the server.
    """

    def __init__(self, kind,     # type: int
                 rows=None,      # type: Optional[List[Sequence[Any]]]
                 schema=None,    # type: Optional[List[Tuple[str, str]]]
                 num=None        # type: Optional[int]
                 ):
        # type: (...) -> None
        self.kind = kind
        self.rows = rows if rows is not None else []
        self.schema = schema if schema is not None else []
        self.num = num

    @classmethod
    def rows_result(cls, schema, rows):
        # type: (List[Tuple[str, str]], List[Sequence[Any]]) -> CqlResult
        return cls(protocol.ROWS, rows=rows, schema=schema)

    @classmethod
    def int_result(cls, num):
        # type: (int) -> CqlResult
        return cls(protocol.INT, num=num)

    @classmethod
    def void_result(cls):
        # type: () -> CqlResult
        return cls(protocol.VOID)

    def __repr__(self):
        # type: () -> str
        return '<CqlResult %s>' % (protocol.lookup_result_kind(self.kind))


class Session(object):
    """A session with a CQL server.

    Concrete sessions override execute_cql_query() and close().
    """

    closed = False

    def execute_cql_query(self, cql, consistency_level):
        # type: (str, int) -> CqlResult
        """Run a CQL query and return the raw result.

        :param cql: Text of the query.
        :param consistency_level: One of the protocol consistency levels.
        :raises ProtocolException: If the server or the transport fails.
        """
        raise NotImplementedError

    def close(self):
        # type: () -> None
        """Close the session with the server."""
        self.closed = True
