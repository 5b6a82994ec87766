"""A module for connecting to a CQL server.

(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Exported Classes:
Connection -- Class for running statements over a server session.

Exported Functions:
connect -- Creates a connection object.
"""

__all__ = ['apilevel', 'threadsafety', 'paramstyle', 'connect',
           'Connection']

import copy
import logging

from typing import Any, Dict, Mapping, Optional, Set, Tuple  # pylint: disable=unused-import

from . import __version__
from .exception import Error, InterfaceError, NotSupportedError
from .exception import backend_error_handler
from .session import CqlResult, ProtocolException, Session  # pylint: disable=unused-import

from . import cursor
from . import protocol
from . import statement

apilevel = "2.0"
threadsafety = 1
paramstyle = "qmark"

_log = logging.getLogger(__name__)


def connect(session,        # type: Session
            keyspace=None,  # type: Optional[str]
            options=None,   # type: Optional[Mapping[str, str]]
            ):
    # type: (...) -> Connection
    """Return a new CQL Connection object.

    :param session: An open session with the server.
    :param keyspace: Keyspace to use for unqualified table names.
    :param options: Connection options.
    :returns: A new Connection object.
    """
    return Connection(session, keyspace=keyspace, options=options)


class Connection(object):
    """An established connection with a CQL server.

    The server has no transactions: every statement is committed as soon as
    it runs.

    Public Functions:
    statement -- Return a new Statement object using the connection.
    cursor -- Return a new Cursor object using the connection.
    execute -- Run a query over the session at a consistency level.
    remove_statement -- Forget a statement which was closed.
    close -- Closes the connection and all its statements.
    commit -- Does nothing.
    rollback -- Not supported.
    connection_config -- Return a copy of the connection configuration.
    """

    # PEP 249 recommends that all exceptions be exposed as attributes in the
    # Connection object.
    from .exception import Warning, Error, InterfaceError, DatabaseError
    from .exception import DataError, OperationalError, IntegrityError
    from .exception import InternalError, ProgrammingError, NotSupportedError

    __session = None          # type: Session
    __config = None           # type: Dict[str, Any]

    def __init__(self, session,     # type: Session
                 keyspace=None,     # type: Optional[str]
                 options=None,      # type: Optional[Mapping[str, str]]
                 ):
        # type: (...) -> None
        """Construct a Connection object.

        :param session: An open session with the server.
        :param keyspace: Keyspace to use for unqualified table names.
        :param options: Connection options.
        """
        if session is None:
            raise InterfaceError("No session provided.")

        params, opts = self.connection_options(options)

        if keyspace is None:
            keyspace = opts.get('keyspace')

        name = opts.get('consistency')
        if name is None:
            self.default_consistency_level = protocol.DEFAULT_CONSISTENCY
        else:
            try:
                self.default_consistency_level = protocol.lookup_consistency(name)
            except KeyError:
                raise InterfaceError("Unknown consistency level: %s" % (name))

        self.__session = session
        self.__closed = False
        self.__statements = set()  # type: Set[statement.Statement]
        self.__config = {'driver_version': __version__,
                         'keyspace': keyspace,
                         'consistency': self.default_consistency_level,
                         'parameters': params,
                         'options': copy.deepcopy(options)}

        if keyspace:
            cql = 'USE %s' % (keyspace)
            try:
                self.execute(cql, self.default_consistency_level)
            except ProtocolException as ex:
                backend_error_handler(ex, cql, self)

    @staticmethod
    def connection_options(options):
        # type: (Optional[Mapping[str, str]]) -> Tuple[Dict[str, str], Dict[str, str]]
        """Split into session parameters and driver options.

        Driver options control the connection itself; the rest are left for
        the session.

        :return: A tuple of (session parameters, driver options).
        """
        opts = ['consistency', 'keyspace']
        driver = {}
        parameters = {}
        if options:
            for key, val in options.items():
                if key in opts:
                    driver[key] = val
                else:
                    parameters[key] = val
        return parameters, driver

    @property
    def closed(self):
        # type: () -> bool
        return self.__closed

    def connection_config(self):
        # type: () -> Dict[str, Any]
        """Returns a copy of the connection configuration.

        Configuration:
          connected      :bool: True if the connection is active
          consistency    :int:  Default consistency level of new statements
          driver_version :str:  Version of this driver
          keyspace       :str:  Keyspace in use, or None
          options        :dict: Dictionary of connection options
          parameters     :dict: Options left for the session
          statements     :int:  Number of open statements

        :returns: Copy of the connection config names and values.
                  Modifying these values has no effect on the connection.
        """
        config = copy.deepcopy(self.__config)
        config['connected'] = not self.__closed
        config['statements'] = len(self.__statements)
        return config

    def _check_closed(self):
        # type: () -> None
        """Check if the connection is available.

        :raises Error: If the connection is closed.
        """
        if self.__closed:
            raise Error("connection is closed")

    def statement(self, cql=None,                                   # type: Optional[str]
                  result_set_type=protocol.TYPE_FORWARD_ONLY,       # type: int
                  concurrency=protocol.CONCUR_READ_ONLY,            # type: int
                  holdability=protocol.HOLD_CURSORS_OVER_COMMIT     # type: int
                  ):
        # type: (...) -> statement.Statement
        """Return a new Statement object using the connection."""
        self._check_closed()
        stmt = statement.Statement(self, cql, result_set_type,
                                   concurrency, holdability)
        self.__statements.add(stmt)
        return stmt

    def cursor(self):
        # type: () -> cursor.Cursor
        """Return a new Cursor object using the connection."""
        self._check_closed()
        return cursor.Cursor(self)

    def execute(self, cql, consistency_level):
        # type: (str, int) -> CqlResult
        """Run a query over the session.

        :raises ProtocolException: If the session fails.
        """
        self._check_closed()
        _log.debug("CQL: %s", cql)
        return self.__session.execute_cql_query(cql, consistency_level)

    def remove_statement(self, stmt):
        # type: (statement.Statement) -> None
        self.__statements.discard(stmt)

    def close(self):
        # type: () -> None
        """Close all statements, then the session with the server."""
        self._check_closed()
        for stmt in list(self.__statements):
            if not stmt.is_closed():
                stmt.close()
        self.__statements.clear()
        self.__closed = True
        self.__session.close()

    def commit(self):
        # type: () -> None
        """Nothing to commit: the server is always in auto-commit mode."""
        self._check_closed()

    def rollback(self):
        # type: () -> None
        self._check_closed()
        raise NotSupportedError("the server does not support transactions")

    @property
    def autocommit(self):
        # type: () -> bool
        self._check_closed()
        return True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if not self.__closed:
            self.close()
