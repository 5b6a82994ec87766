"""CQL Python driver statement.

(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Exported Classes:
Statement -- A reusable context for running CQL queries on a connection.
StatementOptions -- Statement settings that are accepted but never applied.
"""

__all__ = ['Statement', 'StatementOptions', 'OPEN', 'EXECUTING', 'CLOSED']

import functools
import weakref

from typing import Any, Optional  # pylint: disable=unused-import

from . import capability
from . import protocol
from . import result
from .exception import CqlSyntaxError, NotSupportedError, ProgrammingError
from .exception import StatementClosedError, backend_error_handler
from .result_set import ResultSet  # pylint: disable=unused-import
from .session import ProtocolException

OPEN = 'open'
EXECUTING = 'executing'
CLOSED = 'closed'

NO_RESULTSET = "no result set was returned by the query"
NO_UPDATE_COUNT = "no update count was returned by the query, it returned a result set"
NO_QUERY = "no query was given to execute"
NO_BATCH = "the server does not support batched statements"


class StatementOptions(object):
    """Statement settings that the server has no way to honour.

    Values are remembered and reported back but never sent to the server:
    there is no limit on rows or field sizes, queries never time out on the
    client, escapes are not processed and statements are not pooled.
    """

    def __init__(self):
        # type: () -> None
        self.max_field_size = 0
        self.max_rows = 0
        self.query_timeout = 0
        self.escape_processing = True
        self.poolable = False


@functools.total_ordering
class Statement(object):
    """A context for running CQL queries on a connection.

    Statements are created with Connection.statement().  A statement keeps a
    weak reference to its connection: it does not keep the connection alive
    and becomes closed once the connection is gone.

    A statement is not safe to share between threads.

    Public Functions:
    execute -- Run a query; return True if it produced a result set.
    execute_query -- Run a query which must produce a result set.
    execute_update -- Run a query which must produce an update count.
    add_batch, clear_batch, execute_batch -- Not supported.
    close_current_result -- Drop the current result.
    has_more_results -- Always False.
    get_more_results -- Drop the current result and report whether more exist.
    close -- Close the statement.
    is_closed -- Return True if the statement is closed.
    """

    def __init__(self, connection,                               # type: Any
                 cql=None,                                       # type: Optional[str]
                 result_set_type=protocol.TYPE_FORWARD_ONLY,     # type: int
                 concurrency=protocol.CONCUR_READ_ONLY,          # type: int
                 holdability=protocol.HOLD_CURSORS_OVER_COMMIT   # type: int
                 ):
        # type: (...) -> None
        """Create a statement.

        :param connection: The connection which owns the statement.
        :param cql: Default query to run when execute() is given none.
        :param result_set_type: One of the protocol.TYPE_* values.
        :param concurrency: One of the protocol.CONCUR_* values.
        :param holdability: One of the protocol.*_COMMIT values.
        :raises CqlSyntaxError: If one of the options is invalid.
        """
        capability.raise_for(capability.check_result_set_type(result_set_type))
        capability.raise_for(capability.check_concurrency(concurrency))
        capability.raise_for(capability.check_holdability(holdability))

        self.__connection = weakref.ref(connection)  # type: Optional[weakref.ref]
        self.cql = cql
        self.state = OPEN
        self.options = StatementOptions()

        self.__result_set_type = result_set_type
        self.__concurrency = concurrency
        self.__holdability = holdability
        self.__consistency_level = connection.default_consistency_level
        self.__fetch_direction = protocol.FETCH_FORWARD
        self.__fetch_size = 0
        self._results = result.ResultState()

    def __repr__(self):
        # type: () -> str
        return '<Statement %s %r>' % (self.state, self.cql)

    def __lt__(self, other):
        # type: (Any) -> bool
        if not isinstance(other, Statement):
            return NotImplemented
        if self is other:
            return False
        return hash(self) < hash(other)

    def is_closed(self):
        # type: () -> bool
        """Return True if the statement or its connection is closed."""
        return self.__connection is None or self.__connection() is None

    def _check_closed(self):
        # type: () -> None
        """Check if the statement is available.

        :raises StatementClosedError: If the statement is closed.
        """
        if self.is_closed():
            raise StatementClosedError()

    @property
    def _connection(self):
        # type: () -> Any
        connection = self.__connection() if self.__connection is not None else None
        if connection is None:
            raise StatementClosedError()
        return connection

    def close(self):
        # type: () -> None
        """Close the statement and remove it from its connection.

        :raises StatementClosedError: If the statement is already closed.
        """
        connection = self._connection
        self._results.reset()
        connection.remove_statement(self)
        self.__connection = None
        self.cql = None
        self.state = CLOSED

    def _do_execute(self, cql):
        # type: (Optional[str]) -> result.ResultOutcome
        connection = self._connection
        self._results.reset()
        if cql is None:
            cql = self.cql
        if cql is None:
            raise CqlSyntaxError(NO_QUERY)

        self.state = EXECUTING
        try:
            cql_result = connection.execute(cql, self.__consistency_level)
            return result.dispatch(cql_result, self, self._results)
        except ProtocolException as ex:
            backend_error_handler(ex, cql, connection)
        finally:
            if self.state == EXECUTING:
                self.state = OPEN

    def execute(self, cql=None, auto_generated_keys=None):
        # type: (Optional[str], Optional[int]) -> bool
        """Run a query.

        :param cql: The query; defaults to the statement's own query.
        :param auto_generated_keys: protocol.NO_GENERATED_KEYS, or None.
        :returns: True if the query produced a result set.
        :raises NotSupportedError: If generated keys are requested.
        """
        self._check_closed()
        if auto_generated_keys is not None:
            capability.raise_for(capability.check_generated_keys(auto_generated_keys))
        outcome = self._do_execute(cql)
        return outcome.kind == result.ROW_SET

    def execute_query(self, cql=None):
        # type: (Optional[str]) -> ResultSet
        """Run a query that returns rows.

        :raises ProgrammingError: If the query did not produce a result set.
        """
        self._check_closed()
        self._do_execute(cql)
        result_set = self._results.result_set
        if result_set is None:
            raise ProgrammingError(NO_RESULTSET)
        return result_set

    def execute_update(self, cql=None, auto_generated_keys=None):
        # type: (Optional[str], Optional[int]) -> int
        """Run a query that modifies data or schema.

        :returns: The update count; 0 for queries that report nothing.
        :raises ProgrammingError: If the query produced a result set.
        :raises NotSupportedError: If generated keys are requested.
        """
        self._check_closed()
        if auto_generated_keys is not None:
            capability.raise_for(capability.check_generated_keys(auto_generated_keys))
        self._do_execute(cql)
        if self._results.has_result_set:
            raise ProgrammingError(NO_UPDATE_COUNT)
        return self._results.update_count

    def add_batch(self, cql):
        # type: (str) -> None
        self._check_closed()
        raise NotSupportedError(NO_BATCH)

    def clear_batch(self):
        # type: () -> None
        self._check_closed()
        raise NotSupportedError(NO_BATCH)

    def execute_batch(self):
        # type: () -> None
        self._check_closed()
        raise NotSupportedError(NO_BATCH)

    def has_more_results(self):
        # type: () -> bool
        """Return whether another result follows the current one.

        A query never produces more than one result, so this is always False.
        """
        self._check_closed()
        return False

    def close_current_result(self, current=protocol.CLOSE_CURRENT_RESULT):
        # type: (int) -> None
        """Drop the current result.

        :param current: What to do with the current result; only
                        protocol.CLOSE_CURRENT_RESULT is supported.
        :raises CqlSyntaxError: If CURRENT is not a known action.
        :raises NotSupportedError: If CURRENT asks to keep results.
        """
        self._check_closed()
        capability.raise_for(capability.check_more_results(current))
        self._results.reset()

    def get_more_results(self, current=protocol.CLOSE_CURRENT_RESULT):
        # type: (int) -> bool
        """Move to the next result, closing the current one.

        :returns: False: there is never another result.
        """
        self.close_current_result(current)
        return self.has_more_results()

    @property
    def connection(self):
        # type: () -> Any
        self._check_closed()
        return self._connection

    @property
    def result_set(self):
        # type: () -> Optional[ResultSet]
        """The result set of the last query, or None."""
        self._check_closed()
        return self._results.result_set

    @property
    def update_count(self):
        # type: () -> int
        """The update count of the last query, or -1."""
        self._check_closed()
        return self._results.update_count

    @property
    def result_set_type(self):
        # type: () -> int
        self._check_closed()
        return self.__result_set_type

    @property
    def result_set_concurrency(self):
        # type: () -> int
        self._check_closed()
        return self.__concurrency

    @property
    def result_set_holdability(self):
        # type: () -> int
        self._check_closed()
        return self.__holdability

    @property
    def consistency_level(self):
        # type: () -> int
        self._check_closed()
        return self.__consistency_level

    @consistency_level.setter
    def consistency_level(self, value):
        # type: (int) -> None
        self._check_closed()
        if value not in protocol.CONSISTENCY_LEVELS.values():
            raise CqlSyntaxError("bad consistency level: %r" % (value,))
        self.__consistency_level = value

    @property
    def fetch_direction(self):
        # type: () -> int
        self._check_closed()
        return self.__fetch_direction

    @fetch_direction.setter
    def fetch_direction(self, value):
        # type: (int) -> None
        self._check_closed()
        capability.raise_for(
            capability.check_fetch_direction(value, self.__result_set_type))
        self.__fetch_direction = value

    @property
    def fetch_size(self):
        # type: () -> int
        self._check_closed()
        return self.__fetch_size

    @fetch_size.setter
    def fetch_size(self, value):
        # type: (int) -> None
        self._check_closed()
        capability.raise_for(capability.check_fetch_size(value))
        self.__fetch_size = value

    @property
    def max_field_size(self):
        # type: () -> int
        self._check_closed()
        return self.options.max_field_size

    @max_field_size.setter
    def max_field_size(self, value):
        # type: (int) -> None
        self._check_closed()
        self.options.max_field_size = value

    @property
    def max_rows(self):
        # type: () -> int
        self._check_closed()
        return self.options.max_rows

    @max_rows.setter
    def max_rows(self, value):
        # type: (int) -> None
        self._check_closed()
        self.options.max_rows = value

    @property
    def query_timeout(self):
        # type: () -> int
        self._check_closed()
        return self.options.query_timeout

    @query_timeout.setter
    def query_timeout(self, value):
        # type: (int) -> None
        self._check_closed()
        self.options.query_timeout = value

    @property
    def escape_processing(self):
        # type: () -> bool
        self._check_closed()
        return self.options.escape_processing

    @escape_processing.setter
    def escape_processing(self, value):
        # type: (bool) -> None
        self._check_closed()
        self.options.escape_processing = value

    @property
    def poolable(self):
        # type: () -> bool
        self._check_closed()
        return self.options.poolable

    @poolable.setter
    def poolable(self, value):
        # type: (bool) -> None
        self._check_closed()
        self.options.poolable = value

    @property
    def warnings(self):
        # type: () -> None
        """Warnings are never collected."""
        self._check_closed()
        return None

    def clear_warnings(self):
        # type: () -> None
        self._check_closed()
