"""A module for housing the Cursor class.

(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Exported Classes:
Cursor -- Class for representing a PEP 249 cursor over a statement.
"""

__all__ = ['Cursor']

from typing import Any, Iterator, List, Optional, Sequence, Tuple  # pylint: disable=unused-import

from .exception import Error, NotSupportedError


class Cursor(object):
    """A PEP 249 cursor.

    Each cursor runs its queries on its own Statement.  Queries cannot take
    parameters, since the server has no prepared statements, and
    executemany() is refused since it has no batches either.

    Public Functions:
    close -- Closes the cursor and its statement.
    execute -- Executes a CQL query.
    executemany -- Not supported.
    fetchone -- Gets one row from the result set.
    fetchmany -- Gets a number of rows from the result set.
    fetchall -- Gets all the rows from the result set.
    nextset -- There is never another result set.

    Special Functions:
    consistency_level (getter/setter) -- Consistency of the cursor's queries.
    """

    def __init__(self, connection):
        # type: (Any) -> None
        """Construct a Cursor object.

        :param connection: The connection to run queries on.
        """
        self.connection = connection
        self.arraysize = 1
        self.query = None  # type: Optional[str]
        self._statement = connection.statement()

        self._reset()

    def _reset(self):
        # type: () -> None
        self.description = None  # type: Optional[List[List[Any]]]
        self.rowcount = -1
        self._result_set = None  # type: Any

    @property
    def closed(self):
        # type: () -> bool
        return self._statement.is_closed()

    def close(self):
        # type: () -> None
        """Close this cursor."""
        self._check_closed()
        self._statement.close()

    def _check_closed(self):
        # type: () -> None
        """Check if the cursor and its connection are available.

        :raises Error: If the cursor or the connection is closed.
        """
        if self.connection.closed:
            raise Error("connection is closed")
        if self._statement.is_closed():
            raise Error("cursor is closed")

    @property
    def consistency_level(self):
        # type: () -> int
        self._check_closed()
        return self._statement.consistency_level

    @consistency_level.setter
    def consistency_level(self, value):
        # type: (int) -> None
        self._check_closed()
        self._statement.consistency_level = value

    def callproc(self, procname, parameters=None):
        # type: (str, Optional[Sequence[Any]]) -> None
        raise NotSupportedError("stored procedures are not supported")

    def execute(self, operation, parameters=None):
        # type: (str, Optional[Sequence[Any]]) -> None
        """Execute a CQL query.

        :param operation: The query.
        :param parameters: Must be empty: parameters are not supported.
        """
        self._check_closed()
        if parameters:
            raise NotSupportedError("query parameters are not supported")
        self._reset()
        self.query = operation

        if self._statement.execute(operation):
            self._result_set = self._statement.result_set
            self.description = self._result_set.description
        else:
            self.rowcount = self._statement.update_count

    def executemany(self, operation, seq_of_parameters):
        # type: (str, Sequence[Sequence[Any]]) -> None
        self._check_closed()
        raise NotSupportedError("the server does not support batched statements")

    def _check_result_set(self):
        # type: () -> None
        self._check_closed()
        if self._result_set is None:
            raise Error("Previous execute did not produce any results or no call was issued yet")

    def fetchone(self):
        # type: () -> Optional[Tuple[Any, ...]]
        self._check_result_set()
        return self._result_set.fetchone()

    def fetchmany(self, size=None):
        # type: (Optional[int]) -> List[Tuple[Any, ...]]
        self._check_result_set()
        if size is None:
            size = self.arraysize
        return self._result_set.fetchmany(size)

    def fetchall(self):
        # type: () -> List[Tuple[Any, ...]]
        self._check_result_set()
        return self._result_set.fetchall()

    def __iter__(self):
        # type: () -> Iterator[Tuple[Any, ...]]
        self._check_result_set()
        return iter(self._result_set)

    def nextset(self):
        # type: () -> Optional[bool]
        self._check_closed()
        if self._statement.has_more_results():
            return True
        return None

    def setinputsizes(self, sizes):
        pass

    def setoutputsize(self, size, column=None):
        pass
