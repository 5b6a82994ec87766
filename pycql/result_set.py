""" CQL Python Driver result set

(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

from typing import Any, Iterator, List, Optional, Tuple  # pylint: disable=unused-import

from . import datatype
from .exception import Error


class ResultSet(object):
    """Rows returned by a single query.

    All rows arrive with the query result: the server has no server-side
    cursors, so fetching never goes back to the server.
    """

    def __init__(self, statement, cql_result):
        """
        :type statement pycql.statement.Statement
        :type cql_result pycql.session.CqlResult
        """
        self.statement = statement
        self.closed = False
        self.col_count = len(cql_result.schema)
        self.description = [[name, datatype.TypeObjectFromCql(type_name),
                             None, None, None, None, None]
                            for name, type_name in cql_result.schema]
        self._types = [type_name for _, type_name in cql_result.schema]
        self.results = [self._decode_row(row) for row in cql_result.rows]
        self.results_idx = 0

    def _decode_row(self, row):
        # type: (Any) -> Tuple[Any, ...]
        if len(row) != self.col_count:
            raise Error("row has %d columns, expected %d"
                        % (len(row), self.col_count))
        return tuple(datatype.decode_value(t, v)
                     for t, v in zip(self._types, row))

    def _check_closed(self):
        # type: () -> None
        if self.closed:
            raise Error("result set is closed")

    @property
    def rowcount(self):
        # type: () -> int
        return len(self.results)

    @property
    def fetch_size(self):
        # type: () -> int
        return self.statement.fetch_size

    @property
    def fetch_direction(self):
        # type: () -> int
        return self.statement.fetch_direction

    def fetchone(self):
        # type: () -> Optional[Tuple[Any, ...]]
        self._check_closed()
        if self.results_idx == len(self.results):
            return None

        res = self.results[self.results_idx]
        self.results_idx += 1
        return res

    def fetchmany(self, size):
        # type: (int) -> List[Tuple[Any, ...]]
        self._check_closed()
        size = max(size, 0)
        res = self.results[self.results_idx:self.results_idx + size]
        self.results_idx += len(res)
        return res

    def fetchall(self):
        # type: () -> List[Tuple[Any, ...]]
        self._check_closed()
        res = self.results[self.results_idx:]
        self.results_idx = len(self.results)
        return res

    def __iter__(self):
        # type: () -> Iterator[Tuple[Any, ...]]
        while True:
            row = self.fetchone()
            if row is None:
                return
            yield row

    def close(self):
        # type: () -> None
        self.closed = True
        del self.results[:]
        self.results_idx = 0
