"""
(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

import logging

from typing import Any, Dict, List, Tuple  # pylint: disable=unused-import

from pycql import session

_log = logging.getLogger("pycqltest")


class FakeSession(session.Session):
    """An in-memory session which replays scripted results.

    Queries not found in the script return a VOID result.  A scripted
    exception is raised instead of returned.
    """

    def __init__(self):
        # type: () -> None
        self.script = {}   # type: Dict[str, Any]
        self.queries = []  # type: List[Tuple[str, int]]
        self.close_calls = 0
        self.close_error = None  # type: Any
        self.on_execute = None  # type: Any

    def on(self, cql, response):
        # type: (str, Any) -> FakeSession
        self.script[cql] = response
        return self

    def execute_cql_query(self, cql, consistency_level):
        # type: (str, int) -> session.CqlResult
        _log.info("fake session: %s @ %d", cql, consistency_level)
        self.queries.append((cql, consistency_level))
        if self.on_execute is not None:
            self.on_execute(cql)
        response = self.script.get(cql, session.CqlResult.void_result())
        if isinstance(response, Exception):
            raise response
        return response

    def close(self):
        # type: () -> None
        self.close_calls += 1
        if self.close_error is not None:
            raise self.close_error
        super(FakeSession, self).close()
