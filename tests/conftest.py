"""
(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

import logging

import pytest

from typing import Generator  # pylint: disable=unused-import

from pycql import session

from . import FakeSession

_log = logging.getLogger("pycqltest")

SELECT_USERS = "SELECT name, age FROM users"
INSERT_USER = "INSERT INTO users (name, age) VALUES ('ann', 31)"
CREATE_TABLE = "CREATE TABLE users (name text PRIMARY KEY, age int)"
BAD_QUERY = "SELEKT * FROM users"

USERS_SCHEMA = [('name', 'text'), ('age', 'int')]
USERS_ROWS = [['ann', 31], ['bob', 42], ['cid', 27]]


@pytest.fixture
def fake_session():
    # type: () -> Generator[FakeSession, None, None]
    """A fake session knowing a few queries about a users table."""
    s = FakeSession()
    s.on(SELECT_USERS, session.CqlResult.rows_result(USERS_SCHEMA, USERS_ROWS))
    s.on(INSERT_USER, session.CqlResult.int_result(1))
    s.on(CREATE_TABLE, session.CqlResult.void_result())
    s.on(BAD_QUERY, session.InvalidRequestException("line 1:0 no viable alternative"))
    _log.info("Created fake session")
    yield s
    _log.info("Fake session ran %d queries", len(s.queries))
