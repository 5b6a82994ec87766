"""
(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

import pytest

from pycql import protocol
from pycql.exception import Error, CqlSyntaxError, NotSupportedError

from . import cql_base
from .conftest import SELECT_USERS, INSERT_USER, CREATE_TABLE, BAD_QUERY


class TestCqlCursor(cql_base.CqlBase):

    def test_cursor_description(self):
        con = self._connect()
        cursor = con.cursor()

        cursor.execute(SELECT_USERS)
        descriptions = cursor.description
        dstr = "Descriptions: %s" % (str(descriptions))
        assert len(descriptions) == 2, dstr

        assert descriptions[0][0] == 'name', dstr
        assert descriptions[0][1] == self.driver.STRING, dstr
        assert descriptions[1][0] == 'age', dstr
        assert descriptions[1][1] == self.driver.NUMBER, dstr

    def test_cursor_rowcount_and_last_query(self):
        con = self._connect()
        cursor = con.cursor()
        cursor.execute(SELECT_USERS)
        assert cursor.rowcount == -1
        assert cursor.query == SELECT_USERS

        cursor.execute(INSERT_USER)
        assert cursor.rowcount == 1
        assert cursor.description is None

        cursor.execute(CREATE_TABLE)
        assert cursor.rowcount == 0

    def test_fetch(self):
        con = self._connect()
        cursor = con.cursor()
        cursor.execute(SELECT_USERS)
        assert cursor.fetchone() == ('ann', 31)
        assert cursor.fetchmany() == [('bob', 42)]
        assert cursor.fetchall() == [('cid', 27)]
        assert cursor.fetchone() is None
        assert cursor.fetchall() == []

        cursor.execute(SELECT_USERS)
        cursor.arraysize = 2
        assert len(cursor.fetchmany()) == 2
        assert len(cursor.fetchmany(5)) == 1

        cursor.execute(SELECT_USERS)
        assert [row[1] for row in cursor] == [31, 42, 27]

        cursor.execute(SELECT_USERS)
        assert cursor.fetchmany(-1) == []
        assert cursor.fetchmany(0) == []
        assert cursor.fetchone() == ('ann', 31)

    def test_fetch_without_results(self):
        con = self._connect()
        cursor = con.cursor()
        with pytest.raises(Error):
            cursor.fetchone()
        cursor.execute(INSERT_USER)
        with pytest.raises(Error):
            cursor.fetchall()

    def test_parameters(self):
        con = self._connect()
        cursor = con.cursor()
        with pytest.raises(NotSupportedError):
            cursor.execute("SELECT * FROM users WHERE name = ?", ['ann'])
        cursor.execute(SELECT_USERS, [])

    def test_executemany(self):
        con = self._connect()
        cursor = con.cursor()
        with pytest.raises(NotSupportedError):
            cursor.executemany(INSERT_USER, [[], []])

    def test_callproc(self):
        con = self._connect()
        cursor = con.cursor()
        with pytest.raises(NotSupportedError):
            cursor.callproc('lower', ['ABC'])

    def test_nextset(self):
        con = self._connect()
        cursor = con.cursor()
        cursor.execute(SELECT_USERS)
        assert cursor.nextset() is None
        assert cursor.fetchone() == ('ann', 31)

    def test_syntax_error(self):
        con = self._connect()
        cursor = con.cursor()
        with pytest.raises(CqlSyntaxError) as ex:
            cursor.execute(BAD_QUERY)
        assert BAD_QUERY in str(ex.value)
        cursor.execute(SELECT_USERS)
        assert len(cursor.fetchall()) == 3

    def test_consistency_level(self):
        con = self._connect()
        cursor = con.cursor()
        assert cursor.consistency_level == protocol.ONE
        cursor.consistency_level = protocol.ALL
        cursor.execute(SELECT_USERS)
        assert self.session.queries[-1] == (SELECT_USERS, protocol.ALL)

    def test_close(self):
        con = self._connect()
        cursor = con.cursor()
        cursor.close()
        assert cursor.closed
        with pytest.raises(Error) as ex:
            cursor.execute(SELECT_USERS)
        assert str(ex.value) == 'cursor is closed'
        with pytest.raises(Error):
            cursor.close()

    def test_connection_closed(self):
        con = self._connect()
        cursor = con.cursor()
        con.close()
        with pytest.raises(Error) as ex:
            cursor.execute(SELECT_USERS)
        assert str(ex.value) == 'connection is closed'
