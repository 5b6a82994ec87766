"""
(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

These tests check how failures reported by the session reach the caller.
"""

import pytest

from pycql import exception, session, statement
from pycql.exception import CqlSyntaxError, SchemaMismatchError, StatementClosedError
from pycql.exception import NonTransientConnectionError, TransientConnectionError

from . import cql_base
from .conftest import SELECT_USERS, BAD_QUERY

SLOW_QUERY = "SELECT * FROM big_table"


class TestCqlErrorTranslation(cql_base.CqlBase):

    def _fail_with(self, error):
        self.session.on(SLOW_QUERY, error)
        con = self._connect()
        stmt = con.statement()
        with pytest.raises(exception.Error) as ex:
            stmt.execute(SLOW_QUERY)
        return con, stmt, ex.value

    def test_invalid_query(self):
        con = self._connect()
        stmt = con.statement()
        with pytest.raises(CqlSyntaxError) as ex:
            stmt.execute(BAD_QUERY)
        assert BAD_QUERY in str(ex.value)
        assert 'no viable alternative' in str(ex.value)
        assert isinstance(ex.value.__cause__, session.InvalidRequestException)
        assert not con.closed
        assert self.session.close_calls == 0

    def test_unavailable(self):
        con, stmt, err = self._fail_with(session.UnavailableException())
        assert isinstance(err, NonTransientConnectionError)
        assert str(err) == exception.NO_SERVER
        assert not err.transient
        assert not con.closed
        assert self.session.close_calls == 0
        assert stmt.state == statement.OPEN
        assert stmt.execute(SELECT_USERS)

    def test_timeout(self):
        con, stmt, err = self._fail_with(session.TimedOutException())
        assert isinstance(err, TransientConnectionError)
        assert err.transient
        assert err.recoverable
        assert not con.closed
        assert self.session.close_calls == 0
        # The same statement can be retried on the same connection
        assert stmt.execute(SELECT_USERS)

    def test_schema_disagreement(self):
        con, stmt, err = self._fail_with(session.SchemaDisagreementException())
        assert isinstance(err, SchemaMismatchError)
        assert not isinstance(err, CqlSyntaxError)
        assert err.recoverable
        assert not err.transient
        assert not con.closed
        assert not stmt.is_closed()

    def test_transport_failure(self):
        con, stmt, err = self._fail_with(session.TransportException("broken pipe"))
        assert isinstance(err, NonTransientConnectionError)
        assert 'broken pipe' in str(err)
        assert not err.transient
        assert self.session.close_calls == 1
        assert con.closed
        assert stmt.is_closed()
        with pytest.raises(StatementClosedError):
            stmt.execute(SELECT_USERS)

    def test_unknown_protocol_failure(self):
        con, _, err = self._fail_with(session.ProtocolException("bad frame"))
        assert isinstance(err, NonTransientConnectionError)
        assert self.session.close_calls == 1
        assert con.closed

    def test_close_failure_is_ignored(self):
        self.session.close_error = OSError("socket already gone")
        _, _, err = self._fail_with(session.TransportException("reset by peer"))
        assert isinstance(err, NonTransientConnectionError)
        assert isinstance(err.__cause__, session.TransportException)
        assert self.session.close_calls == 1

    def test_handler_without_connection(self):
        with pytest.raises(NonTransientConnectionError):
            exception.backend_error_handler(session.TransportException(), SLOW_QUERY, None)
        assert self.session.close_calls == 0

    def test_unknown_result_kind(self):
        self.session.on(SLOW_QUERY, session.CqlResult(99))
        con = self._connect()
        stmt = con.statement()
        with pytest.raises(exception.InternalError):
            stmt.execute(SLOW_QUERY)
        assert stmt.result_set is None
        assert stmt.update_count == -1
        assert not con.closed

    def test_non_protocol_errors_propagate(self):
        self.session.on(SLOW_QUERY, RuntimeError("bug"))
        con = self._connect()
        stmt = con.statement()
        with pytest.raises(RuntimeError):
            stmt.execute(SLOW_QUERY)
        assert stmt.state == statement.OPEN
        assert self.session.close_calls == 0
