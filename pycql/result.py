"""Classification of query results.

(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

A query produces exactly one of three outcomes: a set of rows, a count of
updated rows, or nothing at all.

Exported Functions:
RowSet -- Outcome of a query that returned rows.
UpdateCount -- Outcome of a query that returned a count.
Void -- Outcome of a query that returned nothing.
dispatch -- Classify a raw result and record it in a ResultState.
"""

__all__ = ['ResultOutcome', 'RowSet', 'UpdateCount', 'Void', 'ResultState',
           'dispatch']

from collections import namedtuple

from typing import Any, Optional  # pylint: disable=unused-import

from . import protocol
from .exception import InternalError
from .result_set import ResultSet

ROW_SET = 'row set'
UPDATE_COUNT = 'update count'
VOID = 'void'

ResultOutcome = namedtuple('ResultOutcome', ['kind', 'result_set', 'update_count'])


def RowSet(result_set):
    # type: (ResultSet) -> ResultOutcome
    return ResultOutcome(ROW_SET, result_set, protocol.NO_UPDATE_COUNT)


def UpdateCount(count):
    # type: (int) -> ResultOutcome
    return ResultOutcome(UPDATE_COUNT, None, count)


def Void():
    # type: () -> ResultOutcome
    return ResultOutcome(VOID, None, 0)


class ResultState(object):
    """The result of the last query run by a statement.

    Holds either a result set or an update count, never both.
    """

    def __init__(self):
        # type: () -> None
        self.result_set = None  # type: Optional[ResultSet]
        self.update_count = protocol.NO_UPDATE_COUNT

    def reset(self):
        # type: () -> None
        """Forget the current result, closing its result set."""
        if self.result_set is not None:
            self.result_set.close()
        self.result_set = None
        self.update_count = protocol.NO_UPDATE_COUNT

    def apply(self, outcome):
        # type: (ResultOutcome) -> None
        """Replace the current result with OUTCOME."""
        self.reset()
        if outcome.kind == ROW_SET:
            self.result_set = outcome.result_set
        else:
            self.update_count = outcome.update_count

    @property
    def has_result_set(self):
        # type: () -> bool
        return self.result_set is not None


def classify(cql_result, statement):
    # type: (Any, Any) -> ResultOutcome
    """Return the outcome for a raw result from the server.

    :raises InternalError: If the server reported an unknown result kind.
    """
    kind = cql_result.kind
    if kind == protocol.ROWS:
        return RowSet(ResultSet(statement, cql_result))
    if kind == protocol.INT:
        return UpdateCount(cql_result.num)
    if kind == protocol.VOID:
        return Void()
    raise InternalError("unexpected result from server: %s"
                        % (protocol.lookup_result_kind(kind)))


def dispatch(cql_result, statement, state):
    # type: (Any, Any, ResultState) -> ResultOutcome
    """Classify a raw result and make it the current result of STATE.

    The previous result is dropped first, so that a failure leaves no stale
    result behind.
    """
    state.reset()
    outcome = classify(cql_result, statement)
    state.apply(outcome)
    return outcome
