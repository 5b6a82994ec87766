"""Constants for the CQL query protocol and the statement API.

(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

# pylint: disable=bad-whitespace

# Result kinds reported by the server for a CQL query
ROWS                              = 1
VOID                              = 2
INT                               = 3

stringifyResultKind = {
    ROWS: 'ROWS',
    VOID: 'VOID',
    INT: 'INT',
}

# Consistency levels
ONE                               = 1
QUORUM                            = 2
LOCAL_QUORUM                      = 3
EACH_QUORUM                       = 4
ALL                               = 5
ANY                               = 6
TWO                               = 7
THREE                             = 8
SERIAL                            = 9
LOCAL_SERIAL                      = 10
LOCAL_ONE                         = 11

DEFAULT_CONSISTENCY               = ONE

CONSISTENCY_LEVELS = {
    'ONE': ONE,
    'QUORUM': QUORUM,
    'LOCAL_QUORUM': LOCAL_QUORUM,
    'EACH_QUORUM': EACH_QUORUM,
    'ALL': ALL,
    'ANY': ANY,
    'TWO': TWO,
    'THREE': THREE,
    'SERIAL': SERIAL,
    'LOCAL_SERIAL': LOCAL_SERIAL,
    'LOCAL_ONE': LOCAL_ONE,
}

# Result set types
TYPE_FORWARD_ONLY                 = 1003
TYPE_SCROLL_INSENSITIVE           = 1004
TYPE_SCROLL_SENSITIVE             = 1005

# Result set concurrency
CONCUR_READ_ONLY                  = 1007
CONCUR_UPDATABLE                  = 1008

# Result set holdability
HOLD_CURSORS_OVER_COMMIT          = 1
CLOSE_CURSORS_AT_COMMIT           = 2

# Fetch directions
FETCH_FORWARD                     = 1000
FETCH_REVERSE                     = 1001
FETCH_UNKNOWN                     = 1002

# Auto-generated keys
RETURN_GENERATED_KEYS             = 1
NO_GENERATED_KEYS                 = 2

# Handling of the current result when asking for more results
CLOSE_CURRENT_RESULT              = 1
KEEP_CURRENT_RESULT               = 2
CLOSE_ALL_RESULTS                 = 3

RESULT_SET_TYPES = (TYPE_FORWARD_ONLY, TYPE_SCROLL_INSENSITIVE,
                    TYPE_SCROLL_SENSITIVE)
CONCURRENCIES = (CONCUR_READ_ONLY, CONCUR_UPDATABLE)
HOLDABILITIES = (HOLD_CURSORS_OVER_COMMIT, CLOSE_CURSORS_AT_COMMIT)
FETCH_DIRECTIONS = (FETCH_FORWARD, FETCH_REVERSE, FETCH_UNKNOWN)
GENERATED_KEYS_MODES = (RETURN_GENERATED_KEYS, NO_GENERATED_KEYS)
MORE_RESULTS_ACTIONS = (CLOSE_CURRENT_RESULT, KEEP_CURRENT_RESULT,
                        CLOSE_ALL_RESULTS)

# Update count reported when the last execution produced no count
NO_UPDATE_COUNT                   = -1


def lookup_result_kind(kind):
    # type: (int) -> str
    """Return a string-ified version of a result kind."""
    return stringifyResultKind.get(kind, '[UNKNOWN RESULT KIND %r]' % (kind,))


def lookup_consistency(name):
    # type: (str) -> int
    """Return the consistency level for a level name.

    :raises KeyError: If the name is not a known consistency level.
    """
    return CONSISTENCY_LEVELS[name.strip().upper()]
