"""Checks of statement options against what the server can do.

(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Every check returns None if the value is acceptable, or a ValidationFailure
describing why it is not.  raise_for() turns a failure into the matching
driver error.
"""

__all__ = ['ValidationFailure', 'check_result_set_type', 'check_concurrency',
           'check_holdability', 'check_fetch_direction', 'check_fetch_size',
           'check_generated_keys', 'check_more_results', 'raise_for']

from collections import namedtuple

from typing import Any, Optional  # pylint: disable=unused-import

from . import protocol
from .exception import CqlSyntaxError, NotSupportedError

RESULT_SET_TYPE = 'result set type'
CONCURRENCY = 'result set concurrency'
HOLDABILITY = 'result set holdability'
FETCH_DIRECTION = 'fetch direction'
FETCH_SIZE = 'fetch size'
GENERATED_KEYS = 'auto-generated keys'
MORE_RESULTS = 'current result handling'

# Option values that are legal but that the server cannot honour
_UNSUPPORTED_MESSAGES = {
    GENERATED_KEYS: "the server does not return auto-generated keys",
    MORE_RESULTS: "the server does not return multiple result sets",
}


class ValidationFailure(namedtuple('ValidationFailure',
                                   ['option', 'value', 'unsupported'])):
    """Why an option value was refused.

    :ivar option: Name of the option.
    :ivar value: The refused value.
    :ivar unsupported: True if the value is legal but the feature is not
                       available, False if the value itself is invalid.
    """

    __slots__ = ()

    @property
    def message(self):
        # type: () -> str
        if self.unsupported:
            return _UNSUPPORTED_MESSAGES.get(
                self.option, "%s %r is not supported" % (self.option, self.value))
        return "bad %s: %r" % (self.option, self.value)


def _invalid(option, value):
    # type: (str, Any) -> ValidationFailure
    return ValidationFailure(option, value, False)


def _unsupported(option, value):
    # type: (str, Any) -> ValidationFailure
    return ValidationFailure(option, value, True)


def check_result_set_type(value):
    # type: (int) -> Optional[ValidationFailure]
    if value not in protocol.RESULT_SET_TYPES:
        return _invalid(RESULT_SET_TYPE, value)
    return None


def check_concurrency(value):
    # type: (int) -> Optional[ValidationFailure]
    if value not in protocol.CONCURRENCIES:
        return _invalid(CONCURRENCY, value)
    return None


def check_holdability(value):
    # type: (int) -> Optional[ValidationFailure]
    if value not in protocol.HOLDABILITIES:
        return _invalid(HOLDABILITY, value)
    return None


def check_fetch_direction(value, result_set_type):
    # type: (int, int) -> Optional[ValidationFailure]
    """Check a fetch direction for a statement of the given result set type.

    A forward-only result set can only be fetched forward, even though
    reverse and unknown are valid directions otherwise.
    """
    if value not in protocol.FETCH_DIRECTIONS:
        return _invalid(FETCH_DIRECTION, value)
    if (result_set_type == protocol.TYPE_FORWARD_ONLY
            and value != protocol.FETCH_FORWARD):
        return _invalid(FETCH_DIRECTION, value)
    return None


def check_fetch_size(value):
    # type: (int) -> Optional[ValidationFailure]
    if value < 0:
        return _invalid(FETCH_SIZE, value)
    return None


def check_generated_keys(value):
    # type: (int) -> Optional[ValidationFailure]
    if value not in protocol.GENERATED_KEYS_MODES:
        return _invalid(GENERATED_KEYS, value)
    if value == protocol.RETURN_GENERATED_KEYS:
        return _unsupported(GENERATED_KEYS, value)
    return None


def check_more_results(value):
    # type: (int) -> Optional[ValidationFailure]
    if value not in protocol.MORE_RESULTS_ACTIONS:
        return _invalid(MORE_RESULTS, value)
    if value != protocol.CLOSE_CURRENT_RESULT:
        return _unsupported(MORE_RESULTS, value)
    return None


def raise_for(failure):
    # type: (Optional[ValidationFailure]) -> None
    """Raise the driver error for a failed check; do nothing on success.

    :raises CqlSyntaxError: If the value is invalid.
    :raises NotSupportedError: If the value asks for an unsupported feature.
    """
    if failure is None:
        return
    if failure.unsupported:
        raise NotSupportedError(failure.message)
    raise CqlSyntaxError(failure.message)
