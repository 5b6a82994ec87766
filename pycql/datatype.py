"""A module for housing the datatype classes.

(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Exported Classes:
Binary -- Class for a Binary object

Exported Functions:
DateFromTicks -- Converts ticks to a Date object.
TimeFromTicks -- Converts ticks to a Time object.
TimestampFromTicks -- Converts ticks to a Timestamp object.
TypeObjectFromCql -- Converts a CQL column type name to a TypeObject variable.
decode_value -- Converts a column value received from the server.

TypeObject Variables:
STRING -- TypeObject(str)
BINARY -- TypeObject(bytes)
NUMBER -- TypeObject(int, float, decimal.Decimal, bool)
DATETIME -- TypeObject(datetime.datetime, datetime.date, datetime.time)
ROWID -- TypeObject(uuid.UUID)
"""

__all__ = ['Date', 'Time', 'Timestamp', 'DateFromTicks', 'TimeFromTicks',
           'TimestampFromTicks', 'Binary', 'STRING', 'BINARY', 'NUMBER',
           'DATETIME', 'ROWID', 'TypeObjectFromCql']

import decimal
import uuid
from datetime import datetime as Timestamp, date as Date, time as Time
from datetime import timedelta as TimeDelta
from datetime import timezone
from datetime import tzinfo  # pylint: disable=unused-import

from typing import Any, Callable, Dict, Union  # pylint: disable=unused-import

import tzlocal
from .exception import DataError
from .calendar import cqldate2ymd

UTC = timezone.utc
EPOCH = Timestamp(1970, 1, 1, tzinfo=UTC)
TICKSDAY = 86400
NANOS_PER_SECOND = 1000000000

LOCALZONE = tzlocal.get_localzone()


class Binary(bytes):
    """A binary string.

    If passed a string we assume it's encoded as LATIN-1, which ensures that
    the characters 0-255 are considered single-character sequences.
    """

    def __new__(cls, data):
        # type: (Union[str, bytes, bytearray]) -> Binary
        if isinstance(data, str):
            return bytes.__new__(cls, data.encode('latin-1'))  # type: ignore
        return bytes.__new__(cls, data)  # type: ignore

    def __str__(self):
        # type: () -> str
        return repr(self)[2:-1]


def DateFromTicks(ticks):
    # type: (int) -> Date
    """Convert ticks to a Date object."""
    return (EPOCH + TimeDelta(days=ticks // TICKSDAY)).date()


def TimeFromTicks(ticks, zoneinfo=LOCALZONE):
    # type: (int, tzinfo) -> Time
    """Convert ticks to a Time object."""
    return TimestampFromTicks(ticks, zoneinfo).time()


def TimestampFromTicks(ticks, zoneinfo=LOCALZONE):
    # type: (float, tzinfo) -> Timestamp
    """Convert ticks to a Timestamp object."""
    return (EPOCH + TimeDelta(seconds=ticks)).astimezone(zoneinfo)


def TimestampFromMillis(millis, zoneinfo=LOCALZONE):
    # type: (int, tzinfo) -> Timestamp
    """Convert a CQL timestamp (milliseconds since the epoch)."""
    return (EPOCH + TimeDelta(milliseconds=millis)).astimezone(zoneinfo)


def DateFromCql(value):
    # type: (int) -> Date
    """Convert a CQL date (unsigned day number centred on the epoch)."""
    y, m, d = cqldate2ymd(value)
    return Date(year=y, month=m, day=d)


def TimeFromNanos(nanos):
    # type: (int) -> Time
    """Convert a CQL time (nanoseconds since midnight)."""
    if nanos < 0 or nanos >= TICKSDAY * NANOS_PER_SECOND:
        raise ValueError("time out of range: %d" % (nanos))
    seconds, nanos = divmod(nanos, NANOS_PER_SECOND)
    minutes, seconds = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    return Time(hour=hours, minute=minutes, second=seconds,
                microsecond=nanos // 1000)


class TypeObject(object):
    """A SQL type object.

    Compares equal to any of the python types it stands for, as PEP 249
    asks.
    """

    def __init__(self, *values):
        self.values = values

    def __eq__(self, other):
        if isinstance(other, TypeObject):
            return self is other
        return other in self.values

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return id(self)


STRING = TypeObject(str)
BINARY = TypeObject(bytes)
NUMBER = TypeObject(int, float, decimal.Decimal, bool)
DATETIME = TypeObject(Timestamp, Date, Time)
ROWID = TypeObject(uuid.UUID)

TYPEMAP = {"ascii": STRING,
           "text": STRING,
           "varchar": STRING,
           "inet": STRING,
           "int": NUMBER,
           "bigint": NUMBER,
           "smallint": NUMBER,
           "tinyint": NUMBER,
           "varint": NUMBER,
           "decimal": NUMBER,
           "float": NUMBER,
           "double": NUMBER,
           "counter": NUMBER,
           "boolean": NUMBER,
           "timestamp": DATETIME,
           "date": DATETIME,
           "time": DATETIME,
           "blob": BINARY,
           "uuid": ROWID,
           "timeuuid": ROWID,
           }

DECODERS = {"timestamp": TimestampFromMillis,
            "date": DateFromCql,
            "time": TimeFromNanos,
            "blob": Binary,
            }  # type: Dict[str, Callable[[Any], Any]]


def TypeObjectFromCql(cql_type_name):
    # type: (str) -> TypeObject
    """Return a TypeObject based on the supplied CQL column type name."""
    name = cql_type_name.strip().lower()
    obj = TYPEMAP.get(name)
    if obj is None:
        raise DataError('received unknown column type "%s"' % (name))
    return obj


def decode_value(cql_type_name, value):
    # type: (str, Any) -> Any
    """Convert a column value received from the server to a python value.

    NULL stays None and types that the server already sends as python
    values are returned unchanged.
    """
    if value is None:
        return None
    decoder = DECODERS.get(cql_type_name.strip().lower())
    if decoder is None:
        return value
    try:
        return decoder(value)
    except (ValueError, OverflowError, TypeError) as ex:
        raise DataError('cannot decode %s value %r: %s'
                        % (cql_type_name, value, ex)) from ex
