"""A module to calculate dates from CQL day numbers.

(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

A CQL date is sent as an unsigned 32-bit number of days, with the unix
epoch (1/1/1970) at 2**31.  The server uses the proleptic Gregorian
calendar, like python datetime, but supports a much wider range of years:
only dates between 1/1/1 and 12/31/9999 can be represented here.
"""
from typing import Tuple  # pylint: disable=unused-import
import jdcal

JD_EPOCH = sum(jdcal.gcal2jd(1970, 1, 1))
EPOCH_DAYNUM = 2 ** 31
MIN_DAY = -719162
MAX_DAY = 2932896


def ymd2day(year, month, day):
    # type: (int, int, int) -> int
    """
    Converts given year, month, day to a number of days since unix EPOCH.
      year  - between 0001-9999
      month - 1 - 12
      day   - 1 - 31 (depending upon month and year)
    """
    daynum = int(sum(jdcal.gcal2jd(year, month, day)) - JD_EPOCH)
    if daynum < MIN_DAY:
        raise ValueError("Invalid date: before 1/1/1")
    if daynum > MAX_DAY:
        raise ValueError("Invalid date: after 9999/12/31")
    return daynum


def day2ymd(daynum):
    # type: (int) -> Tuple[int, int, int]
    """
    Converts given day number relative to 1970-01-01 to a tuple (year,month,day).

       +----------------------------+
       |  daynum | (year,month,day) |
       |---------+------------------|
       |       0 | (1970,1,1)       |
       | -719162 | (1,1,1)          |
       | 2932896 | (9999,12,31)     |
       +----------------------------+
    """
    if daynum < MIN_DAY or daynum > MAX_DAY:
        raise ValueError("Invalid daynum (not between 1/1/1 and 12/31/9999 inclusive).")
    y, m, d, _ = jdcal.jd2gcal(daynum, JD_EPOCH)
    return y, m, d


def cqldate2ymd(value):
    # type: (int) -> Tuple[int, int, int]
    """Converts an unsigned CQL day number to a tuple (year,month,day)."""
    return day2ymd(value - EPOCH_DAYNUM)


def ymd2cqldate(year, month, day):
    # type: (int, int, int) -> int
    """Converts given year, month, day to an unsigned CQL day number."""
    return ymd2day(year, month, day) + EPOCH_DAYNUM
