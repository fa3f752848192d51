#
# Copyright 2025 Capital One Services, LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Primitive Comparator Classes.

Fixed-type comparators for numbers, strings, dates and booleans, plus a
hash based fallback giving a total but arbitrary order.
"""

import logging
from datetime import datetime, time, timedelta, timezone
from typing import Any

import numpy as np
import pandas as pd

from ordercompy.comparator.base import BaseComparator
from ordercompy.helper import hash_code

LOG = logging.getLogger(__name__)

NANOS_PER_MILLI = 1_000_000
NANOS_PER_MICRO = 1_000
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class NumberComparator(BaseComparator):
    """Comparator for real numbers.

    Notes
    -----
    NaN is not special-cased: it propagates through the subtraction, so a
    NaN operand never orders before or after anything.
    """

    def compare(self, e1: Any, e2: Any) -> Any:
        """Return ``e1 - e2``."""
        return e1 - e2


class StringComparator(BaseComparator):
    """Null aware, ordinal comparator for strings.

    ``None`` orders before any string and two ``None`` values are equal.
    Two strings are compared code point by code point; the difference at the
    first mismatch is returned, otherwise the length difference, so a prefix
    orders before the longer string. This is not locale aware collation.
    """

    def compare(self, e1: str | None, e2: str | None) -> int:
        if e1 is None or e2 is None:
            if e1 is None and e2 is None:
                return 0
            return -1 if e1 is None else 1
        for c1, c2 in zip(e1, e2):
            delta = ord(c1) - ord(c2)
            if delta != 0:
                return delta
        return len(e1) - len(e2)


class DateComparator(BaseComparator):
    """Comparator for dates, ordered by their epoch milliseconds.

    Accepts ``datetime.date``, ``datetime.datetime``, ``pandas.Timestamp``
    and ``numpy.datetime64``, over the whole range of ``datetime`` (years 1
    to 9999). Naive values are read as UTC.
    """

    def compare(self, e1: Any, e2: Any) -> float:
        """Return the difference between ``e1`` and ``e2`` in milliseconds.

        Parameters
        ----------
        e1 : datetime.date | datetime.datetime | pandas.Timestamp | numpy.datetime64
            The first date.
        e2 : datetime.date | datetime.datetime | pandas.Timestamp | numpy.datetime64
            The second date.

        Returns
        -------
        float
            ``e1 - e2`` in milliseconds; sub-millisecond precision is kept as
            the fractional part.
        """
        return (to_epoch_nanos(e1) - to_epoch_nanos(e2)) / NANOS_PER_MILLI


def to_epoch_nanos(value: Any) -> int:
    """Convert a date-like value to nanoseconds since the epoch.

    The arithmetic is done on ``datetime`` rather than on
    ``pandas.Timestamp.value``, which only covers the years 1677 to 2262.
    The nanoseconds of a ``pandas.Timestamp`` are kept.
    """
    nanos = 0
    if isinstance(value, np.datetime64):
        value = pd.Timestamp(value)
    if isinstance(value, pd.Timestamp):
        nanos = value.nanosecond
        value = value.to_pydatetime(warn=False)
    if not isinstance(value, datetime):
        value = datetime.combine(value, time())
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    micros = (value - EPOCH) // timedelta(microseconds=1)
    return micros * NANOS_PER_MICRO + nanos


class BooleanComparator(BaseComparator):
    """Comparator for booleans where ``True`` orders after ``False``."""

    def compare(self, e1: Any, e2: Any) -> int:
        if bool(e1) == bool(e2):
            return 0
        return 1 if e1 else -1


class HashedComparator(BaseComparator):
    """Comparator ordering values by their structural hash code.

    Only meant as a last resort when no type specific comparator applies.
    The order is total but semantically arbitrary, and only as stable as
    :func:`ordercompy.helper.hash_code`.
    """

    def compare(self, e1: Any, e2: Any) -> int:
        return hash_code(e1) - hash_code(e2)
