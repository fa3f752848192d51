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

"""Helpers for using comparators with lists, pandas and polars series."""

import logging
from collections.abc import Iterable
from functools import cmp_to_key
from typing import Any

import pandas as pd
import polars as pl

from ordercompy.comparator.combinator import (
    ComparatorLike,
    EqualsComparator,
    function_comparator,
)
from ordercompy.comparator.composite import wrap_comparators
from ordercompy.comparator.generic import ObjectComparator
from ordercompy.helper import check_true

LOG = logging.getLogger(__name__)


def to_key(*comparators: ComparatorLike):
    """Turn one or more comparators into a ``key`` for ``sorted``.

    Parameters
    ----------
    *comparators : BaseComparator | Callable | Any
        Comparators, comparator-like objects or two argument callables. Several
        are chained in order of precedence.

    Returns
    -------
    type
        A key class as produced by ``functools.cmp_to_key``.

    Raises
    ------
    ValueError
        If no comparator is given, or one of them is not callable.
    """
    check_true(len(comparators) > 0, "at least one comparator is required")
    if len(comparators) == 1:
        return cmp_to_key(function_comparator(comparators[0]))
    return cmp_to_key(wrap_comparators(*comparators))


def _to_list(values: Iterable[Any]) -> list[Any]:
    if isinstance(values, (pd.Series, pl.Series)):
        return values.to_list()
    return list(values)


def _take(values: Iterable[Any], items: list[Any], positions: list[int]):
    if isinstance(values, pd.Series):
        return values.iloc[positions]
    if isinstance(values, pl.Series):
        return values[positions]
    return [items[i] for i in positions]


def sort_values(
    values: Iterable[Any], *comparators: ComparatorLike, reverse: bool = False
) -> list[Any] | pd.Series | pl.Series:
    """Stable sort of values with comparators.

    Parameters
    ----------
    values : Iterable | pandas.Series | polars.Series
        The values to sort.
    *comparators : BaseComparator | Callable | Any
        Comparators in order of precedence. Defaults to
        :class:`~ordercompy.comparator.generic.ObjectComparator`.
    reverse : bool, optional
        Sort in descending order, keeping equivalent values in their original
        order.

    Returns
    -------
    list | pandas.Series | polars.Series
        The sorted values. A pandas Series keeps its index aligned with the
        values, anything that is not a series comes back as a list.
    """
    key = to_key(*comparators) if comparators else to_key(ObjectComparator())
    items = _to_list(values)
    positions = sorted(range(len(items)), key=lambda i: key(items[i]), reverse=reverse)
    return _take(values, items, positions)


def distinct(
    values: Iterable[Any], comparator: ComparatorLike | None = None
) -> list[Any] | pd.Series | pl.Series:
    """Drop values equivalent to an earlier value.

    Two values are equivalent when the comparator returns 0, so equality
    style comparators and plain predicates such as ``lambda a, b: a == b``
    can be used.

    Parameters
    ----------
    values : Iterable | pandas.Series | polars.Series
        The values to deduplicate.
    comparator : BaseComparator | Callable | Any, optional
        Defaults to :class:`~ordercompy.comparator.combinator.EqualsComparator`.

    Returns
    -------
    list | pandas.Series | polars.Series
        The first value of each group of equivalent values, in their original
        order.
    """
    comparator = (
        EqualsComparator() if comparator is None else function_comparator(comparator)
    )
    items = _to_list(values)
    kept: list[int] = []
    for i, item in enumerate(items):
        if all(comparator.compare(item, items[j]) != 0 for j in kept):
            kept.append(i)
    LOG.debug("Kept %d of %d value(s)", len(kept), len(items))
    return _take(values, items, kept)
