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

"""Helper functions shared by the comparators.

These are the small collaborators the comparators lean on: null checks,
deep equality, a deterministic structural hash, runtime type tagging and
precondition checks.
"""

import logging
import numbers
from collections.abc import Callable, Mapping
from datetime import date
from enum import Enum
from typing import Any

import numpy as np
import pandas as pd
import polars as pl

LOG = logging.getLogger(__name__)

HASH_MASK = (1 << 64) - 1
TRUE_HASH = 1231
FALSE_HASH = 1237


class TypeTag(Enum):
    """Runtime kinds recognised by the object comparator."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    OTHER = "other"


def check_true(condition: bool, message: str = "illegal argument") -> None:
    """Fail fast when a precondition does not hold.

    Parameters
    ----------
    condition : bool
        The precondition to check.
    message : str, optional
        Message of the raised error.

    Raises
    ------
    ValueError
        If ``condition`` is falsy.
    """
    if not condition:
        raise ValueError(message)


def is_null(value: Any) -> bool:
    """Check if a value is ``None``, ``pandas.NA`` or ``pandas.NaT``."""
    return value is None or value is pd.NA or value is pd.NaT


def call_function(func: Callable[..., Any], *args: Any) -> Any:
    """Invoke ``func`` with positional arguments."""
    return func(*args)


def get_type_tag(value: Any) -> TypeTag:
    """Classify a value into one of the recognised runtime kinds.

    Booleans are checked before numbers since ``bool`` is a subclass of
    ``int``. Every ``numbers.Real`` (including numpy scalars) is a number,
    and ``datetime.date`` / ``datetime.datetime`` / ``pandas.Timestamp`` /
    ``numpy.datetime64`` are dates.

    Parameters
    ----------
    value : Any
        The value to classify.

    Returns
    -------
    TypeTag
        The kind of ``value``, ``TypeTag.OTHER`` for nulls and anything
        unrecognised.
    """
    if is_null(value):
        return TypeTag.OTHER
    if isinstance(value, str):
        return TypeTag.STRING
    if isinstance(value, (bool, np.bool_)):
        return TypeTag.BOOLEAN
    if isinstance(value, numbers.Real):
        return TypeTag.NUMBER
    if isinstance(value, (date, np.datetime64)):
        return TypeTag.DATE
    return TypeTag.OTHER


def deep_equals(a: Any, b: Any, ordered: bool = True) -> bool:
    """Check two values for deep equality.

    - Two nulls are equal, a null and a non-null are not.
    - numpy arrays use ``numpy.array_equal``.
    - pandas and polars objects use their ``equals`` method.
    - Mappings are equal when they share keys and their values are deeply
      equal.
    - Lists and tuples must be of the same type and length, and their
      elements deeply equal.
    - Anything else falls back to ``==``.

    Parameters
    ----------
    a : Any
        The first value.
    b : Any
        The second value.
    ordered : bool, optional
        When ``False`` sequences, arrays and series are compared as
        multisets, ignoring element order.

    Returns
    -------
    bool
        True if the values are deeply equal.
    """
    if a is b:
        return True
    if is_null(a) or is_null(b):
        return is_null(a) and is_null(b)

    if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
        if not (isinstance(a, np.ndarray) and isinstance(b, np.ndarray)):
            return False
        if ordered:
            return bool(np.array_equal(a, b))
        return a.size == b.size and bool(
            np.array_equal(np.sort(a, axis=None), np.sort(b, axis=None))
        )

    if isinstance(a, (pd.Series, pd.DataFrame, pd.Index)):
        if type(a) is not type(b):
            return False
        if not ordered:
            a, b = _sort_pandas(a), _sort_pandas(b)
        return bool(a.equals(b))

    if isinstance(a, (pl.Series, pl.DataFrame)):
        if type(a) is not type(b):
            return False
        if not ordered:
            a, b = _sort_polars(a), _sort_polars(b)
        return bool(a.equals(b))

    if isinstance(a, Mapping) and isinstance(b, Mapping):
        if a.keys() != b.keys():
            return False
        return all(deep_equals(a[key], b[key], ordered) for key in a)

    if isinstance(a, (list, tuple)) and isinstance(b, (list, tuple)):
        if type(a) is not type(b) or len(a) != len(b):
            return False
        if ordered:
            return all(deep_equals(x, y, ordered) for x, y in zip(a, b))
        return _match_unordered(a, b)

    try:
        return bool(a == b)
    except ValueError:
        # ambiguous truth value of an element-wise comparison
        return False


def _match_unordered(a, b) -> bool:
    remaining = list(b)
    for item in a:
        for i, candidate in enumerate(remaining):
            if deep_equals(item, candidate, ordered=False):
                del remaining[i]
                break
        else:
            return False
    return not remaining


def _sort_pandas(obj):
    if isinstance(obj, pd.DataFrame):
        if len(obj.columns) == 0:
            return obj
        return obj.sort_values(by=list(obj.columns), ignore_index=True)
    if isinstance(obj, pd.Index):
        return obj.sort_values()
    return obj.sort_values(ignore_index=True)


def _sort_polars(obj):
    if isinstance(obj, pl.DataFrame):
        return obj.sort(obj.columns) if obj.columns else obj
    return obj.sort()


def hash_code(value: Any) -> int:
    """Compute a deterministic structural hash code.

    Unlike the builtin ``hash`` the result for strings, bytes and floats
    does not change between interpreter runs, since those are hashed with
    ``pandas.util.hash_array``. Containers are hashed from their contents,
    so deeply equal lists, tuples, dicts and sets share a hash code.
    Unhashable objects without a known structure fall back to ``id``.

    Parameters
    ----------
    value : Any
        The value to hash.

    Returns
    -------
    int
        A non-negative integer below ``2**64``.
    """
    if is_null(value):
        return 0
    if isinstance(value, (bool, np.bool_)):
        return TRUE_HASH if value else FALSE_HASH
    if isinstance(value, (int, np.integer)):
        return int(value) & HASH_MASK
    if isinstance(value, (float, np.floating)):
        return int(pd.util.hash_array(np.array([value], dtype=np.float64))[0])
    if isinstance(value, (str, bytes)):
        holder = np.empty(1, dtype=object)
        holder[0] = value
        return int(pd.util.hash_array(holder, categorize=False)[0])
    if isinstance(value, np.ndarray):
        return _combine_ordered(pd.util.hash_array(value.ravel(), categorize=False))
    if isinstance(value, (pd.Series, pd.DataFrame, pd.Index)):
        return _combine_ordered(pd.util.hash_pandas_object(value, index=False))
    if isinstance(value, pl.Series):
        return _combine_ordered(value.hash(seed=0).to_list())
    if isinstance(value, pl.DataFrame):
        return _combine_ordered(value.hash_rows(seed=0).to_list())
    if isinstance(value, (list, tuple)):
        return _combine_ordered(hash_code(item) for item in value)
    if isinstance(value, Mapping):
        return (
            sum(hash_code(key) ^ hash_code(item) for key, item in value.items())
            & HASH_MASK
        )
    if isinstance(value, (set, frozenset)):
        return sum(hash_code(item) for item in value) & HASH_MASK
    try:
        return hash(value) & HASH_MASK
    except TypeError:
        return id(value)


def _combine_ordered(hashes) -> int:
    result = 1
    for item in hashes:
        result = (31 * result + int(item)) & HASH_MASK
    return result


def is_same(a: Any, b: Any) -> bool:
    """Check if two values are the same value.

    Objects are the same only when identical. Strings, numbers, booleans
    and dates are immutable scalars, so two of the same kind are the same
    when they are equal. No coercion happens between kinds: ``5`` and
    ``"5"`` are not the same.
    """
    if a is b:
        return True
    tag = get_type_tag(a)
    if tag is TypeTag.OTHER or tag is not get_type_tag(b):
        return False
    return bool(a == b)
