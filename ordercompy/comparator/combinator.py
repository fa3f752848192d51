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

"""Comparator Combinators.

Wrappers which transform or combine other comparators, and the adaptation
of arbitrary two-argument callables into comparators.
"""

import logging
import numbers
from collections.abc import Callable
from decimal import Decimal
from typing import Any

import numpy as np

from ordercompy.comparator.base import (
    BaseComparator,
    FunctionType,
    judge_func_type,
)
from ordercompy.comparator.primitive import StringComparator
from ordercompy.helper import call_function, check_true, deep_equals, is_null, is_same

LOG = logging.getLogger(__name__)

ComparatorLike = BaseComparator | Callable[[Any, Any], Any]


class ReverseComparator(BaseComparator):
    """Invert the order of another comparator.

    Parameters
    ----------
    comparator : BaseComparator
        The comparator to invert.
    """

    def __init__(self, comparator: BaseComparator):
        self.comparator = comparator

    def compare(self, e1: Any, e2: Any) -> Any:
        return self.comparator.compare(e2, e1)


class IsComparator(BaseComparator):
    """Return 0 if both values are the same value, else 1.

    This is a "same or different" predicate and never returns a negative
    number, so sorting with it is not well defined. Use it for grouping and
    deduplication only.
    """

    def compare(self, e1: Any, e2: Any) -> int:
        return 0 if is_same(e1, e2) else 1


class EqualsComparator(BaseComparator):
    """Return 0 if both values are deeply equal, else 1.

    Like :class:`IsComparator` this never signals a negative result and is
    only meaningful for grouping and deduplication.

    Parameters
    ----------
    ordered : bool, optional
        Whether element order matters when comparing sequences, arrays and
        series. Defaults to ``True``.
    """

    def __init__(self, ordered: bool = True):
        self.ordered = ordered

    def compare(self, e1: Any, e2: Any) -> int:
        return 0 if deep_equals(e1, e2, self.ordered) else 1


class DelegatableComparator(BaseComparator):
    """Forward comparisons to an inner comparator.

    Subclasses override :meth:`compare` to transform the operands before
    delegating to ``self.comp``.

    Parameters
    ----------
    comparator : BaseComparator
        The comparator to delegate to.
    """

    def __init__(self, comparator: BaseComparator):
        self.comp = comparator

    def compare(self, e1: Any, e2: Any) -> Any:
        return self.comp.compare(e1, e2)


class ToStringComparator(DelegatableComparator):
    """Compare the ``str()`` projections of two values.

    ``None`` is projected to ``None`` so the null handling of
    :class:`~ordercompy.comparator.primitive.StringComparator` applies.
    """

    def __init__(self):
        super().__init__(StringComparator())

    def compare(self, e1: Any, e2: Any) -> int:
        return self.comp.compare(
            None if is_null(e1) else str(e1), None if is_null(e2) else str(e2)
        )


class FunctionComparator(BaseComparator):
    """Adapt a callable or comparator-like object into a comparator.

    The raw result of the wrapped value is normalised as follows, in this
    order:

    - a boolean becomes 0 when true and 1 when false, so equality predicates
      such as ``lambda a, b: a == b`` can be used for grouping;
    - a real number or a ``Decimal`` is returned unchanged, keeping its sign
      for ordering;
    - any other truthy value becomes 0, any other falsy value becomes 1.

    Parameters
    ----------
    f : BaseComparator | Callable | Any
        A comparator, an object exposing ``compare(e1, e2)`` or a two
        argument callable.

    Raises
    ------
    ValueError
        If ``f`` is neither callable nor comparator-like.
    """

    def __init__(self, f: ComparatorLike):
        self.func_type = judge_func_type(f)
        check_true(
            self.func_type is not FunctionType.UNKNOWN, "argument is not a function"
        )
        self.comp = f

    def compare(self, e1: Any, e2: Any) -> Any:
        if self.func_type is FunctionType.COMPARATOR:
            ret = self.comp.compare(e1, e2)
        else:
            ret = call_function(self.comp, e1, e2)
        return normalize_result(ret)


def normalize_result(ret: Any) -> Any:
    """Normalise the raw result of an adapted callable.

    Parameters
    ----------
    ret : Any
        Whatever the wrapped callable returned.

    Returns
    -------
    int | float
        0 for true booleans and other truthy non-numbers, the value itself
        for real numbers and decimals, 1 for everything else.
    """
    if isinstance(ret, (bool, np.bool_)):
        return 0 if ret else 1
    if isinstance(ret, (numbers.Real, Decimal)):
        return ret
    return 0 if ret else 1


def function_comparator(f: ComparatorLike) -> FunctionComparator:
    """Wrap a single callable or comparator-like value into a comparator."""
    return FunctionComparator(f)
