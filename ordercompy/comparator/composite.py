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

"""Composite Comparator Class."""

import logging
from enum import Enum
from typing import Any

from ordercompy.comparator.base import BaseComparator
from ordercompy.comparator.combinator import ComparatorLike, FunctionComparator
from ordercompy.helper import check_true

LOG = logging.getLogger(__name__)


class CompositeState(Enum):
    """Lifecycle of a :class:`CompositeComparator`.

    A composite starts out ``BUILDING`` and becomes ``FROZEN`` on its first
    comparison. There is no way back.
    """

    BUILDING = "building"
    FROZEN = "frozen"


class CompositeComparator(BaseComparator):
    """Chain of comparators evaluated until one yields a nonzero result.

    This is the usual multi-key ordering, e.g. by last name, then first
    name, then id. Comparators can only be added before the first call to
    :meth:`compare`; afterwards the chain is frozen so that it cannot change
    in the middle of a sort.

    Notes
    -----
    Adding comparators mutates the instance, so a composite must not be
    shared between threads before its first comparison.
    """

    def __init__(self):
        self._comparators: list[FunctionComparator] = []
        self._state = CompositeState.BUILDING

    @property
    def state(self) -> CompositeState:
        """Get the lifecycle state."""
        return self._state

    @property
    def comparators(self) -> tuple[FunctionComparator, ...]:
        """Get the chained comparators in evaluation order."""
        return tuple(self._comparators)

    def add_comparator(self, comparator: ComparatorLike) -> None:
        """Append a comparator to the chain.

        The value is adapted with
        :class:`~ordercompy.comparator.combinator.FunctionComparator`. Once
        the composite has been used this is a no-op.

        Parameters
        ----------
        comparator : BaseComparator | Callable | Any
            A comparator, an object exposing ``compare(e1, e2)`` or a two
            argument callable.

        Raises
        ------
        ValueError
            If ``comparator`` is neither callable nor comparator-like.
        """
        if self._state is CompositeState.FROZEN:
            LOG.debug("Composite comparator already in use, ignoring %r", comparator)
            return
        self._comparators.append(FunctionComparator(comparator))

    def _freeze(self) -> None:
        if self._state is CompositeState.BUILDING:
            LOG.debug(
                "Freezing composite comparator with %d comparator(s)",
                len(self._comparators),
            )
            self._state = CompositeState.FROZEN

    def compare(self, e1: Any, e2: Any) -> Any:
        """Compare with each chained comparator in insertion order.

        Parameters
        ----------
        e1 : Any
            The first value.
        e2 : Any
            The second value.

        Returns
        -------
        int | float
            The first nonzero result, or 0 if every comparator considers the
            values equivalent.

        Raises
        ------
        ValueError
            If no comparator was added.
        """
        self._freeze()
        check_true(len(self._comparators) > 0, "composite comparator is empty")
        result = 0
        for comparator in self._comparators:
            result = comparator.compare(e1, e2)
            if result != 0:
                break
        return result


def wrap_comparators(*funcs: ComparatorLike) -> CompositeComparator:
    """Combine comparators into a single :class:`CompositeComparator`.

    ``None`` entries are skipped.

    Parameters
    ----------
    *funcs : BaseComparator | Callable | Any
        Comparators, comparator-like objects or two argument callables, in
        order of precedence.

    Returns
    -------
    CompositeComparator
        The composite, not yet frozen.
    """
    comparator = CompositeComparator()
    for func in funcs:
        if func is not None:
            comparator.add_comparator(func)
    return comparator
