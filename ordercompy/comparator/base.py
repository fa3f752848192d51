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

"""Base Comparator Class."""

import inspect
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any

from ordercompy.helper import is_null


class BaseComparator(ABC):
    """Base class for all comparators.

    A comparator orders two values of the same logical type. Instances are
    callable, so they can be handed straight to ``functools.cmp_to_key``.
    """

    @abstractmethod
    def compare(self, e1: Any, e2: Any) -> Any:
        """Compare two values.

        This method should be implemented in derived classes to provide
        specific comparison logic.

        Parameters
        ----------
        e1 : Any
            The first value, usually the new element.
        e2 : Any
            The second value, usually the element already in a collection.

        Returns
        -------
        int | float
            A negative number if ``e1`` orders before ``e2``, a positive number
            if it orders after, and 0 if both are equivalent for ordering
            purposes.
        """
        raise NotImplementedError()

    def __call__(self, e1: Any, e2: Any) -> Any:
        return self.compare(e1, e2)


class FunctionType(Enum):
    """Shapes a value can take when it is used as a comparator."""

    UNKNOWN = "unknown"
    FUNCTION = "function"
    COMPARATOR = "comparator"


def _accepts_two_args(func) -> bool:
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return False
    positional = 0
    for param in signature.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return True
        if param.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            positional += 1
    return positional >= 2


def is_comparator(c: Any) -> bool:
    """Check if a value satisfies the comparator capability.

    Subclasses of :class:`BaseComparator` always do. Any other object does
    when it has a callable ``compare`` attribute accepting at least two
    positional arguments, so objects that merely happen to have a
    ``compare`` helper are not picked up.

    Parameters
    ----------
    c : Any
        The value to check.

    Returns
    -------
    bool
        True if ``c`` can be used as a comparator as-is.
    """
    if is_null(c):
        return False
    if isinstance(c, BaseComparator):
        return True
    if inspect.isclass(c):
        return False
    compare = getattr(c, "compare", None)
    if callable(compare):
        return _accepts_two_args(compare)
    return False


def judge_func_type(f: Any) -> FunctionType:
    """Classify ``f`` as a comparator-like object, a plain callable or neither."""
    if is_comparator(f):
        return FunctionType.COMPARATOR
    if not is_null(f) and callable(f):
        return FunctionType.FUNCTION
    return FunctionType.UNKNOWN
