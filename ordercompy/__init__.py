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
"""OrderComPy is a package of pluggable three-way comparators.

It provides primitive comparators for numbers, strings, dates and booleans,
combinators to reverse, delegate and chain them, adaptation of plain two
argument functions, and a generic comparator dispatching on runtime types.
"""

from ordercompy._version import __version__
from ordercompy.comparator import (
    BaseComparator,
    BooleanComparator,
    CompositeComparator,
    DateComparator,
    DelegatableComparator,
    EqualsComparator,
    FunctionComparator,
    HashedComparator,
    IsComparator,
    NumberComparator,
    ObjectComparator,
    ReverseComparator,
    StringComparator,
    ToStringComparator,
    function_comparator,
    is_comparator,
    wrap_comparators,
)
from ordercompy.utils import distinct, sort_values, to_key

__all__ = [
    "__version__",
    "BaseComparator",
    "BooleanComparator",
    "CompositeComparator",
    "DateComparator",
    "DelegatableComparator",
    "EqualsComparator",
    "FunctionComparator",
    "HashedComparator",
    "IsComparator",
    "NumberComparator",
    "ObjectComparator",
    "ReverseComparator",
    "StringComparator",
    "ToStringComparator",
    "distinct",
    "function_comparator",
    "is_comparator",
    "sort_values",
    "to_key",
    "wrap_comparators",
]
