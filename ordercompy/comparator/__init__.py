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

"""Comparators for ordering, grouping and deduplicating values."""

from ordercompy.comparator.base import (
    BaseComparator,
    FunctionType,
    is_comparator,
    judge_func_type,
)
from ordercompy.comparator.combinator import (
    DelegatableComparator,
    EqualsComparator,
    FunctionComparator,
    IsComparator,
    ReverseComparator,
    ToStringComparator,
    function_comparator,
)
from ordercompy.comparator.composite import (
    CompositeComparator,
    CompositeState,
    wrap_comparators,
)
from ordercompy.comparator.generic import ObjectComparator
from ordercompy.comparator.primitive import (
    BooleanComparator,
    DateComparator,
    HashedComparator,
    NumberComparator,
    StringComparator,
)

__all__ = [
    "BaseComparator",
    "BooleanComparator",
    "CompositeComparator",
    "CompositeState",
    "DateComparator",
    "DelegatableComparator",
    "EqualsComparator",
    "FunctionComparator",
    "FunctionType",
    "HashedComparator",
    "IsComparator",
    "NumberComparator",
    "ObjectComparator",
    "ReverseComparator",
    "StringComparator",
    "ToStringComparator",
    "function_comparator",
    "is_comparator",
    "judge_func_type",
    "wrap_comparators",
]
