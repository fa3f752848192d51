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

"""Generic Object Comparator Class."""

import logging
from typing import Any

from ordercompy.comparator.base import BaseComparator
from ordercompy.comparator.primitive import (
    BooleanComparator,
    DateComparator,
    HashedComparator,
    NumberComparator,
    StringComparator,
)
from ordercompy.helper import TypeTag, get_type_tag, is_null, is_same

LOG = logging.getLogger(__name__)

STRING_COMPARATOR = StringComparator()
NUMBER_COMPARATOR = NumberComparator()
BOOLEAN_COMPARATOR = BooleanComparator()
DATE_COMPARATOR = DateComparator()
HASHED_COMPARATOR = HashedComparator()


class ObjectComparator(BaseComparator):
    """Comparator for values whose type is only known at compare time.

    - The same value compares 0.
    - A null orders before a non-null.
    - Two strings, numbers, booleans or dates use the matching primitive
      comparator.
    - Anything else, including values of different kinds, is ordered by hash
      code. This keeps the order total without type specific logic for every
      possible type.
    """

    def compare(self, e1: Any, e2: Any) -> Any:
        if is_same(e1, e2):
            return 0
        if is_null(e1):
            return 0 if is_null(e2) else -1
        if is_null(e2):
            return 1

        tag = get_type_tag(e1)
        if tag is not get_type_tag(e2):
            LOG.debug(
                "Mismatched types %s and %s, ordering by hash code",
                type(e1).__name__,
                type(e2).__name__,
            )
            return HASHED_COMPARATOR.compare(e1, e2)

        match tag:
            case TypeTag.STRING:
                return STRING_COMPARATOR.compare(e1, e2)
            case TypeTag.NUMBER:
                return NUMBER_COMPARATOR.compare(e1, e2)
            case TypeTag.BOOLEAN:
                return BOOLEAN_COMPARATOR.compare(e1, e2)
            case TypeTag.DATE:
                return DATE_COMPARATOR.compare(e1, e2)
            case _:
                return HASHED_COMPARATOR.compare(e1, e2)
