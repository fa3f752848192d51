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

import logging
from decimal import Decimal
from functools import cmp_to_key

import pytest
from ordercompy.comparator.composite import (
    CompositeComparator,
    CompositeState,
    wrap_comparators,
)
from ordercompy.comparator.primitive import NumberComparator, StringComparator


def by_last(a, b):
    return StringComparator().compare(a.last, b.last)


def by_first(a, b):
    return StringComparator().compare(a.first, b.first)


def by_id(a, b):
    return NumberComparator().compare(a.id, b.id)


def test_composite_comparator_empty_fails():
    comparator = CompositeComparator()
    with pytest.raises(ValueError, match="empty"):
        comparator.compare(1, 2)


def test_composite_comparator_short_circuit():
    calls = []

    def always_equal(a, b):
        calls.append("equal")
        return 0

    def seven(a, b):
        calls.append("seven")
        return 7

    def never_called(a, b):
        calls.append("never")
        return -1

    comparator = wrap_comparators(always_equal, seven, never_called)
    assert comparator.compare("x", "y") == 7
    assert calls == ["equal", "seven"]


def test_composite_comparator_all_equal():
    comparator = wrap_comparators(lambda a, b: 0, NumberComparator())
    assert comparator.compare(4, 4) == 0


def test_composite_comparator_freezes_on_first_use():
    comparator = CompositeComparator()
    comparator.add_comparator(lambda a, b: 0)
    assert comparator.state is CompositeState.BUILDING
    assert comparator.compare(1, 2) == 0
    assert comparator.state is CompositeState.FROZEN

    comparator.add_comparator(lambda a, b: 5)
    assert len(comparator.comparators) == 1
    assert comparator.compare(1, 2) == 0


def test_composite_comparator_frozen_even_when_empty():
    comparator = CompositeComparator()
    with pytest.raises(ValueError):
        comparator.compare(1, 2)
    comparator.add_comparator(NumberComparator())
    with pytest.raises(ValueError):
        comparator.compare(1, 2)


def test_composite_comparator_logs_ignored_add(caplog):
    caplog.set_level(logging.DEBUG, logger="ordercompy.comparator.composite")
    comparator = wrap_comparators(NumberComparator())
    comparator.compare(1, 2)
    comparator.add_comparator(StringComparator())
    assert "ignoring" in caplog.text


def test_composite_comparator_invalid_argument():
    comparator = CompositeComparator()
    with pytest.raises(ValueError, match="argument is not a function"):
        comparator.add_comparator(42)


def test_wrap_comparators_skips_none():
    comparator = wrap_comparators(None, NumberComparator(), None)
    assert len(comparator.comparators) == 1
    assert comparator.compare(3, 5) == -2


def test_wrap_comparators_multi_key_sort(people):
    comparator = wrap_comparators(by_last, by_first, by_id)
    result = sorted(people, key=cmp_to_key(comparator))
    assert [(p.last, p.first, p.id) for p in result] == [
        ("Brown", "Zoe", 5),
        ("Doe", "John", 1),
        ("Doe", "John", 7),
        ("Smith", "Adam", 2),
        ("Smith", "Jane", 3),
    ]


def test_wrap_comparators_normalizes_predicates():
    comparator = wrap_comparators(lambda a, b: a % 2 == b % 2, NumberComparator())
    assert comparator.compare(2, 4) == -2
    assert comparator.compare(2, 3) == 1


def test_composite_comparator_decimal_results():
    comparator = wrap_comparators(NumberComparator())
    assert comparator.compare(Decimal("1"), Decimal("2")) < 0
    assert comparator.compare(Decimal("2"), Decimal("1")) > 0
    assert comparator.compare(Decimal("2"), Decimal("2")) == 0
    values = [Decimal("2"), Decimal("3"), Decimal("1")]
    assert sorted(values, key=cmp_to_key(comparator)) == [
        Decimal("1"),
        Decimal("2"),
        Decimal("3"),
    ]
