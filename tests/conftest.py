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

"""Shared fixtures for the comparator tests."""

from collections import namedtuple

import pytest

Person = namedtuple("Person", ["last", "first", "id"])


@pytest.fixture
def people():
    return [
        Person("Smith", "Jane", 3),
        Person("Doe", "John", 7),
        Person("Smith", "Adam", 2),
        Person("Doe", "John", 1),
        Person("Brown", "Zoe", 5),
    ]
