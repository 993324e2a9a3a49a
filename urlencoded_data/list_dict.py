#!/usr/bin/env python
# encoding: utf-8
# Copyright 2016-2021 Alexander Mollberg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
from dataclasses import dataclass, field


@dataclass
class StableListDict:
  """
  A dictionary of appendable lists that can return the keys in the same
  order as they were first added.

  Only add() records keys in the arrival order. Keys introduced by
  append() or replace() are returned after all recorded keys, and
  removing a key leaves its recorded position in place.
  """
  kv_map: dict = field(default_factory=lambda: {})
  arrival_order: list = field(default_factory=lambda: [])

  def __post_init__(self):
    # Membership index of arrival_order
    self._recorded = set(self.arrival_order)

  def add(self, key, value):
    if key not in self._recorded:
      self._recorded.add(key)
      self.arrival_order.append(key)
    self.append(key, value)

  def append(self, key, value):
    if key not in self.kv_map:
      self.kv_map[key] = []
    self.kv_map[key].append(value)

  def replace(self, key, values):
    self.kv_map[key] = list(values)

  def remove(self, key):
    self.kv_map.pop(key, None)

  def clear(self):
    self.kv_map.clear()

  def get(self, key):
    return self.kv_map.get(key)

  def items(self):
    for key, values in self.kv_map.items():
      yield key, values

  def items_in_arrival_order(self):
    for key in self.arrival_order:
      if key in self.kv_map:
        yield key, self.kv_map[key]
    # Left-over keys that were never recorded
    for key, values in self.kv_map.items():
      if key not in self._recorded:
        yield key, values

  def items_in_sorted_order(self):
    for key in sorted(self.kv_map):
      yield key, self.kv_map[key]

  def copy(self):
    return StableListDict({key: list(values)
                           for key, values in self.kv_map.items()},
                          list(self.arrival_order))

  def __len__(self):
    return len(self.kv_map)

  def __contains__(self, key):
    return key in self.kv_map
