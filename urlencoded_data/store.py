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

# To be able to use the enclosing class type in method type hints
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional

from urlencoded_data import debug
from urlencoded_data.codec import Pair, decode, encode
from urlencoded_data.list_dict import StableListDict
from urlencoded_data.segment import split_segment


def _pairs_of(items) -> List[Pair]:
  return [(key, value) for key, values in items for value in values]


@dataclass
class UrlEncodedData:
  """
  Decoded pairs of a url encoded string, grouped by key.

  The url prefix in front of the data (e.g. 'https://host/path?') is kept
  so that it can be put back when serializing. Three orders are offered
  for reading and serializing:

  * unordered: whatever order the underlying dict has, the cheapest
  * original: keys in the order they were first seen when parsing, keys
    added later come last
  * sorted: keys in ascending order

  In every order the values of one key keep their insertion order.

  The mutating methods change the store in place and return it so that
  they can be chained:

    UrlEncodedData.from_text(url).set_one('q', 'x').delete('ei').done()
  """
  prefix: str = ''
  data_segment: str = ''
  entries: StableListDict = field(default_factory=StableListDict)

  @staticmethod
  def from_text(text: str, strict: bool = False) -> UrlEncodedData:
    prefix, data_segment = split_segment(text)
    entries = StableListDict()
    for key, value in decode(data_segment, strict):
      entries.add(key, value)
    debug.get('store').debug('Parsed %d keys from %r', len(entries), text)
    return UrlEncodedData(prefix, data_segment, entries)

  # Reading

  def pairs(self) -> List[Pair]:
    return _pairs_of(self.entries.items())

  def pairs_original_order(self) -> List[Pair]:
    return _pairs_of(self.entries.items_in_arrival_order())

  def pairs_sorted_order(self) -> List[Pair]:
    return _pairs_of(self.entries.items_in_sorted_order())

  def count(self) -> int:
    """
    Total number of pairs.
    """
    return sum(len(values) for _, values in self.entries.items())

  def key_count(self) -> int:
    return len(self.entries)

  def keys(self) -> List[str]:
    return [key for key, _ in self.entries.items()]

  def keys_original_order(self) -> List[str]:
    return [key for key, _ in self.entries.items_in_arrival_order()]

  def keys_sorted_order(self) -> List[str]:
    return [key for key, _ in self.entries.items_in_sorted_order()]

  def values(self, key: str) -> Optional[List[str]]:
    """
    All values of key in insertion order, or None if the key is absent.
    """
    values = self.entries.get(key)
    if values is None:
      return None
    return list(values)

  def first_value(self, key: str) -> Optional[str]:
    values = self.entries.get(key)
    return values[0] if values else None

  def last_value(self, key: str) -> Optional[str]:
    values = self.entries.get(key)
    return values[-1] if values else None

  def as_multi_map(self) -> Dict[str, List[str]]:
    return {key: list(values) for key, values in self.entries.items()}

  def as_first_value_map(self) -> Dict[str, str]:
    return {key: values[0] for key, values in self.entries.items() if values}

  def as_last_value_map(self) -> Dict[str, str]:
    return {key: values[-1] for key, values in self.entries.items() if values}

  # Mutating

  def set(self, key: str, values: Iterable[str]) -> UrlEncodedData:
    """
    Replace all values of key. A key that was not parsed from the original
    string is placed after the original keys in the original order.
    """
    if isinstance(values, str):
      raise TypeError('set() takes a sequence of values, use set_one() '
                      'for the single value {!r}'.format(values))
    self.entries.replace(key, values)
    debug.get('store').debug('Set %r to %r', key, self.entries.get(key))
    return self

  def set_one(self, key: str, value: str) -> UrlEncodedData:
    return self.set(key, [value])

  def push(self, key: str, value: str) -> UrlEncodedData:
    self.entries.append(key, value)
    debug.get('store').debug('Pushed %r to %r', value, key)
    return self

  def delete(self, key: str) -> UrlEncodedData:
    self.entries.remove(key)
    debug.get('store').debug('Deleted %r', key)
    return self

  def clear(self) -> UrlEncodedData:
    # The arrival order is kept, so keys of the original string that are
    # added again return to their original position.
    self.entries.clear()
    debug.get('store').debug('Cleared all keys')
    return self

  def done(self) -> UrlEncodedData:
    return self

  def copy(self) -> UrlEncodedData:
    return UrlEncodedData(self.prefix, self.data_segment, self.entries.copy())

  # Serializing

  def to_string(self) -> str:
    return self.prefix + encode(self.pairs())

  def to_string_original_order(self) -> str:
    return self.prefix + encode(self.pairs_original_order())

  def to_string_sorted_order(self) -> str:
    return self.prefix + encode(self.pairs_sorted_order())

  def __len__(self):
    return self.count()

  def __contains__(self, key):
    return key in self.entries

  def __iter__(self) -> Iterator[Pair]:
    return iter(self.pairs())

  def __str__(self):
    return self.to_string()
