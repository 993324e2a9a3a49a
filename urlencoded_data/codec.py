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
import re
from typing import Iterable, Iterator, Tuple
from urllib.parse import quote_plus, unquote_plus, unquote_to_bytes

from urlencoded_data import debug
from urlencoded_data.errors import MalformedEscapeError
from urlencoded_data.segment import split_segment

Pair = Tuple[str, str]

# A '%' that does not start a two hex digit escape
_MALFORMED_ESCAPE = re.compile('%(?![0-9A-Fa-f]{2})')
# Kept as is in addition to letters, digits and '_.-'
_SAFE = '*'


def unquote_token(token: str, strict: bool = False) -> str:
  """
  Decode a single form-urlencoded token. '+' becomes a space and %XX
  escapes are decoded as UTF-8.

  Without strict, malformed escapes are passed through untouched and
  invalid UTF-8 is replaced with U+FFFD. With strict, both raise
  MalformedEscapeError.
  """
  if not strict:
    return unquote_plus(token)
  if _MALFORMED_ESCAPE.search(token):
    raise MalformedEscapeError(token, "'%' is not followed by two hex digits")
  try:
    return unquote_to_bytes(token.replace('+', ' ')).decode('utf-8')
  except UnicodeDecodeError as e:
    raise MalformedEscapeError(token, 'escapes do not form valid UTF-8') from e


def quote_token(token: str) -> str:
  # quote_plus never escapes '~', the form-urlencoded serializer does
  return quote_plus(token, safe=_SAFE).replace('~', '%7E')


def decode(data_segment: str, strict: bool = False) -> Iterator[Pair]:
  """
  Yield the decoded (key, value) pairs of data_segment in the order they
  appear. Empty entries between '&' separators are skipped.
  """
  log = debug.get('parser')
  for entry in data_segment.split('&'):
    if not entry:
      continue
    key, _, value = entry.partition('=')
    pair = (unquote_token(key, strict), unquote_token(value, strict))
    log.debug('Decoded %r into %r', entry, pair)
    yield pair


def encode(pairs: Iterable[Pair]) -> str:
  """
  Serialize pairs into a form-urlencoded string, keeping their order.
  """
  encoded = '&'.join(quote_token(key) + '=' + quote_token(value)
                     for key, value in pairs)
  debug.get('encoder').debug('Encoded %r', encoded)
  return encoded


class PairScanner:
  """
  Lazy view of the pairs in a string. The url prefix is split off on
  construction, decoding happens on each iteration.
  """

  def __init__(self, text: str, strict: bool = False):
    self.prefix, self.raw = split_segment(text)
    self.strict = strict

  def __iter__(self) -> Iterator[Pair]:
    return decode(self.raw, self.strict)

  def __str__(self):
    return self.raw

  def __repr__(self):
    return 'PairScanner(prefix={!r}, raw={!r})'.format(self.prefix, self.raw)
