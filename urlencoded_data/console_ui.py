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
from shutil import get_terminal_size
from typing import List

from urlencoded_data import debug
from urlencoded_data.codec import Pair
from .console_color import *

EMPTY_MARKER = '(empty)'


def print_pairs(pairs: List[Pair], do_color):
  """
  Print one pair per line with the keys in a left aligned column.
  Returns the number of lines and columns printed.
  """
  if len(pairs) == 0:
    return 0, 0
  reported_terminal_column_size = get_terminal_size().columns
  if reported_terminal_column_size == 0:
    # Fall back to a default value
    reported_terminal_column_size = 80
  terminal_column_size = reported_terminal_column_size - 1
  max_actual_key_width = max([len(key or EMPTY_MARKER) for key, _ in pairs])
  key_width = max(1, min(max_actual_key_width, int(terminal_column_size / 2)))
  value_width = max(1, terminal_column_size - key_width - 1)
  debug.get('console').debug('Key column %d, value column %d',
                             key_width, value_width)

  def cell(text, width, color):
    if text == '':
      text = EMPTY_MARKER
      color = ANSI_FG_BRIGHT_BLACK
    # Truncate long texts, then pad short ones
    text = text[0:width]
    padded = text.ljust(width)
    if do_color:
      return color + text + ANSI_RESET + padded[len(text):]
    return padded

  actual_total_width = 0
  for key, value in pairs:
    line = cell(key, key_width, ANSI_FG_CYAN) + ' ' + \
           cell(value, value_width, '').rstrip()
    actual_total_width = max(actual_total_width,
                             key_width + 1 + min(value_width,
                                                 len(value or EMPTY_MARKER)))
    print(line)
  return len(pairs), actual_total_width
