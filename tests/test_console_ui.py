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
import io
import os
import unittest

from mock import patch

from urlencoded_data.console_color import ANSI_FG_BRIGHT_BLACK, ANSI_FG_CYAN, \
  ANSI_RESET
from urlencoded_data.console_ui import print_pairs


def render(pairs, columns=80, do_color=False):
  out = io.StringIO()
  with patch('sys.stdout', out), \
       patch('urlencoded_data.console_ui.get_terminal_size',
             return_value=os.terminal_size((columns, 24))):
    size = print_pairs(pairs, do_color)
  return size, out.getvalue()


class PrintPairsTest(unittest.TestCase):
  def test_empty(self):
    self.assertEqual(((0, 0), ''), render([]))

  def test_aligned_columns(self):
    size, out = render([('a', '1'), ('long', 'x'), ('', 'no key')])
    self.assertEqual('a       1\n'
                     'long    x\n'
                     '(empty) no key\n', out)
    self.assertEqual((3, 14), size)

  def test_truncates_to_terminal_width(self):
    size, out = render([('k' * 30, 'v' * 30)], columns=21)
    self.assertEqual('k' * 10 + ' ' + 'v' * 9 + '\n', out)
    self.assertEqual((1, 20), size)

  def test_zero_width_terminal_falls_back(self):
    size, out = render([('a', 'v' * 100)], columns=0)
    self.assertEqual('a ' + 'v' * 77 + '\n', out)

  def test_color(self):
    _, out = render([('a', ''), ('b', '2')], do_color=True)
    lines = out.splitlines()
    self.assertEqual(ANSI_FG_CYAN + 'a' + ANSI_RESET + ' ' +
                     ANSI_FG_BRIGHT_BLACK + '(empty)' + ANSI_RESET, lines[0])
    self.assertEqual(ANSI_FG_CYAN + 'b' + ANSI_RESET + ' 2' + ANSI_RESET,
                     lines[1])


if __name__ == '__main__':
  unittest.main()
