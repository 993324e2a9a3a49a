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
import os
import tempfile
import unittest

from mock import patch

from urlencoded_data.store import UrlEncodedData
from urlencoded_data.web_ui import make_pairs_page, open_pairs_page


class MakePairsPageTest(unittest.TestCase):
  def test_rows_in_requested_order(self):
    data = UrlEncodedData.from_text('https://h/?b=2&a=1')
    page = make_pairs_page(data, 'sorted')
    self.assertTrue(page.startswith('<!DOCTYPE html>'))
    self.assertLess(page.index('<td class="key">a</td>'),
                    page.index('<td class="key">b</td>'))
    self.assertIn('<p class="prefix">https://h/?</p>', page)
    self.assertIn('<pre class="encoded">https://h/?a=1&amp;b=2</pre>', page)

  def test_original_order_is_default(self):
    page = make_pairs_page(UrlEncodedData.from_text('b=2&a=1'))
    self.assertLess(page.index('<td class="key">b</td>'),
                    page.index('<td class="key">a</td>'))
    self.assertNotIn('class="prefix"', page)

  def test_text_is_escaped(self):
    page = make_pairs_page(UrlEncodedData.from_text('x=%3Cb%3E%26'))
    self.assertIn('<td class="value">&lt;b&gt;&amp;</td>', page)

  def test_empty_key_and_value(self):
    page = make_pairs_page(UrlEncodedData.from_text('=v&k'))
    self.assertEqual(2, page.count('<span class="empty">(empty)</span>'))


class OpenPairsPageTest(unittest.TestCase):
  @patch('urlencoded_data.web_ui.webbrowser.open')
  def test_writes_and_opens_page(self, browser_open):
    data = UrlEncodedData.from_text('a=%E4%B8%96')
    with tempfile.TemporaryDirectory() as tmp:
      path = open_pairs_page(data, filename=os.path.join(tmp, 'page.html'))
      with open(path, encoding='utf-8') as f:
        self.assertIn('<td class="value">世</td>', f.read())
    browser_open.assert_called_once_with(path.as_uri())


if __name__ == '__main__':
  unittest.main()
