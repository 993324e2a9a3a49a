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
import webbrowser
from pathlib import Path

from yattag import Doc

from urlencoded_data import debug
from urlencoded_data.codec import encode
from urlencoded_data.store import UrlEncodedData

ORDERS = {
  'original': UrlEncodedData.pairs_original_order,
  'sorted': UrlEncodedData.pairs_sorted_order,
  'unordered': UrlEncodedData.pairs,
}


def make_pairs_page(data: UrlEncodedData, order='original'):
  pairs = ORDERS[order](data)
  doc, tag, text = Doc().tagtext()

  def text_or_empty(s):
    if s == '':
      with tag('span', klass='empty'):
        text('(empty)')
    else:
      text(s)

  doc.asis('<!DOCTYPE html>')
  with tag('html'):
    with tag('head'):
      doc.stag('meta', charset='utf-8')
      with tag('title'):
        text('Url encoded data')
      with tag('style', type='text/css'):
        doc.asis(css())
    with tag('body'):
      if data.prefix:
        with tag('p', klass='prefix'):
          text(data.prefix)
      with tag('table'):
        with tag('tr'):
          with tag('th'):
            text('Key')
          with tag('th'):
            text('Value')
        for key, value in pairs:
          with tag('tr'):
            with tag('td', klass='key'):
              text_or_empty(key)
            with tag('td', klass='value'):
              text_or_empty(value)
      with tag('pre', klass='encoded'):
        text(data.prefix + encode(pairs))
  return doc.getvalue()


def open_pairs_page(data: UrlEncodedData, order='original',
                    filename='urlencoded_data.html'):
  path = Path(filename).resolve()
  with open(path, 'w', encoding='utf-8') as f:
    f.write(make_pairs_page(data, order))
  debug.get('console').debug('Wrote %s', path)
  webbrowser.open(path.as_uri())
  return path


def css():
  return \
    """
    body {
      font-family: monospace;
    }
    table {
      border-collapse: collapse;
    }
    th, td {
      border: 1px solid #ccc;
      padding: 2px 8px;
      text-align: left;
      vertical-align: top;
    }
    td.key {
      color: #0086b3;
    }
    .empty {
      color: #999;
      font-style: italic;
    }
    """
