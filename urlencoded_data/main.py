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
import argparse
import os
import sys

from urlencoded_data.console_ui import print_pairs
from urlencoded_data.errors import UrlEncodedDataError
from urlencoded_data.store import UrlEncodedData
from urlencoded_data.web_ui import ORDERS, open_pairs_page
from . import debug


def key_value(arg):
  key, sep, value = arg.partition('=')
  if not sep:
    raise argparse.ArgumentTypeError("expected KEY=VALUE, got '{}'".format(arg))
  return key, value


class EditAction(argparse.Action):
  """
  Collect edits of all kinds into one list to keep the command line order.
  """

  def __call__(self, parser, namespace, values, option_string=None):
    edits = getattr(namespace, self.dest, None) or []
    edits.append((self.const, values))
    setattr(namespace, self.dest, edits)


def apply_edits(data: UrlEncodedData, edits, clear=False) -> UrlEncodedData:
  if clear:
    data.clear()
  for kind, arg in edits or []:
    if kind == 'set':
      data.set_one(*arg)
    elif kind == 'push':
      data.push(*arg)
    elif kind == 'delete':
      data.delete(arg)
    debug.get('console').debug('Applied %s %r', kind, arg)
  return data.done()


def serialize(data: UrlEncodedData, order):
  if order == 'original':
    return data.to_string_original_order()
  if order == 'sorted':
    return data.to_string_sorted_order()
  return data.to_string()


def main():
  if 'URLENCODED_DATA_DEBUG' in os.environ:
    debug_parser = debug.parse_args(extendable=True)
    parent_parsers = [debug_parser]
  else:
    parent_parsers = []

  argparser = argparse.ArgumentParser(prog='urlencoded-data',
                                      description='Read and edit the key/value pairs of a url query string or form body',
                                      parents=parent_parsers)
  argparser.add_argument('text', metavar='TEXT', nargs='?',
                         help='A url or url encoded data. Read from standard input if omitted.')
  argparser.add_argument('-o', '--order', choices=list(ORDERS),
                         default='original',
                         help='Order of the printed pairs: %(choices)s. The default is %(default)s.')
  editarg = argparser.add_argument_group('edit',
                                         'Edit the pairs before printing. Edits are applied in the given order.')
  editarg.add_argument('-s', '--set', metavar='KEY=VALUE', type=key_value,
                       action=EditAction, const='set', dest='edits',
                       help='Replace all values of KEY with VALUE.')
  editarg.add_argument('-a', '--push', metavar='KEY=VALUE', type=key_value,
                       action=EditAction, const='push', dest='edits',
                       help='Append VALUE to the values of KEY.')
  editarg.add_argument('-d', '--delete', metavar='KEY',
                       action=EditAction, const='delete', dest='edits',
                       help='Remove KEY and all its values.')
  editarg.add_argument('--clear', action='store_true', required=False,
                       help='Remove all pairs before the other edits.')
  argparser.add_argument('--strict', action='store_true', required=False,
                         help='Fail on malformed percent escapes instead of passing them through.')
  outformatarg = argparser.add_mutually_exclusive_group(required=False)
  outformatarg.add_argument('-g', '--get', metavar='KEY', action='store',
                            help='Print the values of KEY, one per line.')
  outformatarg.add_argument('-p', '--pairs', action='store_true', required=False,
                            help='Print a table of the pairs instead of the encoded string.')
  outformatarg.add_argument('-w', '--web', action='store_true', required=False,
                            help='Generate and open an HTML document with the pairs.')
  argparser.add_argument('--no-color', action='store_true', required=False,
                         help='Disable color coding of the output.')

  args = argparser.parse_args()
  text = args.text
  if text is None:
    text = sys.stdin.read().rstrip('\n')
  debug.get('console').debug(args)

  try:
    data = UrlEncodedData.from_text(text, strict=args.strict)
  except UrlEncodedDataError as e:
    print('Error: {}'.format(e), file=sys.stderr)
    return 1
  data = apply_edits(data, args.edits, args.clear)

  if args.get is not None:
    values = data.values(args.get)
    if values is None:
      return 1
    for value in values:
      print(value)
  elif args.pairs:
    print_pairs(ORDERS[args.order](data), do_color=not args.no_color)
  elif args.web:
    path = open_pairs_page(data, args.order)
    print('Wrote {}'.format(path))
  else:
    print(serialize(data, args.order))
  return 0


if __name__ == '__main__':
  sys.exit(main())
