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
import logging
import sys

_logging_categories = ["parser", "encoder", "store", "console"]
_root = logging.getLogger('urlencoded_data')
_root.addHandler(logging.NullHandler())
for cat in _logging_categories:
  _root.getChild(cat).setLevel(logging.CRITICAL)


def get(category):
  return _root.getChild(category)


def _ensure_handler():
  # A stderr handler, added once when any category is enabled
  if not any(isinstance(h, logging.StreamHandler) for h in _root.handlers):
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter('%(levelname)s:%(name)s:%(message)s'))
    _root.addHandler(handler)


def set_logging_categories(*categories):
  if not categories:
    return
  # Resolve 'all' into all logging categories
  if categories[0] == 'all':
    categories = _logging_categories
  _ensure_handler()
  for cat in categories:
    if cat == 'all':
      continue
    if cat not in _logging_categories:
      _root.warning("Unknown logging category '%s'", cat)
      continue
    get(cat).setLevel(logging.DEBUG)


def parse_args(extendable=False):
  p = argparse.ArgumentParser(add_help=not extendable)
  p.add_argument("--log", nargs="+", default=[],
                 choices=['all'] + _logging_categories,
                 metavar="CATEGORY",
                 help="Which categories of log messages to send to standard error: %(choices)s")
  args, unknown_args = p.parse_known_args()
  set_logging_categories(*args.log)
  # Leave only the unknown args for the main parser
  sys.argv[1:] = unknown_args
  if extendable:
    return p
  return None
