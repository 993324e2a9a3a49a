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


class UrlEncodedDataError(ValueError):
  pass


class MalformedEscapeError(UrlEncodedDataError):
  """
  Raised by strict decoding when a token holds a percent escape that is
  not two hex digits or that decodes to invalid UTF-8.
  """

  def __init__(self, token, reason):
    super().__init__("Malformed percent escape in {!r}: {}".format(token, reason))
    self.token = token
    self.reason = reason
