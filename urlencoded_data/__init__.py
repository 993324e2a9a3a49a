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
from urlencoded_data.codec import PairScanner, decode, encode, quote_token, \
  unquote_token
from urlencoded_data.errors import MalformedEscapeError, UrlEncodedDataError
from urlencoded_data.segment import split_segment
from urlencoded_data.store import UrlEncodedData
