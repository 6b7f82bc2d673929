# coding: utf-8

# Copyright 2023 Inria (Institut National de Recherche en Informatique
# et Automatique)
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Value transformers, plugged into keyed coding operations.

Value transformers convert app-side values into encodable wire-side
ones, and back. They are passed as `using` argument to the methods of
`keycodec.coding.Encoder` and `keycodec.coding.Decoder`.

API
---

* [EncodeTransformable][keycodec.transform.EncodeTransformable]:
    Abstract converter from a source value to an encodable one.
* [DecodeTransformable][keycodec.transform.DecodeTransformable]:
    Abstract converter from a decoded value to a target one.
* [Transformable][keycodec.transform.Transformable]:
    Abstract bidirectional converter.
* [ValueTransformer][keycodec.transform.ValueTransformer]:
    Transformable wrapping a pair of plain functions.

Format adapters
---------------

* [Formatter][keycodec.transform.Formatter]:
    Abstract Transformable to and from strings, via `format`/`parse`.
* [DateFormatter][keycodec.transform.DateFormatter]:
    Configurable, strftime-pattern-based datetime formatter.
* [ISO8601DateFormatter][keycodec.transform.ISO8601DateFormatter]:
    Fixed ISO-8601 UTC timestamp formatter.
"""

from ._api import (
    DecodeTransformable,
    EncodeTransformable,
    Transformable,
)
from ._functional import ValueTransformer
from ._dates import (
    DateFormatter,
    Formatter,
    ISO8601DateFormatter,
)
