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

"""Keyed coding facade: typed, key-addressed encoding and decoding.

This submodule provides with the `Encoder` and `Decoder` classes that
convert values to and from trees of plain python data (dicts, lists,
strings, numbers, booleans and None), which engines (see
`keycodec.engines`) then serialize to and from bytes.

Facade
------

* [Encoder][keycodec.coding.Encoder]:
    Encoder exposing `encode`, `encode_if_present` and
    `encode_single_value`, optionally using value transformers.
* [Decoder][keycodec.coding.Decoder]:
    Decoder exposing `decode`, `decode_if_present`,
    `decode_single_value` and the lossy `decode_array_safely`.
* [Codable][keycodec.coding.Codable]:
    Base class for self-coding objects, automated for dataclasses.
* [coding_field][keycodec.coding.coding_field]:
    Declare a dataclass field with a custom key and/or transformer.

Containers
----------

* [KeyedEncodingContainer][keycodec.coding.KeyedEncodingContainer]
  and [KeyedDecodingContainer][keycodec.coding.KeyedDecodingContainer]:
    Views over dict nodes, addressed by key.
* [UnkeyedEncodingContainer][keycodec.coding.UnkeyedEncodingContainer]
  and [UnkeyedDecodingContainer][keycodec.coding.UnkeyedDecodingContainer]:
    Views over list nodes, addressed sequentially.
* [SingleValueEncodingContainer][keycodec.coding.SingleValueEncodingContainer]
  and [SingleValueDecodingContainer][keycodec.coding.SingleValueDecodingContainer]:
    Views over a whole encoder's or decoder's content.

Keys
----

* [CodingKey][keycodec.coding.CodingKey]:
    Base class for keys, compared by their string value.
* [AnyCodingKey][keycodec.coding.AnyCodingKey]:
    Ad-hoc key wrapping a raw string or a sequence index.
* [CodingKeys][keycodec.coding.CodingKeys]:
    Enum base class to declare structured keys.
* [as_coding_key][keycodec.coding.as_coding_key]:
    Normalize a str or CodingKey into a CodingKey.

Errors
------

* [CodingError][keycodec.coding.CodingError]:
    Base exception, carrying a coding path and debug description.
* [EncodingError][keycodec.coding.EncodingError]:
    Value could not be encoded, or output could not be produced.
* [DecodingError][keycodec.coding.DecodingError]:
    Base exception for decoding failures.
* [KeyNotFoundError][keycodec.coding.KeyNotFoundError]:
    Required key is absent (also a KeyError).
* [TypeMismatchError][keycodec.coding.TypeMismatchError]:
    Value has an unexpected shape (also a TypeError).
* [DataCorruptedError][keycodec.coding.DataCorruptedError]:
    Value has the right shape but fails further parsing (also a ValueError).
* [TransformError][keycodec.coding.TransformError]:
    Value transformer raised an exception.
* [UnsupportedTypeError][keycodec.coding.UnsupportedTypeError]:
    Decoding target type is not supported (a TypeError, not a CodingError).
"""

from ._keys import (
    AnyCodingKey,
    CodingKey,
    CodingKeys,
    KeyLike,
    as_coding_key,
    format_coding_path,
)
from ._errors import (
    CodingError,
    DataCorruptedError,
    DecodingError,
    EncodingError,
    KeyNotFoundError,
    TransformError,
    TypeMismatchError,
    UnsupportedTypeError,
)
from ._encoder import (
    Encoder,
    KeyedEncodingContainer,
    SingleValueEncodingContainer,
    UnkeyedEncodingContainer,
)
from ._decoder import (
    Decoder,
    KeyedDecodingContainer,
    SingleValueDecodingContainer,
    UnkeyedDecodingContainer,
)
from ._codable import (
    Codable,
    coding_field,
)
