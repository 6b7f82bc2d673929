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

"""Whole-value encoding and decoding shortcuts."""

from typing import Any, Optional, Union

from keycodec.engines._api import AnyDecoder, AnyEncoder
from keycodec.engines._json import JSONDecoder, JSONEncoder


__all__ = [
    "decoded",
    "encoded",
]


def encoded(
    value: Any,
    using: Optional[AnyEncoder] = None,
) -> bytes:
    """Encode a value into bytes, by default as a JSON document.

    Parameters
    ----------
    value: any
        Value to encode.
    using: AnyEncoder or None, default=None
        Engine to use. If None, use a default-parametrized `JSONEncoder`.

    Raises
    ------
    EncodingError:
        If the value cannot be encoded.
    TransformError:
        If a value transformer fails while encoding the value.
    """
    if using is None:
        using = JSONEncoder()
    return using.encode(value)


def decoded(
    data: Union[bytes, str],
    as_type: Any = Any,
    using: Optional[AnyDecoder] = None,
) -> Any:
    """Decode a value of a given type from bytes, by default as JSON.

    Parameters
    ----------
    data: bytes or str
        Serialized data to decode.
    as_type: type or typing generic, default=Any
        Type of the value to decode.
    using: AnyDecoder or None, default=None
        Engine to use. If None, use a default-parametrized `JSONDecoder`.

    Raises
    ------
    DecodingError:
        If the data is invalid or cannot be decoded as `as_type`.
    TransformError:
        If a value transformer fails while decoding the value.
    """
    if using is None:
        using = JSONDecoder()
    return using.decode(as_type, data)
