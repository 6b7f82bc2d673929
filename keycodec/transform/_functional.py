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

"""Value transformer wrapping a pair of plain functions."""

from typing import Any, Callable, Generic, TypeVar

from keycodec.transform._api import Transformable


__all__ = [
    "ValueTransformer",
]


AppT = TypeVar("AppT")
WireT = TypeVar("WireT")


class ValueTransformer(Transformable[AppT, WireT], Generic[AppT, WireT]):
    """Transformable defined by a pair of stateless functions.

    Usage:
    ```
    >>> cents = ValueTransformer(int, encode=lambda x: round(x * 100),
    ...                          decode=lambda x: x / 100)
    >>> encoder.encode(12.5, "price", using=cents)  # {"price": 1250}
    ```
    """

    def __init__(
        self,
        source_type: Any,
        encode: Callable[[AppT], WireT],
        decode: Callable[[WireT], AppT],
    ) -> None:
        """Instantiate the transformer.

        Parameters
        ----------
        source_type: type or typing generic
            On-the-wire type of encoded values, which raw values are
            decoded as prior to being passed to `decode`.
        encode: func(app_value) -> wire_value
            Function converting app-side values into encodable ones.
        decode: func(wire_value) -> app_value
            Function converting decoded values into app-side ones.
        """
        self.decode_source_type = source_type
        self._encode = encode
        self._decode = decode

    def transform_to_encodable(self, value: AppT) -> WireT:
        return self._encode(value)

    def transform_from_decodable(self, value: WireT) -> AppT:
        return self._decode(value)
