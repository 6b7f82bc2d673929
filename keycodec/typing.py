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

"""Type hinting utils, defined and exposed for code readability purposes."""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from typing_extensions import Self  # future: import from typing (Py>=3.11)

if TYPE_CHECKING:
    from keycodec.coding import Decoder, Encoder


__all__ = [
    "SupportsDecode",
    "SupportsEncode",
]


@runtime_checkable
class SupportsEncode(Protocol):
    """Protocol for objects that know how to encode themselves."""

    def encode_to(self, encoder: "Encoder") -> None:
        """Encode this object into the given encoder."""


@runtime_checkable
class SupportsDecode(Protocol):
    """Protocol for types that know how to decode their instances."""

    @classmethod
    def decode_from(cls, decoder: "Decoder") -> Self:
        """Instantiate an object from the given decoder."""
