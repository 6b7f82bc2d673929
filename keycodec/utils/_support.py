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

"""Tools to add coding support for non-codable third-party types."""

import base64
import dataclasses
import datetime
import decimal
import uuid
from typing import Any, Callable, Dict, Optional, Type


__all__ = [
    "CodableSupport",
    "add_codable_support",
    "get_codable_support",
]


SUPPORT = {}  # type: Dict[Type[Any], CodableSupport]


@dataclasses.dataclass
class CodableSupport:
    """Dataclass wrapping a default coding scheme for a given type.

    Attributes
    ----------
    cls: type
        Type for which the scheme is defined.
    source_type: type or typing generic
        On-the-wire type produced by `pack` and expected by `unpack`;
        raw values are decoded as this type before being unpacked.
    pack: func(cls) -> source_type
        Function converting `cls` instances into encodable values.
    unpack: func(source_type) -> cls
        Function converting decoded values back into `cls` instances.
    """

    cls: Type[Any]
    source_type: Any
    pack: Callable[[Any], Any]
    unpack: Callable[[Any], Any]

    def register(self, repl: bool = False) -> None:
        """Register this scheme as the default one for `self.cls`.

        Raise a KeyError if a scheme is already registered for the
        type, unless `repl=True`.
        """
        if (self.cls in SUPPORT) and not repl:
            raise KeyError(
                f"Type '{self.cls}' already has a registered coding scheme."
            )
        SUPPORT[self.cls] = self


def add_codable_support(
    cls: Type[Any],
    pack: Callable[[Any], Any],
    unpack: Callable[[Any], Any],
    source_type: Any = Any,
    repl: bool = False,
) -> None:
    """Add or modify default coding support for a non-codable type.

    Registered types may then be passed as values to encode, and as
    `as_type` targets to decode, wherever keycodec accepts them.

    Parameters
    ----------
    cls: type
        Type for which to add (or modify) coding support.
    pack: func(cls) -> any
        Function used to pack objects of type `cls` into an arbitrary
        encodable value or structure.
    unpack: func(any) -> cls
        Function used to unpack objects of type `cls` from the value
        output by the `pack` function.
    source_type: type or typing generic, default=Any
        Type of the values output by `pack`, used to type-check raw
        values prior to calling `unpack`.
    repl: bool, default=False
        Whether to overwrite any existing scheme for type `cls`.
    """
    spec = CodableSupport(cls, source_type, pack, unpack)
    spec.register(repl)


def get_codable_support(cls: Type[Any]) -> Optional[CodableSupport]:
    """Return the coding scheme registered for a type or its nearest parent.

    Return None if neither `cls` nor any of its parent classes has
    a registered scheme.
    """
    for parent in getattr(cls, "__mro__", (cls,)):
        spec = SUPPORT.get(parent)
        if spec is not None:
            return spec
    return None


def _pack_bytes(value: bytes) -> str:
    return base64.b64encode(value).decode("ascii")


def _unpack_bytes(value: str) -> bytes:
    return base64.b64decode(value.encode("ascii"), validate=True)


add_codable_support(bytes, _pack_bytes, _unpack_bytes, str)
add_codable_support(
    datetime.datetime,
    datetime.datetime.isoformat,
    datetime.datetime.fromisoformat,
    str,
)
add_codable_support(
    datetime.date,
    datetime.date.isoformat,
    datetime.date.fromisoformat,
    str,
)
add_codable_support(decimal.Decimal, str, decimal.Decimal, str)
add_codable_support(uuid.UUID, str, uuid.UUID, str)
