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

"""Coding keys: string-comparable keys addressing keyed containers."""

import enum
from typing import Any, Optional, Sequence, Union


__all__ = [
    "AnyCodingKey",
    "CodingKey",
    "CodingKeys",
    "KeyLike",
    "as_coding_key",
    "format_coding_path",
]


class CodingKey:
    """Base class for keys used to address values in keyed containers.

    Subclasses must expose a `string_value` str attribute (or property),
    and may expose an `int_value` one. Two coding keys are equal if and
    only if their `string_value` are equal, whatever their actual type,
    so that a raw-string key and a structured key may address the same
    value interchangeably.
    """

    string_value: str
    int_value: Optional[int] = None

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, CodingKey):
            return self.string_value == other.string_value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.string_value)

    def __str__(self) -> str:
        return self.string_value


class AnyCodingKey(CodingKey):
    """Ad-hoc coding key, wrapping a raw string (or sequence index)."""

    __slots__ = ("string_value", "int_value")

    def __init__(
        self,
        string_value: str,
        int_value: Optional[int] = None,
    ) -> None:
        if not isinstance(string_value, str):
            raise TypeError(
                f"AnyCodingKey expects a str value, not {type(string_value)}."
            )
        self.string_value = string_value
        self.int_value = int_value

    @classmethod
    def from_int(cls, index: int) -> "AnyCodingKey":
        """Return a key designating a sequence position."""
        return cls(str(index), index)

    def __repr__(self) -> str:
        if self.int_value is None:
            return f"AnyCodingKey({self.string_value!r})"
        return f"AnyCodingKey.from_int({self.int_value})"


class CodingKeys(CodingKey, enum.Enum):
    """Enum-based structured coding keys.

    Usage:
    ```
    >>> class Keys(CodingKeys):
    ...     NAME = "name"
    ...     CREATED = "created_at"
    >>> decoder.decode(Keys.NAME, str)
    ```

    A member's `string_value` is its value when it is a str, and its
    name otherwise (e.g. when using `enum.auto()`). Its `int_value` is
    its value when it is an int.
    """

    @property
    def string_value(self) -> str:  # type: ignore[override]
        """String representation of this key."""
        if isinstance(self.value, str):
            return self.value
        return self.name

    @property
    def int_value(self) -> Optional[int]:  # type: ignore[override]
        """Integer representation of this key, if any."""
        if isinstance(self.value, int) and not isinstance(self.value, bool):
            return self.value
        return None

    def __eq__(self, other: Any) -> bool:
        return CodingKey.__eq__(self, other)

    def __hash__(self) -> int:
        return CodingKey.__hash__(self)

    def __str__(self) -> str:
        return CodingKey.__str__(self)


KeyLike = Union[str, CodingKey]


def as_coding_key(key: KeyLike) -> CodingKey:
    """Return a CodingKey from either a raw string or a CodingKey.

    Raw strings are wrapped into an `AnyCodingKey` with the exact same
    string value, so that distinct strings never collide.
    """
    if isinstance(key, CodingKey):
        return key
    if isinstance(key, str):
        return AnyCodingKey(key)
    raise TypeError(
        f"Coding keys must be str or CodingKey instances, not '{type(key)}'."
    )


def format_coding_path(path: Sequence[CodingKey]) -> str:
    """Render a coding path as a human-readable string.

    e.g. `[AnyCodingKey("items"), AnyCodingKey.from_int(2)]` is
    rendered as `"items[2]"`.
    """
    parts = []  # type: list
    for key in path:
        if key.int_value is not None and key.string_value == str(
            key.int_value
        ):
            parts.append(f"[{key.int_value}]")
        elif parts:
            parts.append(f".{key.string_value}")
        else:
            parts.append(key.string_value)
    return "".join(parts)
