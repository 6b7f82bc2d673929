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

"""Exceptions raised when encoding or decoding values fails."""

from typing import Any, Optional, Sequence

from keycodec.coding._keys import CodingKey, format_coding_path


__all__ = [
    "CodingError",
    "DataCorruptedError",
    "DecodingError",
    "EncodingError",
    "KeyNotFoundError",
    "TransformError",
    "TypeMismatchError",
    "UnsupportedTypeError",
    "describe_shape",
    "describe_type",
]


def describe_shape(value: Any) -> str:
    """Return a short description of the shape of a raw value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "a boolean"
    if isinstance(value, (int, float)):
        return "a number"
    if isinstance(value, str):
        return "a string"
    if isinstance(value, dict):
        return "a dictionary"
    if isinstance(value, list):
        return "an array"
    return f"'{type(value).__name__}' data"


def describe_type(as_type: Any) -> str:
    """Return a short description of a (possibly generic) type hint."""
    if isinstance(as_type, type) and not getattr(as_type, "__args__", None):
        return as_type.__name__
    return str(as_type).replace("typing.", "")


class CodingError(Exception):
    """Base exception for all keycodec encoding and decoding failures.

    Attributes
    ----------
    coding_path: list[CodingKey]
        Path of keys leading to the value at which the failure occurred.
    debug_description: str
        Human-readable description of the failure.
    """

    def __init__(
        self,
        coding_path: Sequence[CodingKey],
        debug_description: str,
    ) -> None:
        super().__init__(debug_description)
        self.coding_path = list(coding_path)
        self.debug_description = debug_description

    def __str__(self) -> str:
        path = format_coding_path(self.coding_path)
        if path:
            return f"{self.debug_description} (coding path: '{path}')"
        return self.debug_description


class EncodingError(CodingError):
    """Exception raised when a value cannot be encoded.

    This covers both values that the encoder does not support and
    failures of the output engine (e.g. non-finite floats in JSON).
    """

    def __init__(
        self,
        value: Any,
        coding_path: Sequence[CodingKey],
        debug_description: str,
    ) -> None:
        super().__init__(coding_path, debug_description)
        self.value = value


class DecodingError(CodingError):
    """Base exception for decoding failures, incl. unparsable input data."""


class KeyNotFoundError(DecodingError, KeyError):
    """Exception raised when a required key is absent from a container."""

    def __init__(
        self,
        key: CodingKey,
        coding_path: Sequence[CodingKey],
        debug_description: Optional[str] = None,
    ) -> None:
        if debug_description is None:
            debug_description = (
                f"No value associated with key '{key.string_value}'."
            )
        super().__init__(coding_path, debug_description)
        self.key = key


class TypeMismatchError(DecodingError, TypeError):
    """Exception raised when a value does not have the expected shape."""

    def __init__(
        self,
        expected: Any,
        coding_path: Sequence[CodingKey],
        debug_description: str,
    ) -> None:
        super().__init__(coding_path, debug_description)
        self.expected = expected


class DataCorruptedError(DecodingError, ValueError):
    """Exception raised when a well-shaped value fails secondary parsing.

    e.g. a string that does not match the expected date format, or
    input bytes that are not a valid document for the engine at hand.
    """


class TransformError(CodingError):
    """Exception wrapping a failure raised by a value transformer.

    Attributes
    ----------
    key: CodingKey or None
        Key under which the transformed value was being coded.
    underlying: Exception
        Exception raised by the transformer (also set as `__cause__`).
    """

    def __init__(
        self,
        key: Optional[CodingKey],
        underlying: BaseException,
        coding_path: Sequence[CodingKey],
    ) -> None:
        super().__init__(
            coding_path,
            f"Value transformer failed: {type(underlying).__name__}: "
            f"{underlying}",
        )
        self.key = key
        self.underlying = underlying


class UnsupportedTypeError(TypeError):
    """Exception raised when asked to decode a type keycodec cannot handle.

    This denotes a programming error rather than invalid data, hence it
    is not a `CodingError`, and is never swallowed by lossy decoding.
    """
