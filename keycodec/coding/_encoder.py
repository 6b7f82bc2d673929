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

"""Encoder and encoding containers, turning values into plain data trees."""

import enum
from typing import Any, Dict, List, Optional, Sequence, Tuple, Type

from keycodec.coding._errors import CodingError, EncodingError, TransformError
from keycodec.coding._keys import (
    AnyCodingKey,
    CodingKey,
    KeyLike,
    as_coding_key,
)
from keycodec.typing import SupportsEncode
from keycodec.utils import get_codable_support


__all__ = [
    "Encoder",
    "KeyedEncodingContainer",
    "SingleValueEncodingContainer",
    "UnkeyedEncodingContainer",
]


_UNSET = object()


def transform_to_encodable(
    using: Any,
    value: Any,
    key: Optional[CodingKey],
    coding_path: Sequence[CodingKey],
) -> Any:
    """Apply an encode-side value transformer, wrapping its failures.

    `CodingError` exceptions raised by the transformer propagate as-is
    (being anchored to `coding_path` if they carry no path), while any
    other exception is wrapped into a `TransformError`.
    """
    try:
        return using.transform_to_encodable(value)
    except CodingError as exc:
        if not exc.coding_path:
            exc.coding_path = list(coding_path)
        raise
    except Exception as exc:
        raise TransformError(key, exc, coding_path) from exc


class Encoder:
    """Encoder turning values into trees of plain python data.

    An Encoder instance holds the encoded representation of a single
    value, built either as a keyed container (a dict), an unkeyed one
    (a list) or a single value. Engines (see `keycodec.engines`) then
    serialize the resulting tree into bytes, only once it has been
    fully built, so that no partial output is ever exposed.

    Objects implementing an `encode_to(encoder)` method (see the
    `keycodec.coding.Codable` base class) use the methods below to
    define their encoded form:

    ```
    >>> def encode_to(self, encoder: Encoder) -> None:
    ...     encoder.encode(self.name, "name")
    ...     iso = ISO8601DateFormatter()
    ...     encoder.encode(self.created, "created", using=iso)
    ```

    Attributes
    ----------
    coding_path: list[CodingKey]
        Path of keys leading to the value being encoded.
    user_info: dict[str, any]
        Contextual information shared with nested encoders.
    native_types: tuple[type, ...]
        Types that the target engine stores as-is.
    """

    def __init__(
        self,
        coding_path: Sequence[CodingKey] = (),
        user_info: Optional[Dict[str, Any]] = None,
        native_types: Tuple[Type[Any], ...] = (),
    ) -> None:
        self.coding_path = list(coding_path)
        self.user_info = {} if user_info is None else user_info
        self.native_types = tuple(native_types)
        self._storage = _UNSET  # type: Any
        self._mode = None  # type: Optional[str]

    @property
    def encoded_value(self) -> Any:
        """Encoded data tree (an empty dict if nothing was encoded)."""
        if self._storage is _UNSET:
            return {}
        return self._storage

    def _claim(self, mode: str) -> None:
        """Set the storage mode, raising if it conflicts with a prior one."""
        if self._mode is None:
            self._mode = mode
            if mode == "keyed":
                self._storage = {}
            elif mode == "unkeyed":
                self._storage = []
            return
        if (self._mode != mode) or (mode == "single"):
            raise EncodingError(
                None,
                self.coding_path,
                f"Cannot encode a {mode} value: the encoder already "
                f"holds a {self._mode} one.",
            )

    # Containers.

    def container(self) -> "KeyedEncodingContainer":
        """Return a keyed container writing into this encoder."""
        self._claim("keyed")
        return KeyedEncodingContainer(self, self._storage)

    def unkeyed_container(self) -> "UnkeyedEncodingContainer":
        """Return an unkeyed (sequence) container writing into this encoder."""
        self._claim("unkeyed")
        return UnkeyedEncodingContainer(self, self._storage)

    def single_value_container(self) -> "SingleValueEncodingContainer":
        """Return a container to write a single value into this encoder."""
        return SingleValueEncodingContainer(self)

    # Facade.

    def encode_single_value(self, value: Any) -> None:
        """Encode a value as the whole content of this encoder."""
        self.single_value_container().encode(value)

    def encode(
        self,
        value: Any,
        key: KeyLike,
        using: Any = None,
    ) -> None:
        """Encode a value under a given key.

        Parameters
        ----------
        value: any
            Value to encode.
        key: str or CodingKey
            Key under which to encode the value.
        using: EncodeTransformable or None, default=None
            Optional value transformer, the `transform_to_encodable`
            method of which is applied to `value` prior to encoding.

        Raises
        ------
        EncodingError:
            If the value (or its transformed counterpart) cannot be
            encoded, or the encoder already holds a non-keyed value.
        TransformError:
            If the value transformer raises an exception.
        """
        self.container().encode(value, key, using=using)

    def encode_if_present(
        self,
        value: Any,
        key: KeyLike,
        using: Any = None,
    ) -> None:
        """Encode a value under a given key, unless it is None."""
        self.container().encode_if_present(value, key, using=using)

    # Boxing.

    def box(self, value: Any, key: Optional[KeyLike] = None) -> Any:
        """Convert a value into plain data, located under an optional key."""
        path = self.coding_path
        if key is not None:
            path = path + [as_coding_key(key)]
        return self._box(value, path)

    def _box(self, value: Any, path: List[CodingKey]) -> Any:
        """Recursively convert a value into plain data."""
        # pylint: disable=too-many-return-statements
        if value is None:
            return None
        if isinstance(value, enum.Enum):
            return self._box(value.value, path)
        if isinstance(value, (bool, str)):
            return value
        if self.native_types and isinstance(value, self.native_types):
            return value
        if isinstance(value, SupportsEncode) and not isinstance(value, type):
            encoder = Encoder(path, self.user_info, self.native_types)
            value.encode_to(encoder)
            return encoder.encoded_value
        if isinstance(value, (int, float)):
            return value
        support = get_codable_support(type(value))
        if support is not None:
            try:
                packed = support.pack(value)
            except Exception as exc:
                raise EncodingError(
                    value, path, f"Failed to pack '{type(value).__name__}'."
                ) from exc
            return self._box(packed, path)
        if isinstance(value, dict):
            return self._box_dict(value, path)
        if isinstance(value, (list, tuple)):
            return [
                self._box(val, path + [AnyCodingKey.from_int(idx)])
                for idx, val in enumerate(value)
            ]
        if isinstance(value, (set, frozenset)):
            try:
                items = sorted(value)
            except TypeError:
                items = list(value)
            return self._box(items, path)
        raise EncodingError(
            value,
            path,
            "Cannot encode value of unsupported type "
            f"'{type(value).__name__}'.",
        )

    def _box_dict(
        self,
        value: Dict[Any, Any],
        path: List[CodingKey],
    ) -> Dict[str, Any]:
        """Convert a dict with str or CodingKey keys into plain data."""
        boxed = {}  # type: Dict[str, Any]
        for key, val in value.items():
            if isinstance(key, str):
                key = AnyCodingKey(key)
            elif not isinstance(key, CodingKey):
                raise EncodingError(
                    value,
                    path,
                    "Cannot encode a dict with non-string keys "
                    f"(got '{type(key).__name__}').",
                )
            boxed[key.string_value] = self._box(val, path + [key])
        return boxed


class KeyedEncodingContainer:
    """Keyed view over a dict node of an Encoder's tree."""

    def __init__(
        self,
        encoder: Encoder,
        storage: Dict[str, Any],
    ) -> None:
        self.encoder = encoder
        self._storage = storage

    @property
    def coding_path(self) -> List[CodingKey]:
        """Path of keys leading to this container."""
        return self.encoder.coding_path

    def encode(
        self,
        value: Any,
        key: KeyLike,
        using: Any = None,
    ) -> None:
        """Encode a value under `key`, optionally via a value transformer."""
        key = as_coding_key(key)
        path = self.coding_path + [key]
        if using is not None:
            value = transform_to_encodable(using, value, key, path)
        # Box the value fully before writing it, so that failures
        # leave the container untouched.
        self._storage[key.string_value] = self.encoder.box(value, key)

    def encode_if_present(
        self,
        value: Any,
        key: KeyLike,
        using: Any = None,
    ) -> None:
        """Encode a value under `key`, unless it is None."""
        if value is not None:
            self.encode(value, key, using=using)

    def encode_nil(self, key: KeyLike) -> None:
        """Encode a null value under `key`."""
        self._storage[as_coding_key(key).string_value] = None

    def nested_container(self, key: KeyLike) -> "KeyedEncodingContainer":
        """Return a keyed container nested under `key`."""
        key = as_coding_key(key)
        nested = Encoder(
            self.coding_path + [key],
            self.encoder.user_info,
            self.encoder.native_types,
        )
        container = nested.container()
        self._storage[key.string_value] = nested.encoded_value
        return container


class UnkeyedEncodingContainer:
    """Sequence view over a list node of an Encoder's tree."""

    def __init__(
        self,
        encoder: Encoder,
        storage: List[Any],
    ) -> None:
        self.encoder = encoder
        self._storage = storage

    @property
    def count(self) -> int:
        """Number of values encoded so far."""
        return len(self._storage)

    def encode(self, value: Any, using: Any = None) -> None:
        """Append a value, optionally via a value transformer."""
        key = AnyCodingKey.from_int(self.count)
        if using is not None:
            path = self.encoder.coding_path + [key]
            value = transform_to_encodable(using, value, key, path)
        self._storage.append(self.encoder.box(value, key))

    def encode_nil(self) -> None:
        """Append a null value."""
        self._storage.append(None)


class SingleValueEncodingContainer:
    """Container to encode a single value as an Encoder's whole content."""

    def __init__(self, encoder: Encoder) -> None:
        self.encoder = encoder

    def encode(self, value: Any, using: Any = None) -> None:
        """Encode a value, optionally via a value transformer."""
        # pylint: disable=protected-access
        encoder = self.encoder
        if encoder._mode is not None:
            encoder._claim("single")
        if using is not None:
            value = transform_to_encodable(
                using, value, None, encoder.coding_path
            )
        boxed = encoder.box(value)
        encoder._claim("single")
        encoder._storage = boxed

    def encode_nil(self) -> None:
        """Encode a null value."""
        self.encode(None)
