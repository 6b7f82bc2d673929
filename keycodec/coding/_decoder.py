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

"""Decoder and decoding containers, turning plain data trees into values."""

import collections.abc
import enum
import logging
import types
import typing
from typing import Any, Dict, List, Optional, Sequence, Tuple, Type, Union

from keycodec.coding._errors import (
    CodingError,
    DataCorruptedError,
    DecodingError,
    KeyNotFoundError,
    TransformError,
    TypeMismatchError,
    UnsupportedTypeError,
    describe_shape,
    describe_type,
)
from keycodec.coding._keys import (
    AnyCodingKey,
    CodingKey,
    KeyLike,
    as_coding_key,
    format_coding_path,
)
from keycodec.typing import SupportsDecode
from keycodec.utils import get_codable_support


__all__ = [
    "Decoder",
    "KeyedDecodingContainer",
    "SingleValueDecodingContainer",
    "UnkeyedDecodingContainer",
]


NoneType = type(None)

SEQUENCE_ORIGINS = (list, collections.abc.Sequence, collections.abc.Iterable)
SET_ORIGINS = (set, frozenset, collections.abc.Set)
DICT_ORIGINS = (dict, collections.abc.Mapping)
# `X | Y` unions have a distinct origin (py >=3.10)
UNION_ORIGINS = (Union, getattr(types, "UnionType", Union))


def transform_from_decodable(
    using: Any,
    value: Any,
    key: Optional[CodingKey],
    coding_path: Sequence[CodingKey],
) -> Any:
    """Apply a decode-side value transformer, wrapping its failures.

    `CodingError` exceptions raised by the transformer propagate as-is
    (being anchored to `coding_path` if they carry no path), while any
    other exception is wrapped into a `TransformError`.
    """
    try:
        return using.transform_from_decodable(value)
    except CodingError as exc:
        if not exc.coding_path:
            exc.coding_path = list(coding_path)
        raise
    except Exception as exc:
        raise TransformError(key, exc, coding_path) from exc


def _source_type(using: Any, as_type: Any) -> Any:
    """Return the type to decode raw values as, prior to transforming them."""
    if as_type is not Any:
        raise TypeError(
            "'as_type' and 'using' are mutually exclusive: the decoded type "
            "is set by the transformer's 'decode_source_type'."
        )
    return getattr(using, "decode_source_type", Any)


class Decoder:
    """Decoder turning trees of plain python data into typed values.

    A Decoder wraps a data tree (as output by an engine's parser) and
    exposes typed, key-addressed accessors to it. The target type of
    each access is specified through `as_type`, which may be a plain
    type, a decodable class (see `keycodec.coding.Codable`), a type
    registered via `keycodec.utils.add_codable_support`, an enum, or
    a typing generic among Any, Optional, Union, List, Tuple, Dict and
    Set. Values are checked against that type: no implicit conversion
    occurs, save for ints accepted as floats and integral floats as
    ints.

    Objects implementing a `decode_from(decoder)` classmethod use the
    methods below to define how they are parsed:

    ```
    >>> @classmethod
    ... def decode_from(cls, decoder: Decoder) -> Self:
    ...     name = decoder.decode("name", str)
    ...     created = decoder.decode("created", using=ISO8601DateFormatter())
    ...     tags = decoder.decode_array_safely("tags", str)
    ...     return cls(name, created, tags)
    ```

    Attributes
    ----------
    storage: any
        Data tree wrapped by this decoder.
    coding_path: list[CodingKey]
        Path of keys leading to the wrapped data.
    user_info: dict[str, any]
        Contextual information shared with nested decoders.
    native_types: tuple[type, ...]
        Types that the source engine yields as-is.
    logger: logging.Logger
        Logger used to trace elements dropped by `decode_array_safely`.
    """

    def __init__(
        self,
        storage: Any,
        coding_path: Sequence[CodingKey] = (),
        user_info: Optional[Dict[str, Any]] = None,
        native_types: Tuple[Type[Any], ...] = (),
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.storage = storage
        self.coding_path = list(coding_path)
        self.user_info = {} if user_info is None else user_info
        self.native_types = tuple(native_types)
        self.logger = logger or logging.getLogger(__name__)

    # Containers.

    def container(self) -> "KeyedDecodingContainer":
        """Return a keyed view over the wrapped data.

        Raises
        ------
        TypeMismatchError:
            If the wrapped data is not a keyed (dict) node.
        """
        if not isinstance(self.storage, dict):
            raise TypeMismatchError(
                dict,
                self.coding_path,
                "Expected to decode a keyed container but found "
                f"{describe_shape(self.storage)} instead.",
            )
        return KeyedDecodingContainer(self, self.storage)

    def unkeyed_container(self) -> "UnkeyedDecodingContainer":
        """Return a sequence view over the wrapped data.

        Raises
        ------
        TypeMismatchError:
            If the wrapped data is not an unkeyed (list) node.
        """
        if not isinstance(self.storage, list):
            raise TypeMismatchError(
                list,
                self.coding_path,
                "Expected to decode an unkeyed container but found "
                f"{describe_shape(self.storage)} instead.",
            )
        return UnkeyedDecodingContainer(self, self.storage)

    def single_value_container(self) -> "SingleValueDecodingContainer":
        """Return a view over the wrapped data as a single value."""
        return SingleValueDecodingContainer(self)

    # Facade.

    def decode_single_value(self, as_type: Any = Any) -> Any:
        """Decode the whole wrapped data as a single value of `as_type`.

        Raises
        ------
        TypeMismatchError:
            If the data's shape does not match `as_type`.
        """
        return self.single_value_container().decode(as_type)

    def decode(
        self,
        key: KeyLike,
        as_type: Any = Any,
        *,
        using: Any = None,
    ) -> Any:
        """Decode the value under a given key.

        Parameters
        ----------
        key: str or CodingKey
            Key of the value to decode.
        as_type: type or typing generic, default=Any
            Type of the value to decode. Exclusive with `using`.
        using: DecodeTransformable or None, default=None
            Optional value transformer. If set, decode a value of its
            `decode_source_type` and return the output of its method
            `transform_from_decodable` applied to it.

        Raises
        ------
        KeyNotFoundError:
            If `key` is absent from the wrapped data.
        TypeMismatchError:
            If the wrapped data is not keyed, or the value under `key`
            cannot be decoded as the expected type.
        DataCorruptedError:
            If the value has the right shape but fails further parsing
            (e.g. a string not matching a date format).
        TransformError:
            If the value transformer raises an exception.
        """
        return self.container().decode(key, as_type, using=using)

    def decode_if_present(
        self,
        key: KeyLike,
        as_type: Any = Any,
        *,
        using: Any = None,
    ) -> Any:
        """Decode the value under a given key, or return None if absent.

        A null value is also returned as None. A present value that
        cannot be decoded still raises (see `Decoder.decode`).
        """
        return self.container().decode_if_present(key, as_type, using=using)

    def decode_array_safely(
        self,
        key: KeyLike,
        as_type: Any = Any,
    ) -> List[Any]:
        """Decode the array under a given key, dropping undecodable elements.

        This is a deliberately lossy operation: each element is decoded
        independently as `as_type`, and elements that fail to decode are
        silently dropped. The output holds the successfully-decoded ones,
        in their original order. No error nor count of dropped elements
        is reported to the caller.

        Raises
        ------
        KeyNotFoundError:
            If `key` is absent from the wrapped data.
        TypeMismatchError:
            If the wrapped data is not keyed, or the value under `key`
            is not an array.
        UnsupportedTypeError:
            If `as_type` is not a type keycodec knows how to decode.
        """
        return self.container().decode_array_safely(key, as_type)

    # Unboxing.

    def unbox(
        self,
        raw: Any,
        as_type: Any,
        key: Optional[KeyLike] = None,
    ) -> Any:
        """Convert raw data located under an optional key into `as_type`."""
        path = self.coding_path
        if key is not None:
            path = path + [as_coding_key(key)]
        return self._unbox(raw, as_type, path)

    def _mismatch(
        self,
        raw: Any,
        as_type: Any,
        path: List[CodingKey],
    ) -> TypeMismatchError:
        return TypeMismatchError(
            as_type,
            path,
            f"Expected to decode {describe_type(as_type)} but found "
            f"{describe_shape(raw)} instead.",
        )

    def _unbox(self, raw: Any, as_type: Any, path: List[CodingKey]) -> Any:
        """Recursively convert raw data into an instance of `as_type`."""
        # pylint: disable=too-many-return-statements,too-many-branches
        if as_type is Any or as_type is object:
            return raw
        origin = typing.get_origin(as_type)
        if origin is not None:
            return self._unbox_generic(raw, as_type, origin, path)
        if as_type is NoneType or as_type is None:
            if raw is None:
                return None
            raise self._mismatch(raw, NoneType, path)
        if raw is None:
            raise self._mismatch(raw, as_type, path)
        if not isinstance(as_type, type):
            raise UnsupportedTypeError(
                f"Unsupported decoding target type: {as_type}."
            )
        if self.native_types and issubclass(as_type, self.native_types):
            if isinstance(raw, as_type):
                return raw
        if as_type is bool:
            if isinstance(raw, bool):
                return raw
            raise self._mismatch(raw, as_type, path)
        if as_type is int:
            if isinstance(raw, int) and not isinstance(raw, bool):
                return raw
            if isinstance(raw, float) and raw.is_integer():
                return int(raw)
            raise self._mismatch(raw, as_type, path)
        if as_type is float:
            if isinstance(raw, (int, float)) and not isinstance(raw, bool):
                return float(raw)
            raise self._mismatch(raw, as_type, path)
        if as_type is str:
            if isinstance(raw, str):
                return raw
            raise self._mismatch(raw, as_type, path)
        if as_type in (list, tuple, set, frozenset, dict):
            return self._unbox_generic(raw, as_type, as_type, path)
        if issubclass(as_type, SupportsDecode):
            decoder = Decoder(
                raw, path, self.user_info, self.native_types, self.logger
            )
            return as_type.decode_from(decoder)
        if issubclass(as_type, enum.Enum):
            return self._unbox_enum(raw, as_type, path)
        support = get_codable_support(as_type)
        if support is not None:
            source = self._unbox(raw, support.source_type, path)
            try:
                return support.unpack(source)
            except Exception as exc:
                raise DataCorruptedError(
                    path,
                    f"Failed to unpack {describe_type(as_type)} from "
                    f"{describe_shape(raw)}: {exc}",
                ) from exc
        raise UnsupportedTypeError(
            f"Unsupported decoding target type: {as_type}."
        )

    def _unbox_enum(
        self,
        raw: Any,
        as_type: Type[enum.Enum],
        path: List[CodingKey],
    ) -> enum.Enum:
        """Convert a raw value into a member of an enum type."""
        if isinstance(raw, (dict, list)):
            raise self._mismatch(raw, as_type, path)
        try:
            return as_type(raw)
        except ValueError as exc:
            raise DataCorruptedError(
                path,
                f"Cannot initialize {as_type.__name__} from invalid "
                f"value {raw!r}.",
            ) from exc

    def _unbox_generic(
        self,
        raw: Any,
        as_type: Any,
        origin: Any,
        path: List[CodingKey],
    ) -> Any:
        """Convert raw data into an instance of a typing generic."""
        # pylint: disable=too-many-return-statements
        args = typing.get_args(as_type)
        if origin in UNION_ORIGINS:
            if raw is None and NoneType in args:
                return None
            for arg in args:
                if arg is NoneType:
                    continue
                try:
                    return self._unbox(raw, arg, path)
                except DecodingError:
                    continue
            raise self._mismatch(raw, as_type, path)
        if origin is typing.Literal:
            if raw in args:
                return raw
            raise self._mismatch(raw, as_type, path)
        if raw is None:
            raise self._mismatch(raw, as_type, path)
        if origin is tuple:
            return self._unbox_tuple(raw, as_type, args, path)
        if origin in SEQUENCE_ORIGINS or origin in SET_ORIGINS:
            if not isinstance(raw, list):
                raise self._mismatch(raw, as_type, path)
            item_type = args[0] if args else Any
            items = [
                self._unbox(val, item_type, path + [AnyCodingKey.from_int(i)])
                for i, val in enumerate(raw)
            ]
            if origin in SET_ORIGINS:
                return frozenset(items) if origin is frozenset else set(items)
            return items
        if origin in DICT_ORIGINS:
            if not isinstance(raw, dict):
                raise self._mismatch(raw, as_type, path)
            if args and args[0] not in (str, Any):
                raise UnsupportedTypeError(
                    f"Unsupported decoding target type: {as_type}: "
                    "dict keys must be strings."
                )
            val_type = args[1] if args else Any
            return {
                key: self._unbox(val, val_type, path + [AnyCodingKey(key)])
                for key, val in raw.items()
            }
        raise UnsupportedTypeError(
            f"Unsupported decoding target type: {as_type}."
        )

    def _unbox_tuple(
        self,
        raw: Any,
        as_type: Any,
        args: Tuple[Any, ...],
        path: List[CodingKey],
    ) -> Tuple[Any, ...]:
        """Convert raw data into a fixed-size or variadic tuple."""
        if not isinstance(raw, list):
            raise self._mismatch(raw, as_type, path)
        if not args:
            return tuple(raw)
        if len(args) == 2 and args[1] is Ellipsis:
            item_types = [args[0]] * len(raw)
        elif len(args) == len(raw):
            item_types = list(args)
        else:
            raise TypeMismatchError(
                as_type,
                path,
                f"Expected to decode {describe_type(as_type)} but found an "
                f"array of {len(raw)} elements instead.",
            )
        return tuple(
            self._unbox(val, typ, path + [AnyCodingKey.from_int(i)])
            for i, (val, typ) in enumerate(zip(raw, item_types))
        )


class KeyedDecodingContainer:
    """Keyed view over a dict node of a Decoder's tree."""

    def __init__(
        self,
        decoder: Decoder,
        storage: Dict[str, Any],
    ) -> None:
        self.decoder = decoder
        self._storage = storage

    @property
    def coding_path(self) -> List[CodingKey]:
        """Path of keys leading to this container."""
        return self.decoder.coding_path

    @property
    def all_keys(self) -> List[CodingKey]:
        """Keys of the values held by this container, in order."""
        return [AnyCodingKey(key) for key in self._storage]

    def contains(self, key: KeyLike) -> bool:
        """Return whether a value is held under `key`."""
        return as_coding_key(key).string_value in self._storage

    def __contains__(self, key: KeyLike) -> bool:
        return self.contains(key)

    def get(self, key: KeyLike) -> Any:
        """Return the raw value under `key`, or None if absent."""
        return self._storage.get(as_coding_key(key).string_value)

    def get_required(self, key: KeyLike) -> Any:
        """Return the raw value under `key`, raising if it is absent.

        Raises
        ------
        KeyNotFoundError:
            If `key` is absent from this container.
        """
        key = as_coding_key(key)
        try:
            return self._storage[key.string_value]
        except KeyError:
            raise KeyNotFoundError(key, self.coding_path) from None

    def decode_nil(self, key: KeyLike) -> bool:
        """Return whether the value under `key` is null."""
        return self.get_required(key) is None

    def decode(
        self,
        key: KeyLike,
        as_type: Any = Any,
        *,
        using: Any = None,
    ) -> Any:
        """Decode the value under `key` (see `Decoder.decode`)."""
        key = as_coding_key(key)
        raw = self.get_required(key)
        if using is None:
            return self.decoder.unbox(raw, as_type, key)
        value = self.decoder.unbox(raw, _source_type(using, as_type), key)
        path = self.coding_path + [key]
        return transform_from_decodable(using, value, key, path)

    def decode_if_present(
        self,
        key: KeyLike,
        as_type: Any = Any,
        *,
        using: Any = None,
    ) -> Any:
        """Decode the value under `key`, or return None if absent or null."""
        key = as_coding_key(key)
        if self.get(key) is None:
            if using is not None:
                _source_type(using, as_type)
            return None
        return self.decode(key, as_type, using=using)

    def decode_array_safely(
        self,
        key: KeyLike,
        as_type: Any = Any,
    ) -> List[Any]:
        """Decode the array under `key`, dropping undecodable elements.

        See `Decoder.decode_array_safely`.
        """
        key = as_coding_key(key)
        raw = self.get_required(key)
        path = self.coding_path + [key]
        if not isinstance(raw, list):
            raise TypeMismatchError(
                list,
                path,
                "Expected to decode an array but found "
                f"{describe_shape(raw)} instead.",
            )
        values = []  # type: List[Any]
        # pylint: disable=protected-access
        for index, element in enumerate(raw):
            try:
                value = self.decoder._unbox(
                    element, as_type, path + [AnyCodingKey.from_int(index)]
                )
            except UnsupportedTypeError:
                raise
            except Exception as exc:  # pylint: disable=broad-except
                self.decoder.logger.debug(
                    "Dropping undecodable element %d of '%s': %s",
                    index,
                    format_coding_path(path),
                    exc,
                )
                continue
            values.append(value)
        return values

    def nested_container(self, key: KeyLike) -> "KeyedDecodingContainer":
        """Return a keyed view over the dict node under `key`."""
        key = as_coding_key(key)
        raw = self.get_required(key)
        return self._nested_decoder(key, raw).container()

    def nested_unkeyed_container(
        self,
        key: KeyLike,
    ) -> "UnkeyedDecodingContainer":
        """Return a sequence view over the list node under `key`."""
        key = as_coding_key(key)
        raw = self.get_required(key)
        return self._nested_decoder(key, raw).unkeyed_container()

    def _nested_decoder(self, key: CodingKey, raw: Any) -> Decoder:
        return Decoder(
            raw,
            self.coding_path + [key],
            self.decoder.user_info,
            self.decoder.native_types,
            self.decoder.logger,
        )


class UnkeyedDecodingContainer:
    """Sequence view over a list node of a Decoder's tree."""

    def __init__(
        self,
        decoder: Decoder,
        storage: List[Any],
    ) -> None:
        self.decoder = decoder
        self._storage = storage
        self.current_index = 0

    @property
    def count(self) -> int:
        """Total number of elements in the sequence."""
        return len(self._storage)

    @property
    def is_at_end(self) -> bool:
        """Whether all elements of the sequence have been consumed."""
        return self.current_index >= len(self._storage)

    def _next_key(self) -> AnyCodingKey:
        key = AnyCodingKey.from_int(self.current_index)
        if self.is_at_end:
            raise KeyNotFoundError(
                key, self.decoder.coding_path, "Unkeyed container is at end."
            )
        return key

    def decode(self, as_type: Any = Any, *, using: Any = None) -> Any:
        """Decode the next element of the sequence.

        The current index is only advanced if decoding succeeds.
        """
        key = self._next_key()
        raw = self._storage[self.current_index]
        if using is None:
            value = self.decoder.unbox(raw, as_type, key)
        else:
            value = self.decoder.unbox(raw, _source_type(using, as_type), key)
            path = self.decoder.coding_path + [key]
            value = transform_from_decodable(using, value, key, path)
        self.current_index += 1
        return value

    def decode_if_present(
        self,
        as_type: Any = Any,
        *,
        using: Any = None,
    ) -> Any:
        """Decode the next element of the sequence, or None if it is null."""
        self._next_key()
        if self._storage[self.current_index] is None:
            self.current_index += 1
            return None
        return self.decode(as_type, using=using)

    def decode_nil(self) -> bool:
        """Consume the next element if null, and return whether it was."""
        self._next_key()
        if self._storage[self.current_index] is None:
            self.current_index += 1
            return True
        return False


class SingleValueDecodingContainer:
    """View over a Decoder's whole data as a single value."""

    def __init__(self, decoder: Decoder) -> None:
        self.decoder = decoder

    def decode_nil(self) -> bool:
        """Return whether the wrapped value is null."""
        return self.decoder.storage is None

    def decode(self, as_type: Any = Any, *, using: Any = None) -> Any:
        """Decode the wrapped value, optionally via a value transformer."""
        decoder = self.decoder
        if using is None:
            return decoder.unbox(decoder.storage, as_type)
        value = decoder.unbox(decoder.storage, _source_type(using, as_type))
        return transform_from_decodable(
            using, value, None, decoder.coding_path
        )
