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

"""Abstract engines, serializing whole values to and from bytes."""

import abc
import logging
from typing import Any, ClassVar, Dict, Optional, Tuple, Type, Union

from keycodec.coding import Decoder, Encoder
from keycodec.utils import (
    create_types_registry,
    register_type,
    resolve_logger,
)


__all__ = [
    "AnyDecoder",
    "AnyEncoder",
]


@create_types_registry(name="AnyEncoder")
class AnyEncoder(metaclass=abc.ABCMeta):
    """Abstract base class for engines encoding whole values into bytes.

    An engine first converts the value into a tree of plain data using
    a `keycodec.coding.Encoder`, then serializes that tree in one go,
    so that a failure at any point never results in partial output.

    Subclasses are type-registered under their `format_name` by default.
    This can be prevented by passing the `register=False` keyword
    argument at inheritance; e.g. `class MyEngine(AnyEncoder,
    register=False):`.
    """

    format_name: ClassVar[str]
    native_types: ClassVar[Tuple[Type[Any], ...]] = ()

    def __init_subclass__(
        cls,
        register: bool = True,
        **kwargs: Any,
    ) -> None:
        """Automatically type-register subclasses."""
        super().__init_subclass__(**kwargs)
        if register:
            register_type(cls, cls.format_name, group="AnyEncoder")

    def __init__(
        self,
        user_info: Optional[Dict[str, Any]] = None,
        logger: Union[logging.Logger, str, None] = None,
    ) -> None:
        """Instantiate the engine.

        Parameters
        ----------
        user_info: dict[str, any] or None, default=None
            Optional contextual information, made available to encoded
            objects as `encoder.user_info`.
        logger: logging.Logger or str or None, default=None,
            Logger to use, or name of a logger to set up using
            `keycodec.utils.get_logger`. If None, use the logger named
            after `type(self)`, without altering its configuration.
        """
        self.user_info = user_info or {}
        self.logger = resolve_logger(logger, type(self).__name__)

    def encode(self, value: Any) -> bytes:
        """Encode a value into bytes.

        Raises
        ------
        EncodingError:
            If the value (or any nested one) cannot be encoded, or the
            data tree cannot be serialized by this engine.
        TransformError:
            If a value transformer fails while encoding the value.
        """
        encoder = Encoder(
            user_info=self.user_info, native_types=self.native_types
        )
        encoder.encode_single_value(value)
        data = self.serialize(encoder.encoded_value)
        self.logger.debug(
            "Encoded '%s' value into %d bytes.",
            type(value).__name__,
            len(data),
        )
        return data

    @abc.abstractmethod
    def serialize(self, tree: Any) -> bytes:
        """Serialize a tree of plain data into bytes.

        Raises
        ------
        EncodingError:
            If the tree cannot be represented by this engine.
        """


@create_types_registry(name="AnyDecoder")
class AnyDecoder(metaclass=abc.ABCMeta):
    """Abstract base class for engines decoding whole values from bytes.

    An engine first parses the input bytes into a tree of plain data,
    then decodes it into the target type using a `keycodec.coding.Decoder`.

    Subclasses are type-registered under their `format_name` by default.
    This can be prevented by passing the `register=False` keyword
    argument at inheritance.
    """

    format_name: ClassVar[str]
    native_types: ClassVar[Tuple[Type[Any], ...]] = ()

    def __init_subclass__(
        cls,
        register: bool = True,
        **kwargs: Any,
    ) -> None:
        """Automatically type-register subclasses."""
        super().__init_subclass__(**kwargs)
        if register:
            register_type(cls, cls.format_name, group="AnyDecoder")

    def __init__(
        self,
        user_info: Optional[Dict[str, Any]] = None,
        logger: Union[logging.Logger, str, None] = None,
    ) -> None:
        """Instantiate the engine.

        Parameters
        ----------
        user_info: dict[str, any] or None, default=None
            Optional contextual information, made available to decoded
            types as `decoder.user_info`.
        logger: logging.Logger or str or None, default=None,
            Logger to use, or name of a logger to set up using
            `keycodec.utils.get_logger`. If None, use the logger named
            after `type(self)`, without altering its configuration.
        """
        self.user_info = user_info or {}
        self.logger = resolve_logger(logger, type(self).__name__)

    def decode(self, as_type: Any, data: Union[bytes, str]) -> Any:
        """Decode a value of a given type from bytes.

        Raises
        ------
        DataCorruptedError:
            If `data` is not a valid document for this engine.
        DecodingError:
            If the parsed data cannot be decoded as `as_type`.
        TransformError:
            If a value transformer fails while decoding the value.
        """
        tree = self.deserialize(data)
        self.logger.debug("Parsed %d bytes of input data.", len(data))
        decoder = Decoder(
            tree,
            user_info=self.user_info,
            native_types=self.native_types,
            logger=self.logger,
        )
        return decoder.decode_single_value(as_type)

    @abc.abstractmethod
    def deserialize(self, data: Union[bytes, str]) -> Any:
        """Parse bytes into a tree of plain data.

        Raises
        ------
        DataCorruptedError:
            If `data` is not a valid document for this engine.
        """
