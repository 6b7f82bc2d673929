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

"""Abstract value transformers, converting values to and from wire ones."""

from abc import ABCMeta, abstractmethod
from typing import Any, Generic, TypeVar


__all__ = [
    "DecodeTransformable",
    "EncodeTransformable",
    "Transformable",
]


SourceT = TypeVar("SourceT")
TargetT = TypeVar("TargetT")


class EncodeTransformable(Generic[SourceT, TargetT], metaclass=ABCMeta):
    """Value converter turning a source value into an encodable one.

    Instances may be passed as `using` argument to the encoding methods
    of `keycodec.coding.Encoder` and its containers.
    """

    @abstractmethod
    def transform_to_encodable(self, value: SourceT) -> TargetT:
        """Transform a source value into an encodable target one.

        Any exception raised here is wrapped into a `TransformError`
        by the encoder, save for `CodingError` ones.
        """


class DecodeTransformable(Generic[SourceT, TargetT], metaclass=ABCMeta):
    """Value converter turning a decoded value into a target one.

    Instances may be passed as `using` argument to the decoding methods
    of `keycodec.coding.Decoder` and its containers.

    Attributes
    ----------
    decode_source_type: type or typing generic
        Type of the raw value to decode prior to transforming it.
    """

    decode_source_type: Any = Any

    @abstractmethod
    def transform_from_decodable(self, value: SourceT) -> TargetT:
        """Transform a decoded source value into a target one.

        Any exception raised here is wrapped into a `TransformError`
        by the decoder, save for `CodingError` ones.
        """


AppT = TypeVar("AppT")
WireT = TypeVar("WireT")


class Transformable(
    EncodeTransformable[AppT, WireT],
    DecodeTransformable[WireT, AppT],
    metaclass=ABCMeta,
):
    """Bidirectional value converter between app-side and wire-side types."""
