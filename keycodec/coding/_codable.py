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

"""Base class making dataclasses encodable and decodable field-wise."""

import dataclasses
import typing
from typing import Any, Dict, Optional

from typing_extensions import Self  # future: import from typing (py >=3.11)

from keycodec.coding._decoder import Decoder, NoneType, UNION_ORIGINS
from keycodec.coding._encoder import Encoder
from keycodec.coding._keys import KeyLike


__all__ = [
    "Codable",
    "coding_field",
]


CODING_KEY = "keycodec.key"
CODING_USING = "keycodec.using"


def coding_field(
    key: Optional[KeyLike] = None,
    using: Any = None,
    **kwargs: Any,
) -> Any:
    """Declare a dataclass field with custom coding parameters.

    Parameters
    ----------
    key: str or CodingKey or None, default=None
        Key under which to code the field. If None, use its name.
    using: Transformable or None, default=None
        Optional value transformer through which to code the field.
    **kwargs:
        Any other keyword argument to `dataclasses.field`.
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    if key is not None:
        metadata[CODING_KEY] = key
    if using is not None:
        metadata[CODING_USING] = using
    return dataclasses.field(metadata=metadata, **kwargs)


def _admits_none(hint: Any) -> bool:
    """Return whether a type hint admits None values."""
    if hint is Any or hint is NoneType or hint is None:
        return True
    if typing.get_origin(hint) in UNION_ORIGINS:
        return NoneType in typing.get_args(hint)
    return False


def _has_default(field: dataclasses.Field) -> bool:
    return (field.default is not dataclasses.MISSING) or (
        field.default_factory is not dataclasses.MISSING
    )


class Codable:
    """Base class for objects that can be encoded and decoded.

    Subclasses that are dataclasses do not need to define anything:
    each init field is coded under a key named after it (or set via
    `keycodec.coding.coding_field`), based on its type annotation.
    None-valued fields are omitted, and absent keys are decoded as
    the field's default value, or None if its type admits it.

    Subclasses that are not dataclasses, or need custom processing,
    should override the `encode_to` method and `decode_from`
    classmethod, using the `Encoder` and `Decoder` facades:

    ```
    >>> class Point(Codable):
    ...     def __init__(self, x: float, y: float) -> None:
    ...         self.x, self.y = x, y
    ...     def encode_to(self, encoder: Encoder) -> None:
    ...         encoder.encode_single_value([self.x, self.y])
    ...     @classmethod
    ...     def decode_from(cls, decoder: Decoder) -> "Point":
    ...         return cls(*decoder.decode_single_value(Tuple[float, float]))
    ```
    """

    def encode_to(self, encoder: Encoder) -> None:
        """Encode this object's dataclass fields into the given encoder."""
        if not dataclasses.is_dataclass(self):
            raise NotImplementedError(
                f"'{type(self).__name__}' is not a dataclass and must "
                "implement the 'encode_to' method."
            )
        container = encoder.container()
        for field in dataclasses.fields(self):
            if not field.init:
                continue
            key = field.metadata.get(CODING_KEY, field.name)
            using = field.metadata.get(CODING_USING)
            value = getattr(self, field.name)
            container.encode_if_present(value, key, using=using)

    @classmethod
    def decode_from(cls, decoder: Decoder) -> Self:
        """Instantiate this dataclass from its fields' decoded values."""
        if not dataclasses.is_dataclass(cls):
            raise NotImplementedError(
                f"'{cls.__name__}' is not a dataclass and must "
                "implement the 'decode_from' classmethod."
            )
        hints = typing.get_type_hints(cls)
        container = decoder.container()
        kwargs = {}  # type: Dict[str, Any]
        for field in dataclasses.fields(cls):
            if not field.init:
                continue
            key = field.metadata.get(CODING_KEY, field.name)
            using = field.metadata.get(CODING_USING)
            hint = hints.get(field.name, Any)
            if container.get(key) is None:
                if _has_default(field):
                    continue
                if _admits_none(hint):
                    kwargs[field.name] = None
                    continue
            if using is None:
                kwargs[field.name] = container.decode(key, hint)
            else:
                kwargs[field.name] = container.decode(key, using=using)
        return cls(**kwargs)  # type: ignore
