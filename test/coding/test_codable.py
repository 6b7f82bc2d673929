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

"""Unit tests for the `keycodec.coding.Codable` base class."""

import dataclasses
import datetime
import enum
from typing import Any, Dict, List, Optional

import pytest

from keycodec.coding import (
    Codable,
    CodingKeys,
    DataCorruptedError,
    Decoder,
    Encoder,
    KeyNotFoundError,
    TypeMismatchError,
    coding_field,
)
from keycodec.transform import DateFormatter


DAY_FORMAT = DateFormatter("%Y-%m-%d", timezone=datetime.timezone.utc)


class Keys(CodingKeys):
    """Structured keys used for testing purposes."""

    CREATED = "created_at"


class Status(enum.Enum):
    """Enum used for testing purposes."""

    ACTIVE = 1
    CLOSED = 2


@dataclasses.dataclass
class Address(Codable):
    """Nested codable dataclass."""

    city: str
    zip_code: Optional[str] = None


@dataclasses.dataclass
class User(Codable):
    """Codable dataclass exercising most field kinds."""

    name: str
    age: int
    address: Address
    status: Status = Status.ACTIVE
    tags: List[str] = dataclasses.field(default_factory=list)
    nickname: Optional[str] = None
    created: datetime.datetime = coding_field(
        key=Keys.CREATED,
        using=DAY_FORMAT,
        default=datetime.datetime(2024, 1, 1, tzinfo=datetime.timezone.utc),
    )
    scores: Dict[str, float] = dataclasses.field(default_factory=dict)
    cache: Any = dataclasses.field(default=None, init=False)


@dataclasses.dataclass
class Required(Codable):
    """Codable dataclass with required and optional fields only."""

    value: int
    comment: Optional[str]


class NotADataclass(Codable):
    """Codable subclass that does not implement anything."""


def encode(value: Any) -> Any:
    """Encode a value into plain data."""
    encoder = Encoder()
    encoder.encode_single_value(value)
    return encoder.encoded_value


class TestCodableDataclass:
    """Unit tests for the automated coding of dataclasses."""

    def test_encode(self) -> None:
        """Test that fields are encoded under their (custom) keys."""
        user = User(
            name="Ada",
            age=36,
            address=Address("London"),
            tags=["math"],
            created=datetime.datetime(
                2024, 5, 17, 13, 45, tzinfo=datetime.timezone.utc
            ),
        )
        assert encode(user) == {
            "name": "Ada",
            "age": 36,
            "address": {"city": "London"},
            "status": 1,
            "tags": ["math"],
            "created_at": "2024-05-17",
            "scores": {},
        }

    def test_decode(self) -> None:
        """Test that fields are decoded from their (custom) keys."""
        raw = {
            "name": "Ada",
            "age": 36,
            "address": {"city": "London", "zip_code": "NW1"},
            "status": 2,
            "created_at": "2024-05-17",
            "scores": {"math": 20},
        }
        user = Decoder(raw).decode_single_value(User)
        assert user == User(
            name="Ada",
            age=36,
            address=Address("London", "NW1"),
            status=Status.CLOSED,
            created=datetime.datetime(
                2024, 5, 17, tzinfo=datetime.timezone.utc
            ),
            scores={"math": 20.0},
        )

    def test_round_trip(self) -> None:
        """Test that decoding an encoded dataclass restores it."""
        user = User("Ada", 36, Address("London", "NW1"), nickname="Countess")
        assert Decoder(encode(user)).decode_single_value(User) == user

    def test_defaults_and_optionals(self) -> None:
        """Test that missing keys fall back to defaults or None."""
        assert Decoder({"value": 1}).decode_single_value(Required) == Required(
            1, None
        )

    def test_missing_required_field(self) -> None:
        """Test that a missing required field raises a KeyNotFoundError."""
        with pytest.raises(KeyNotFoundError) as exc_info:
            Decoder({"comment": "x"}).decode_single_value(Required)
        assert exc_info.value.key.string_value == "value"

    def test_null_required_field(self) -> None:
        """Test that a null non-optional field raises a TypeMismatchError."""
        with pytest.raises(TypeMismatchError):
            Decoder({"value": None}).decode_single_value(Required)

    def test_invalid_formatted_field(self) -> None:
        """Test that an invalid date string raises a DataCorruptedError."""
        raw = {"name": "Ada", "age": 36, "address": {"city": "London"}}
        raw["created_at"] = "notADate"
        with pytest.raises(DataCorruptedError) as exc_info:
            Decoder(raw).decode_single_value(User)
        assert [key.string_value for key in exc_info.value.coding_path] == [
            "created_at"
        ]

    def test_not_a_keyed_container(self) -> None:
        """Test that a dataclass cannot be decoded from a single value."""
        with pytest.raises(TypeMismatchError):
            Decoder("Ada").decode_single_value(Required)

    def test_not_a_dataclass(self) -> None:
        """Test that non-dataclass subclasses must implement coding."""
        with pytest.raises(NotImplementedError):
            encode(NotADataclass())
        with pytest.raises(NotImplementedError):
            Decoder({}).decode_single_value(NotADataclass)


def test_coding_field_metadata() -> None:
    """Test that `coding_field` preserves user-provided metadata."""

    @dataclasses.dataclass
    class Tagged(Codable):
        """Codable dataclass with a renamed field."""

        value: int = coding_field(key="v", metadata={"doc": "a value"})

    field = dataclasses.fields(Tagged)[0]
    assert field.metadata["doc"] == "a value"
    assert encode(Tagged(1)) == {"v": 1}
    assert Decoder({"v": 2}).decode_single_value(Tagged) == Tagged(2)
