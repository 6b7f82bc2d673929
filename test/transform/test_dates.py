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

"""Unit tests for datetime format adapters."""

import datetime

import pytest

from keycodec.coding import AnyCodingKey, DataCorruptedError, Decoder, Encoder
from keycodec.transform import DateFormatter, ISO8601DateFormatter


UTC = datetime.timezone.utc
CET = datetime.timezone(datetime.timedelta(hours=1))


class TestDateFormatter:
    """Unit tests for pattern-based `DateFormatter`."""

    def test_day_precision_round_trip(self) -> None:
        """Test that a day-precision date survives a keyed round-trip."""
        formatter = DateFormatter("%Y-%m-%d", timezone=UTC)
        value = datetime.datetime(2024, 5, 17, tzinfo=UTC)
        encoder = Encoder()
        encoder.encode(value, "day", using=formatter)
        assert encoder.encoded_value == {"day": "2024-05-17"}
        decoded = Decoder(encoder.encoded_value).decode("day", using=formatter)
        assert decoded == value

    def test_default_format(self) -> None:
        """Test the default second-precision format, on naive values."""
        formatter = DateFormatter()
        value = datetime.datetime(2024, 5, 17, 13, 45, 30)
        assert formatter.format(value) == "2024-05-17T13:45:30"
        assert formatter.parse("2024-05-17T13:45:30") == value

    def test_timezone_conversion(self) -> None:
        """Test that aware values are converted to the formatter's zone."""
        formatter = DateFormatter("%Y-%m-%d %H:%M", timezone=UTC)
        value = datetime.datetime(2024, 5, 17, 0, 30, tzinfo=CET)
        assert formatter.format(value) == "2024-05-16 23:30"

    def test_invalid_string(self) -> None:
        """Test that non-matching strings fail as corrupted data."""
        formatter = DateFormatter("%Y-%m-%d")
        assert formatter.parse("notADate") is None
        decoder = Decoder({"day": "notADate"})
        with pytest.raises(DataCorruptedError) as exc_info:
            decoder.decode("day", using=formatter)
        assert exc_info.value.coding_path == [AnyCodingKey("day")]
        assert "notADate" in str(exc_info.value)


class TestISO8601DateFormatter:
    """Unit tests for `ISO8601DateFormatter`."""

    def test_format(self) -> None:
        """Test that timestamps are formatted in UTC with a 'Z' suffix."""
        formatter = ISO8601DateFormatter()
        value = datetime.datetime(2024, 5, 17, 14, 45, tzinfo=CET)
        assert formatter.format(value) == "2024-05-17T13:45:00Z"
        naive = datetime.datetime(2024, 5, 17, 13, 45)
        assert formatter.format(naive) == "2024-05-17T13:45:00Z"

    def test_timespec(self) -> None:
        """Test that the output precision may be customized."""
        formatter = ISO8601DateFormatter(timespec="milliseconds")
        value = datetime.datetime(2024, 5, 17, 13, 45, 0, 120000, tzinfo=UTC)
        assert formatter.format(value) == "2024-05-17T13:45:00.120Z"

    def test_round_trip(self) -> None:
        """Test that a timestamp survives a keyed round-trip."""
        formatter = ISO8601DateFormatter()
        value = datetime.datetime(2024, 5, 17, 13, 45, 12, tzinfo=UTC)
        encoder = Encoder()
        encoder.encode(value, "created", using=formatter)
        decoder = Decoder(encoder.encoded_value)
        assert decoder.decode("created", using=formatter) == value

    def test_parse_offsets(self) -> None:
        """Test that explicit offsets are kept and naive strings are UTC."""
        formatter = ISO8601DateFormatter()
        parsed = formatter.parse("2024-05-17T14:45:00+01:00")
        assert parsed == datetime.datetime(2024, 5, 17, 13, 45, tzinfo=UTC)
        parsed = formatter.parse("2024-05-17T13:45:00")
        assert parsed is not None and parsed.tzinfo is UTC

    @pytest.mark.parametrize("string", ["notADate", "2024-05-17", "T"])
    def test_invalid_string(self, string: str) -> None:
        """Test that invalid timestamps fail as corrupted data."""
        formatter = ISO8601DateFormatter()
        assert formatter.parse(string) is None
        with pytest.raises(DataCorruptedError):
            Decoder(string).single_value_container().decode(using=formatter)
