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

"""Format adapters, converting datetime values to and from strings."""

import datetime
from abc import ABCMeta, abstractmethod
from typing import Generic, Optional, TypeVar

from keycodec.coding import DataCorruptedError
from keycodec.transform._api import Transformable


__all__ = [
    "DateFormatter",
    "Formatter",
    "ISO8601DateFormatter",
]


ValueT = TypeVar("ValueT")


class Formatter(
    Transformable[ValueT, str], Generic[ValueT], metaclass=ABCMeta
):
    """Abstract format adapter, converting values to and from strings.

    A Formatter is a Transformable the wire-side type of which is `str`.
    When decoding, strings that `parse` rejects (by returning None)
    result in a `DataCorruptedError` being raised, anchored to the key
    under which the string was found.
    """

    decode_source_type = str

    @abstractmethod
    def format(self, value: ValueT) -> str:
        """Return the string representation of a value."""

    @abstractmethod
    def parse(self, string: str) -> Optional[ValueT]:
        """Parse a value from a string, returning None if it is invalid."""

    def transform_to_encodable(self, value: ValueT) -> str:
        return self.format(value)

    def transform_from_decodable(self, value: str) -> ValueT:
        parsed = self.parse(value)
        if parsed is None:
            raise DataCorruptedError(
                [],
                f"String {value!r} does not match the format expected "
                f"by {self!r}.",
            )
        return parsed


class DateFormatter(Formatter[datetime.datetime]):
    """Pattern-based datetime formatter, using strftime/strptime directives.

    Parameters
    ----------
    date_format: str, default="%Y-%m-%dT%H:%M:%S"
        Format string, using `datetime.strftime` directives.
        e.g. "%Y-%m-%d" for day-precision dates.
    timezone: datetime.tzinfo or None, default=None
        Optional time zone of formatted strings. If set, timezone-aware
        values are converted to it prior to formatting, and parsed
        values that are naive are attached to it.
    """

    def __init__(
        self,
        date_format: str = "%Y-%m-%dT%H:%M:%S",
        timezone: Optional[datetime.tzinfo] = None,
    ) -> None:
        self.date_format = date_format
        self.timezone = timezone

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(date_format={self.date_format!r}, "
            f"timezone={self.timezone!r})"
        )

    def format(self, value: datetime.datetime) -> str:
        if (
            self.timezone is not None
            and isinstance(value, datetime.datetime)
            and value.tzinfo is not None
        ):
            value = value.astimezone(self.timezone)
        return value.strftime(self.date_format)

    def parse(self, string: str) -> Optional[datetime.datetime]:
        try:
            value = datetime.datetime.strptime(string, self.date_format)
        except (TypeError, ValueError):
            return None
        if value.tzinfo is None and self.timezone is not None:
            value = value.replace(tzinfo=self.timezone)
        return value


class ISO8601DateFormatter(Formatter[datetime.datetime]):
    """Fixed ISO-8601 timestamp formatter, e.g. "2024-05-17T13:45:00Z".

    Formatted timestamps are expressed in UTC, naive values being
    assumed to already be. Parsed timestamps are timezone-aware, with
    naive strings being interpreted as UTC ones.

    Parameters
    ----------
    timespec: str, default="seconds"
        Precision of formatted timestamps, as passed to the
        `datetime.isoformat` method (e.g. "seconds", "milliseconds").
    """

    def __init__(
        self,
        timespec: str = "seconds",
    ) -> None:
        self.timespec = timespec

    def __repr__(self) -> str:
        return f"{type(self).__name__}(timespec={self.timespec!r})"

    def format(self, value: datetime.datetime) -> str:
        if value.tzinfo is None:
            value = value.replace(tzinfo=datetime.timezone.utc)
        value = value.astimezone(datetime.timezone.utc)
        string = value.isoformat(timespec=self.timespec)
        return string.replace("+00:00", "Z")

    def parse(self, string: str) -> Optional[datetime.datetime]:
        if not isinstance(string, str) or "T" not in string:
            return None
        if string.endswith(("Z", "z")):
            string = string[:-1] + "+00:00"
        try:
            value = datetime.datetime.fromisoformat(string)
        except ValueError:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=datetime.timezone.utc)
        return value
