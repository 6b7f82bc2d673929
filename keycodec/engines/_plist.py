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

"""Property-list engines, delegating serialization to `plistlib`."""

import datetime
import logging
import plistlib
from typing import Any, Dict, Optional, Union

from keycodec.coding import DataCorruptedError, EncodingError
from keycodec.engines._api import AnyDecoder, AnyEncoder


__all__ = [
    "PropertyListDecoder",
    "PropertyListEncoder",
]


PLIST_FORMATS = {
    "binary": plistlib.FMT_BINARY,
    "xml": plistlib.FMT_XML,
}


def _get_format(fmt: str) -> plistlib.PlistFormat:
    if fmt not in PLIST_FORMATS:
        raise ValueError(
            f"Unsupported property list format: '{fmt}'. "
            f"Supported ones are {list(PLIST_FORMATS)}."
        )
    return PLIST_FORMATS[fmt]


class PropertyListEncoder(AnyEncoder):
    """Engine encoding values into binary or XML property lists.

    Bytes values are stored natively as plist data, while datetime
    values are stored as ISO-8601 strings, which unlike plist dates
    preserve time zones. XML property lists cannot hold null values,
    hence None values must be omitted (as `Codable` dataclasses and
    `encode_if_present` do) or encoding will fail.
    """

    format_name = "plist"
    native_types = (bytes,)

    def __init__(
        self,
        fmt: str = "binary",
        sort_keys: bool = True,
        user_info: Optional[Dict[str, Any]] = None,
        logger: Union[logging.Logger, str, None] = None,
    ) -> None:
        """Instantiate the property-list encoder.

        Parameters
        ----------
        fmt: {"binary", "xml"}, default="binary"
            Property-list flavor to output.
        sort_keys: bool, default=True
            Whether to sort dictionaries' keys in output documents.
        user_info: dict[str, any] or None, default=None
            Optional contextual information shared with encoded objects.
        logger: logging.Logger or str or None, default=None,
            Logger to use, or name of a logger to set up.
        """
        super().__init__(user_info=user_info, logger=logger)
        self.fmt = _get_format(fmt)
        self.sort_keys = sort_keys

    def serialize(self, tree: Any) -> bytes:
        try:
            return plistlib.dumps(tree, fmt=self.fmt, sort_keys=self.sort_keys)
        except (TypeError, ValueError, OverflowError) as exc:
            raise EncodingError(
                tree, [], f"Failed to serialize data to a property list: {exc}"
            ) from exc


class PropertyListDecoder(AnyDecoder):
    """Engine decoding values from binary or XML property lists.

    Plist `<data>` and `<date>` entries are parsed natively, hence may
    be decoded as `bytes` and `datetime.datetime` values. Dates encoded
    as ISO-8601 strings (as `PropertyListEncoder` does) are decoded too.
    """

    format_name = "plist"
    native_types = (bytes, datetime.datetime)

    def __init__(
        self,
        fmt: Optional[str] = None,
        user_info: Optional[Dict[str, Any]] = None,
        logger: Union[logging.Logger, str, None] = None,
    ) -> None:
        """Instantiate the property-list decoder.

        Parameters
        ----------
        fmt: {"binary", "xml"} or None, default=None
            Property-list flavor to expect. If None, detect it.
        user_info: dict[str, any] or None, default=None
            Optional contextual information shared with decoded types.
        logger: logging.Logger or str or None, default=None,
            Logger to use, or name of a logger to set up.
        """
        super().__init__(user_info=user_info, logger=logger)
        self.fmt = None if fmt is None else _get_format(fmt)

    def deserialize(self, data: Union[bytes, str]) -> Any:
        if isinstance(data, str):
            data = data.encode("utf-8")
        try:
            return plistlib.loads(data, fmt=self.fmt)
        except Exception as exc:  # pylint: disable=broad-except
            raise DataCorruptedError(
                [], f"The given data was not a valid property list: {exc}"
            ) from exc
