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

"""JSON engines, delegating serialization to the `json` standard module."""

import json
import logging
from typing import Any, Dict, Optional, Union

from keycodec.coding import DataCorruptedError, EncodingError
from keycodec.engines._api import AnyDecoder, AnyEncoder


__all__ = [
    "JSONDecoder",
    "JSONEncoder",
]


class JSONEncoder(AnyEncoder):
    """Engine encoding values into utf-8 JSON documents."""

    format_name = "json"

    def __init__(
        self,
        indent: Optional[int] = None,
        sort_keys: bool = False,
        ensure_ascii: bool = False,
        allow_nan: bool = False,
        user_info: Optional[Dict[str, Any]] = None,
        logger: Union[logging.Logger, str, None] = None,
    ) -> None:
        """Instantiate the JSON encoder.

        Parameters
        ----------
        indent: int or None, default=None
            Optional indentation level, to pretty-print output documents.
        sort_keys: bool, default=False
            Whether to sort objects' keys in output documents.
        ensure_ascii: bool, default=False
            Whether to escape non-ASCII characters.
        allow_nan: bool, default=False
            Whether to output non-finite floats as (non-standard)
            NaN and Infinity literals, rather than raising.
        user_info: dict[str, any] or None, default=None
            Optional contextual information shared with encoded objects.
        logger: logging.Logger or str or None, default=None,
            Logger to use, or name of a logger to set up.
        """
        super().__init__(user_info=user_info, logger=logger)
        self.indent = indent
        self.sort_keys = sort_keys
        self.ensure_ascii = ensure_ascii
        self.allow_nan = allow_nan

    def serialize(self, tree: Any) -> bytes:
        try:
            dump = json.dumps(
                tree,
                indent=self.indent,
                sort_keys=self.sort_keys,
                ensure_ascii=self.ensure_ascii,
                allow_nan=self.allow_nan,
            )
        except (TypeError, ValueError) as exc:
            raise EncodingError(
                tree, [], f"Failed to serialize data to JSON: {exc}"
            ) from exc
        return dump.encode("utf-8")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON literal: {name}.")


class JSONDecoder(AnyDecoder):
    """Engine decoding values from JSON documents."""

    format_name = "json"

    def __init__(
        self,
        allow_nan: bool = True,
        user_info: Optional[Dict[str, Any]] = None,
        logger: Union[logging.Logger, str, None] = None,
    ) -> None:
        """Instantiate the JSON decoder.

        Parameters
        ----------
        allow_nan: bool, default=True
            Whether to accept non-standard NaN and Infinity literals.
        user_info: dict[str, any] or None, default=None
            Optional contextual information shared with decoded types.
        logger: logging.Logger or str or None, default=None,
            Logger to use, or name of a logger to set up.
        """
        super().__init__(user_info=user_info, logger=logger)
        self.allow_nan = allow_nan

    def deserialize(self, data: Union[bytes, str]) -> Any:
        kwargs = {}  # type: Dict[str, Any]
        if not self.allow_nan:
            kwargs["parse_constant"] = _reject_constant
        try:
            return json.loads(data, **kwargs)
        except (UnicodeDecodeError, ValueError) as exc:
            raise DataCorruptedError(
                [], f"The given data was not valid JSON: {exc}"
            ) from exc
