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

"""TOML-parsable configuration of coding engines."""

import dataclasses
import inspect
import logging
from typing import Any, Dict, Optional, Type, Union

from keycodec.engines._api import AnyDecoder, AnyEncoder
from keycodec.utils import TomlConfig, access_registered, access_types_mapping


__all__ = [
    "CodecConfig",
    "JSONOptions",
    "PlistOptions",
]


@dataclasses.dataclass
class JSONOptions:
    """Parameters of the JSON engines."""

    indent: Optional[int] = None
    sort_keys: bool = False
    ensure_ascii: bool = False
    allow_nan: bool = False


@dataclasses.dataclass
class PlistOptions:
    """Parameters of the property-list engines."""

    fmt: str = "binary"
    sort_keys: bool = True


def _filter_kwargs(cls: Type[Any], options: Dict[str, Any]) -> Dict[str, Any]:
    """Select the options that a class's constructor accepts."""
    params = inspect.signature(cls.__init__).parameters
    return {key: val for key, val in options.items() if key in params}


@dataclasses.dataclass
class CodecConfig(TomlConfig):
    """Configuration selecting and parametrizing coding engines.

    Usage:
    ```
    >>> config = CodecConfig.from_toml("codec.toml")
    >>> data = encoded(value, using=config.build_encoder())
    ```

    With a TOML file such as:
    ```
    engine = "plist"

    [plist]
    fmt = "xml"
    ```

    Attributes
    ----------
    engine: str, default="json"
        Format name of the engines to use ("json" or "plist", or that
        of any other registered AnyEncoder/AnyDecoder subclasses).
    json: JSONOptions
        Parameters of the JSON engines.
    plist: PlistOptions
        Parameters of the property-list engines.
    """

    engine: str = "json"
    json: JSONOptions = dataclasses.field(default_factory=JSONOptions)
    plist: PlistOptions = dataclasses.field(default_factory=PlistOptions)

    @classmethod
    def parse_engine(
        cls,
        field: dataclasses.Field,
        inputs: Any,
    ) -> str:
        """Parse the engine name, verifying it is registered."""
        engine = cls.default_parser(field, inputs)
        if engine not in access_types_mapping("AnyEncoder"):
            raise ValueError(f"Unknown coding engine: '{engine}'.")
        return engine

    def _options(self) -> Dict[str, Any]:
        options = getattr(self, self.engine, None)
        if dataclasses.is_dataclass(options):
            return dataclasses.asdict(options)
        return {}

    def build_encoder(
        self,
        user_info: Optional[Dict[str, Any]] = None,
        logger: Union[logging.Logger, str, None] = None,
    ) -> AnyEncoder:
        """Instantiate the configured encoding engine."""
        cls = access_registered(self.engine, group="AnyEncoder")
        kwargs = _filter_kwargs(cls, self._options())
        return cls(**kwargs, user_info=user_info, logger=logger)

    def build_decoder(
        self,
        user_info: Optional[Dict[str, Any]] = None,
        logger: Union[logging.Logger, str, None] = None,
    ) -> AnyDecoder:
        """Instantiate the configured decoding engine."""
        cls = access_registered(self.engine, group="AnyDecoder")
        kwargs = _filter_kwargs(cls, self._options())
        return cls(**kwargs, user_info=user_info, logger=logger)
