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

"""Unit tests for the TOML-parsable `CodecConfig`."""

import logging
import os

import pytest

from keycodec.engines import (
    CodecConfig,
    JSONDecoder,
    JSONEncoder,
    JSONOptions,
    PlistOptions,
    PropertyListDecoder,
    PropertyListEncoder,
)


PLIST_TOML = """
engine = "plist"

[plist]
fmt = "xml"
sort_keys = false
"""


class TestCodecConfig:
    """Unit tests for `CodecConfig`."""

    def test_defaults(self) -> None:
        """Test that the default configuration selects JSON engines."""
        config = CodecConfig.from_params()
        assert config.engine == "json"
        assert config.json == JSONOptions()
        assert config.plist == PlistOptions()
        assert isinstance(config.build_encoder(), JSONEncoder)
        assert isinstance(config.build_decoder(), JSONDecoder)

    def test_from_params(self) -> None:
        """Test that engine options may be passed as dicts."""
        config = CodecConfig.from_params(json={"indent": 2, "sort_keys": True})
        encoder = config.build_encoder()
        assert isinstance(encoder, JSONEncoder)
        assert encoder.indent == 2
        assert encoder.sort_keys
        assert encoder.encode({"b": 1, "a": 2}) == b'{\n  "a": 2,\n  "b": 1\n}'

    def test_from_toml(self, tmp_path: str) -> None:
        """Test parsing a configuration from a TOML file."""
        path = os.path.join(tmp_path, "codec.toml")
        with open(path, "w", encoding="utf-8") as file:
            file.write(PLIST_TOML)
        config = CodecConfig.from_toml(path)
        assert config.engine == "plist"
        assert config.plist == PlistOptions(fmt="xml", sort_keys=False)
        encoder = config.build_encoder()
        decoder = config.build_decoder()
        assert isinstance(encoder, PropertyListEncoder)
        assert isinstance(decoder, PropertyListDecoder)
        data = encoder.encode({"a": 1})
        assert data.startswith(b"<?xml")
        assert decoder.decode(dict, data) == {"a": 1}

    def test_unknown_engine(self) -> None:
        """Test that unregistered engine names are rejected."""
        with pytest.raises(RuntimeError):
            CodecConfig.from_params(engine="yaml")

    def test_unknown_option(self) -> None:
        """Test that unknown engine options are rejected."""
        with pytest.raises(RuntimeError):
            CodecConfig.from_params(json={"colors": True})

    def test_logger_and_user_info(self) -> None:
        """Test that built engines receive the given context and logger."""
        logger = logging.getLogger("test-codec-config")
        config = CodecConfig.from_params()
        decoder = config.build_decoder(user_info={"v": 2}, logger=logger)
        assert decoder.logger is logger
        assert decoder.user_info == {"v": 2}
