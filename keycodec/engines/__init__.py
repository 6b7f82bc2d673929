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

"""Engines serializing whole values to and from bytes.

Engines pair the keyed coding facade (`keycodec.coding`) with an
actual serialization library, to which all byte-level work is left.

API
---

* [AnyEncoder][keycodec.engines.AnyEncoder]:
    Abstract engine encoding values into bytes.
* [AnyDecoder][keycodec.engines.AnyDecoder]:
    Abstract engine decoding values from bytes.

Engines
-------

* [JSONEncoder][keycodec.engines.JSONEncoder]
  and [JSONDecoder][keycodec.engines.JSONDecoder]:
    JSON engines, based on the `json` module (format name: "json").
* [PropertyListEncoder][keycodec.engines.PropertyListEncoder]
  and [PropertyListDecoder][keycodec.engines.PropertyListDecoder]:
    Binary or XML property-list engines, based on the `plistlib` module
    (format name: "plist").

Shortcuts
---------

* [encoded][keycodec.engines.encoded]:
    Encode a value into bytes, using JSON unless told otherwise.
* [decoded][keycodec.engines.decoded]:
    Decode a value from bytes, using JSON unless told otherwise.

Configuration
-------------

* [CodecConfig][keycodec.engines.CodecConfig]:
    TOML-parsable configuration to select and parametrize engines.
* [JSONOptions][keycodec.engines.JSONOptions]
  and [PlistOptions][keycodec.engines.PlistOptions]:
    Engine-specific parameters.
"""

from ._api import (
    AnyDecoder,
    AnyEncoder,
)
from ._json import (
    JSONDecoder,
    JSONEncoder,
)
from ._plist import (
    PropertyListDecoder,
    PropertyListEncoder,
)
from ._functions import (
    decoded,
    encoded,
)
from ._config import (
    CodecConfig,
    JSONOptions,
    PlistOptions,
)
