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

"""Shared utils used across keycodec.

The functions and classes exposed by this submodule are listed below,
grouped thematically.

Codable support
---------------
Tools to add default coding support for 3rd-party or custom types.

* [CodableSupport][keycodec.utils.CodableSupport]:
    Dataclass wrapping a (pack, unpack) coding scheme for a type.
* [add_codable_support][keycodec.utils.add_codable_support]:
    Register a (pack, unpack) pair of functions to use on a given type.
* [get_codable_support][keycodec.utils.get_codable_support]:
    Retrieve the scheme registered for a type or its nearest parent.

Pre-registered schemes cover `bytes` (base64 string), `datetime.date`
and `datetime.datetime` (ISO-8601 strings), `decimal.Decimal` and
`uuid.UUID` (strings), and numpy arrays, through:

* [pack_numpy][keycodec.utils.pack_numpy]
  and [unpack_numpy][keycodec.utils.unpack_numpy]:
    Pair of functions to (un)pack a numpy ndarray as encodable data.

Types-registration
------------------
Tools to map class constructors to (name, group) string tuples.

* [access_registered][keycodec.utils.access_registered]:
    Retrieve a registered type from its name and group name.
* [access_types_mapping][keycodec.utils.access_types_mapping]:
    Return a copy of the `{name: type}` mapping of a given group.
* [create_types_registry][keycodec.utils.create_types_registry]:
    Create a types group from a base class (as a function or decorator).
* [register_type][keycodec.utils.register_type]:
    Register a type class (as a function or class-decorator).

Logging utils
-------------

* [get_logger][keycodec.utils.get_logger]:
    Access or create a logger, automating basic handlers' configuration.
* [resolve_logger][keycodec.utils.resolve_logger]:
    Use a given logger, or set one up by name.

Configuration
-------------

* [TomlConfig][keycodec.utils.TomlConfig]:
    Base class to define TOML-parsable configuration containers.
"""

from ._logging import (
    get_logger,
    resolve_logger,
)
from ._register import (
    access_registered,
    access_types_mapping,
    create_types_registry,
    register_type,
)
from ._support import (
    CodableSupport,
    add_codable_support,
    get_codable_support,
)
from ._numpy import (
    pack_numpy,
    unpack_numpy,
)
from ._toml_config import TomlConfig
