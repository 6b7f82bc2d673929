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

"""Keycodec - typed, key-addressed helpers over structured encoding.

Keycodec is a thin ergonomics layer that reduces the boilerplate of
converting typed values to and from serialized representations (JSON
documents, binary or XML property lists). It leaves all actual
serialization to existing libraries, and provides with convenience
call shapes on top of them: keyed lookups by string or structured key,
single-value containers, optional-safe decoding, pluggable value
transformers, datetime format adapters and best-effort array decoding.

The package is organized into the following submodules:
* coding:
    Keyed coding facade: encoders, decoders, containers, keys and errors.
* engines:
    Engines serializing whole values to and from bytes (JSON, plist).
* transform:
    Value transformers and format adapters plugged into coding calls.
* typing:
    Type hinting utils, defined and exposed for code readability purposes.
* utils:
    Shared utils used across keycodec (logging, registries, config).

The most common entry points are also exposed at the package level:
```
>>> from keycodec import Codable, decoded, encoded
>>> @dataclasses.dataclass
... class User(Codable):
...     name: str
...     tags: List[str] = dataclasses.field(default_factory=list)
>>> decoded(encoded(User("ada")), User)
User(name='ada', tags=[])
```
"""

from . import (
    coding,
    engines,
    transform,
    typing,
    utils,
)
from .coding import (
    Codable,
    CodingKeys,
    Decoder,
    Encoder,
)
from .engines import (
    decoded,
    encoded,
)
from .transform import (
    DateFormatter,
    ISO8601DateFormatter,
    ValueTransformer,
)

__version__ = "1.0.0"
