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

"""Shared pytest configuration code for the test suite."""

from typing import Tuple

import pytest

from keycodec.engines import (
    AnyDecoder,
    AnyEncoder,
    JSONDecoder,
    JSONEncoder,
    PropertyListDecoder,
    PropertyListEncoder,
)


ENGINES = {
    "json": (JSONEncoder, JSONDecoder),
    "plist": (PropertyListEncoder, PropertyListDecoder),
}


@pytest.fixture(name="engines", params=list(ENGINES))
def engines_fixture(request) -> Tuple[AnyEncoder, AnyDecoder]:
    """Provide a pair of (encoder, decoder) engines, for each format."""
    encoder_cls, decoder_cls = ENGINES[request.param]
    return encoder_cls(), decoder_cls()
