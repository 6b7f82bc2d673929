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

"""Numpy-related keycodec utils."""

from typing import Any, Dict

import numpy as np

from keycodec.utils._support import add_codable_support


__all__ = [
    "pack_numpy",
    "unpack_numpy",
]


def pack_numpy(array: np.ndarray) -> Dict[str, Any]:
    """Transform a numpy array into an encodable dict.

    Inverse operation of `keycodec.utils.unpack_numpy`.
    """
    return {
        "data": array.tobytes().hex(),
        "dtype": array.dtype.str,
        "shape": list(array.shape),
    }


def unpack_numpy(data: Dict[str, Any]) -> np.ndarray:
    """Return a numpy array based on packed information.

    Inverse operation of `keycodec.utils.pack_numpy`.
    """
    buffer = bytes.fromhex(data["data"])
    array = np.frombuffer(buffer, dtype=data["dtype"])
    return array.reshape(data["shape"]).copy()  # copy makes the array writable


add_codable_support(np.ndarray, pack_numpy, unpack_numpy, Dict[str, Any])
