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

"""Unit tests for the logging utils."""

import logging
import os
import time

from keycodec.utils import get_logger, resolve_logger


def test_get_logger_handlers() -> None:
    """Test that `get_logger` sets up handlers without stacking them."""
    name = f"test_{time.time_ns()}"
    logger = get_logger(name, level=logging.DEBUG)
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert get_logger(name) is logger
    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO


def test_get_logger_file(tmp_path: str) -> None:
    """Test that `get_logger` may record messages to a file."""
    name = f"test_{time.time_ns()}"
    path = os.path.join(tmp_path, "logs", "codec.log")
    logger = get_logger(name, fpath=path, s_fmt="%(levelname)s:%(message)s")
    logger.info("Encoded value.")
    for handler in logger.handlers:
        handler.flush()
    with open(path, "r", encoding="utf-8") as file:
        assert file.read() == "INFO:Encoded value.\n"
    for handler in logger.handlers:
        handler.close()


def test_resolve_logger() -> None:
    """Test that `resolve_logger` passes loggers through or sets them up."""
    logger = logging.getLogger(f"test_{time.time_ns()}")
    assert resolve_logger(logger, "default") is logger
    name = f"test_{time.time_ns()}"
    assert resolve_logger(name, "default").name == name
    default = f"test_{time.time_ns()}"
    assert resolve_logger(None, default).name == default


def test_resolve_logger_keeps_default_configuration() -> None:
    """Test that `resolve_logger` leaves a default logger's setup as-is."""
    default = f"test_{time.time_ns()}"
    logging.getLogger(default).setLevel(logging.DEBUG)
    logger = resolve_logger(None, default)
    assert logger is logging.getLogger(default)
    assert logger.level == logging.DEBUG
    assert not logger.handlers
