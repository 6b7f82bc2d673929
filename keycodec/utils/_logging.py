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

"""Logging tools for keycodec internal use."""

import logging
import os
from typing import Optional, Union


__all__ = [
    "get_logger",
    "resolve_logger",
]


DEFAULT_FORMAT = "%(asctime)s:%(name)s:%(levelname)s: %(message)s"


def get_logger(
    name: str,
    level: int = logging.INFO,
    fpath: Optional[str] = None,
    s_fmt: Optional[str] = None,
) -> logging.Logger:
    """Create or access a logging.Logger instance with pre-set handlers.

    Parameters
    ----------
    name: str
        Name of the logger (used to create or retrieve it).
    level: int, default=logging.INFO
        Logging level below which messages are filtered out.
        Engines only emit DEBUG traces, hence are silent by default.
    fpath: str or None, default=None
        Optional path to a utf-8 text file to which to append
        logged messages (in addition to stream display).
    s_fmt: str or None, default=None
        Optional format string applied to the handlers.
        If None, use the default format set by keycodec.

    Returns
    -------
    logger: logging.Logger
        Retrieved or created Logger, with a StreamHandler, opt.
        a FileHandler, and possibly more (if pre-existing).
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    formatter = logging.Formatter(s_fmt or DEFAULT_FORMAT)
    # Reuse the first stream handler, so that repeated calls do not stack.
    for handler in logger.handlers:
        if isinstance(handler, logging.StreamHandler) and not isinstance(
            handler, logging.FileHandler
        ):
            handler.setFormatter(formatter)
            break
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    if fpath:
        folder = os.path.dirname(os.path.abspath(fpath))
        os.makedirs(folder, exist_ok=True)
        handler = logging.FileHandler(fpath, mode="a", encoding="utf-8")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


def resolve_logger(
    logger: Union[logging.Logger, str, None],
    default: str,
) -> logging.Logger:
    """Return `logger` if it is a Logger, else access one by name.

    Parameters
    ----------
    logger: logging.Logger or str or None
        Logger to use, or name of a logger to set up using `get_logger`.
    default: str
        Name of the logger to access if `logger` is None. That logger
        is returned as-is, leaving its level and handlers to the
        application's logging configuration.
    """
    if isinstance(logger, logging.Logger):
        return logger
    if logger is None:
        return logging.getLogger(default)
    return get_logger(logger)
