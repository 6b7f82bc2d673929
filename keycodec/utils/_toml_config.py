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

"""Base class to define TOML-parsable configuration containers."""

import dataclasses
import typing
import warnings

try:
    import tomllib  # type: ignore
except ModuleNotFoundError:
    import tomli as tomllib

from typing import Any, Dict, Optional, Type, Union

from typing_extensions import Self  # future: import from typing (py >=3.11)

__all__ = [
    "TomlConfig",
]


def _isinstance_generic(inputs: Any, typevar: Type) -> bool:
    """Override of `isinstance` built-in that supports some typing generics.

    Supported generics are Union (hence Optional), Dict, List and Tuple,
    each of which is type-checked recursively.

    Raises
    ------
    TypeError:
        If an unsupported `typevar` is provided.
    """
    origin = typing.get_origin(typevar)
    if origin is None:
        return (typevar is Any) or isinstance(inputs, typevar)
    args = typing.get_args(typevar)
    if origin is Union:
        return any(_isinstance_generic(inputs, arg) for arg in args)
    if origin is dict:
        return (
            isinstance(inputs, dict)
            and all(_isinstance_generic(k, args[0]) for k in inputs)
            and all(_isinstance_generic(v, args[1]) for v in inputs.values())
        )
    if origin is list:
        return isinstance(inputs, list) and all(
            _isinstance_generic(e, args[0]) for e in inputs
        )
    if origin is tuple:
        return (
            isinstance(inputs, tuple)
            and len(inputs) == len(args)
            and all(_isinstance_generic(e, t) for e, t in zip(inputs, args))
        )
    raise TypeError(
        "Unsupported subscripted generic for instance check: "
        f"'{typevar}' with origin '{origin}'."
    )


def _parse_float(src: str) -> Optional[float]:
    """Custom float parser that replaces nan values with None."""
    return None if src == "nan" else float(src)


def _field_default(field: dataclasses.Field) -> Any:
    """Return a dataclass field's default value, or raise a TypeError."""
    if field.default is not dataclasses.MISSING:
        return field.default
    if field.default_factory is not dataclasses.MISSING:
        return field.default_factory()
    raise TypeError(f"Field '{field.name}' does not provide a default value.")


@dataclasses.dataclass
class TomlConfig:
    """Base class to define TOML-parsable configuration containers.

    Subclasses are dataclasses, the fields of which are either base
    python types (optionally wrapped into Optional, List, Tuple or
    Dict typing generics) or dataclasses of their own, which will be
    instantiated from a same-name TOML section (or dict input).

    Instantiation classmethods
    --------------------------
    from_toml:
        Instantiate by parsing a TOML configuration file.
    from_params:
        Instantiate by parsing input keyword arguments.
    """

    @classmethod
    def from_params(
        cls,
        **kwargs: Any,
    ) -> Self:
        """Instantiate a structured configuration from keyword arguments.

        For each dataclass field, use the `parse_{field.name}` method if
        it exists, else the `default_parser` one. Missing arguments are
        set to None, which results in using default values.

        Raises
        ------
        RuntimeError:
            In case a field failed to be instantiated from its inputs.

        Warns
        -----
        UserWarning:
            In case some keyword arguments do not match any field.
        """
        fields = {}  # type: Dict[str, Any]
        for field in dataclasses.fields(cls):
            parser = getattr(cls, f"parse_{field.name}", cls.default_parser)
            inputs = kwargs.pop(field.name, None)
            try:
                fields[field.name] = parser(field, inputs)
            except Exception as exc:  # pylint: disable=broad-except
                raise RuntimeError(
                    f"Failed to parse '{field.name}' field: {exc}"
                ) from exc
        for key in kwargs:
            warnings.warn(
                f"Unsupported keyword argument in {cls.__name__}.from_params: "
                f"'{key}'. This argument was ignored."
            )
        return cls(**fields)

    @staticmethod
    def default_parser(
        field: dataclasses.Field,
        inputs: Any,
    ) -> Any:
        """Default method to instantiate a field from python inputs.

        - If `inputs` are valid as per `field.type`, return them.
        - If None (and None is invalid), return the field's default.
        - If a dict and `field.type` is a dataclass, use them as kwargs.

        Raises
        ------
        TypeError:
            If instantiation failed, for any reason.
        """
        field_type = field.type
        if isinstance(field_type, str):  # postponed annotations
            raise TypeError(f"Unresolved field type for '{field.name}'.")
        if _isinstance_generic(inputs, field_type):
            return inputs
        if inputs is None:
            return _field_default(field)
        if isinstance(inputs, dict) and dataclasses.is_dataclass(field_type):
            known = {f.name for f in dataclasses.fields(field_type)}
            unknown = set(inputs).difference(known)
            if unknown:
                raise TypeError(
                    f"Unsupported parameters for '{field.name}': {unknown}."
                )
            return field_type(**inputs)
        raise TypeError(
            f"Failed to parse inputs for field '{field.name}': expected "
            f"'{field_type}', got '{type(inputs).__name__}'."
        )

    @classmethod
    def from_toml(
        cls,
        path: str,
    ) -> Self:
        """Parse a structured configuration from a TOML file.

        Top-level keys and sections of the file are matched to this
        class's fields by name. Sections or keys for fields that have
        default values may be missing. As TOML does not have a null
        data type, None values should be written as nan ones.

        Raises
        ------
        RuntimeError:
            If parsing fails, whether due to misformatting of the TOML
            file, invalid parameters, or absence of required ones.

        Warns
        -----
        UserWarning:
            In case some sections of the TOML file are unused.
        """
        try:
            with open(path, "rb") as file:
                config = tomllib.load(file, parse_float=_parse_float)
        except tomllib.TOMLDecodeError as exc:
            raise RuntimeError(
                "Failed to parse the TOML configuration file."
            ) from exc
        params = {}  # type: Dict[str, Any]
        for field in dataclasses.fields(cls):
            if field.name in config:
                params[field.name] = config.pop(field.name)
            elif (
                field.default is dataclasses.MISSING
                and field.default_factory is dataclasses.MISSING
            ):
                raise RuntimeError(
                    "Missing required section in the TOML configuration "
                    f"file: '{field.name}'."
                )
        for name in config:
            warnings.warn(
                f"Unsupported section encountered in {path} TOML file: "
                f"'{name}'. This section will be ignored."
            )
        return cls.from_params(**params)
