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

"""Named types registries, used to look engines up by format name."""

import functools
from typing import Dict, Optional, Type


__all__ = [
    "access_registered",
    "access_types_mapping",
    "create_types_registry",
    "register_type",
]


REGISTRIES = {}  # type: Dict[str, TypesRegistry]


class TypesRegistry:
    """Class wrapping a dict registering type classes under str names."""

    def __init__(self, name: str, base: Type) -> None:
        """Instantiate the TypesRegistry.

        Parameters
        ----------
        name: str
            Name of the registry (used to document raised exceptions).
        base: type
            Base class that registered entries should inherit from.
        """
        self.name = name
        self.base = base
        self._reg = {}  # type: Dict[str, Type]

    def get_mapping(self) -> Dict[str, Type]:
        """Return a copy of the `{name: type}` mapping of this registry."""
        return self._reg.copy()

    def register(
        self,
        cls: Type,
        name: Optional[str] = None,
        repl: bool = False,
    ) -> None:
        """Add a (name, cls) entry to the registry.

        Raise a KeyError if `name` is already taken (unless `repl`),
        and a TypeError if `cls` does not inherit `self.base`.
        """
        if name is None:
            name = cls.__name__
        if (name in self._reg) and (not repl):
            raise KeyError(
                f"Name '{name}' has already been registered under "
                f"'{self.name}' registry."
            )
        if not issubclass(cls, self.base):
            raise TypeError(
                f"'{cls.__name__}' is not a '{self.base.__name__}' subclass."
            )
        self._reg[name] = cls

    def access(self, name: str) -> Type:
        """Access a registered type by its name."""
        if name not in self._reg:
            raise KeyError(f"No '{name}' entry under '{self.name}' registry.")
        return self._reg[name]


def create_types_registry(
    base: Optional[Type] = None,
    name: Optional[str] = None,
) -> Type:
    """Create a TypesRegistry for subclasses of a given base type.

    This function may either be called on an existing type, or be
    used as a class decorator (`@create_types_registry(name=...)`).

    Parameters
    ----------
    base: type or None, default=None
        Base class that registered entries should inherit from.
        If None, return a class decorator.
    name: str or None, default=None
        Name of the registry. If None, use `base.__name__`.

    Returns
    -------
    base: type
        The input `base` (enabling use as a decorator).
    """
    if base is None:
        decorator = functools.partial(create_types_registry, name=name)
        return decorator  # type: ignore
    name = base.__name__ if name is None else name
    if name in REGISTRIES:
        raise KeyError(f"TypesRegistry '{name}' already exists.")
    REGISTRIES[name] = TypesRegistry(name, base)
    return base


def register_type(
    cls: Optional[Type] = None,
    name: Optional[str] = None,
    group: Optional[str] = None,
    repl: bool = False,
) -> Type:
    """Register a class under a name, within a given types registry.

    This function may either be called on an existing type, or be
    used as a class decorator (`@register_type(name=..., group=...)`).

    Parameters
    ----------
    cls: type or None, default=None
        Class that is to be registered. If None, return a decorator.
    name: str or None, default=None
        Name under which to register the type. If None, use its name.
    group: str or None, default=None
        Name of the target TypesRegistry. If None, use the first-found
        registry with a compatible base type, or raise a TypeError.
    repl: bool, default=False
        Whether to overwrite any existing entry under `name`.

    Returns
    -------
    cls: type
        The input `cls` (enabling use as a decorator).
    """
    if cls is None:
        decorator = functools.partial(
            register_type, name=name, group=group, repl=repl
        )
        return decorator  # type: ignore
    if group is None:
        for key, reg in REGISTRIES.items():
            if issubclass(cls, reg.base):
                group = key
                break
        else:
            raise TypeError("Could not infer registration group.")
    elif group not in REGISTRIES:
        raise KeyError(f"Type registry '{group}' does not exist.")
    REGISTRIES[group].register(cls, name, repl)
    return cls


def access_registered(
    name: str,
    group: str,
) -> Type:
    """Access a type registered under `name` in the `group` registry.

    Raises
    ------
    KeyError:
        If the registry does not exist or has no `name` entry.
    """
    if group not in REGISTRIES:
        raise KeyError(f"Type registry '{group}' does not exist.")
    return REGISTRIES[group].access(name)


def access_types_mapping(
    group: str,
) -> Dict[str, Type]:
    """Return a copy of the `{name: type}` mapping of a given registry.

    Raises
    ------
    KeyError:
        If the `group` types registry does not exist.
    """
    if group not in REGISTRIES:
        raise KeyError(f"Type registry '{group}' does not exist.")
    return REGISTRIES[group].get_mapping()
