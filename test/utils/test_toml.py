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

"""Unit tests for the `TomlConfig` util."""

import dataclasses
import os
from typing import Any, Dict, List, Optional, Tuple

import pytest

from keycodec.utils import TomlConfig


@dataclasses.dataclass
class Section:
    """Dataclass parsed from a TOML section."""

    name: str = "default"
    level: int = 0


@dataclasses.dataclass
class DemoTomlConfig(TomlConfig):
    """Demonstration TomlConfig subclass."""

    req_int: int
    req_lst: List[str]
    opt_str: str = "default"
    opt_tup: Optional[Tuple[int, int]] = None
    opt_dct: Dict[str, float] = dataclasses.field(default_factory=dict)
    opt_sec: Section = dataclasses.field(default_factory=Section)
    opt_flt: Optional[float] = 1.0

    @classmethod
    def parse_opt_tup(
        cls,
        field: dataclasses.Field,
        inputs: Any,
    ) -> Optional[Tuple[int, int]]:
        """Custom parser for `opt_tup`, adding list-to-tuple conversion."""
        if isinstance(inputs, list):
            inputs = tuple(inputs)
        return cls.default_parser(field, inputs)

    @classmethod
    def get_field(cls, name: str) -> dataclasses.Field:
        """Access the definition of a given dataclass field."""
        return {field.name: field for field in dataclasses.fields(cls)}[name]


class TestTomlConfigDefaultParser:
    """Unit tests for `TomlConfig.default_parser`, using a demo subclass."""

    def test_int(self) -> None:
        """Test that the parser works for an int field."""
        field = DemoTomlConfig.get_field("req_int")
        assert TomlConfig.default_parser(field, 42) == 42
        with pytest.raises(TypeError):
            TomlConfig.default_parser(field, 42.0)
        with pytest.raises(TypeError):
            TomlConfig.default_parser(field, None)

    def test_lst(self) -> None:
        """Test that the parser works for a list of str field."""
        field = DemoTomlConfig.get_field("req_lst")
        value = ["this", "is", "a", "test"]
        assert TomlConfig.default_parser(field, value) is value
        with pytest.raises(TypeError):
            TomlConfig.default_parser(field, ["this", "fails", 0])

    def test_opt_tup(self) -> None:
        """Test that the parser works for an optional tuple of int field."""
        field = DemoTomlConfig.get_field("opt_tup")
        assert TomlConfig.default_parser(field, None) is None
        value = (12, 15)
        assert TomlConfig.default_parser(field, value) is value
        with pytest.raises(TypeError):
            TomlConfig.default_parser(field, (12, 15, 18))
        with pytest.raises(TypeError):
            TomlConfig.default_parser(field, (12, "15"))

    def test_opt_dct(self) -> None:
        """Test that the parser works for a dict field with a factory."""
        field = DemoTomlConfig.get_field("opt_dct")
        assert TomlConfig.default_parser(field, None) == {}
        value = {"a": 0.0, "b": 1.0}
        assert TomlConfig.default_parser(field, value) is value
        with pytest.raises(TypeError):
            TomlConfig.default_parser(field, {"a": "val"})

    def test_opt_sec(self) -> None:
        """Test that the parser builds dataclass fields from dicts."""
        field = DemoTomlConfig.get_field("opt_sec")
        assert TomlConfig.default_parser(field, None) == Section()
        built = TomlConfig.default_parser(field, {"name": "test"})
        assert built == Section(name="test")
        with pytest.raises(TypeError):
            TomlConfig.default_parser(field, {"invalid": "kwarg"})
        with pytest.raises(TypeError):
            TomlConfig.default_parser(field, "invalid")


class TestTomlConfigFromParams:
    """Unit tests for `TomlConfig.from_params`, using a demo subclass."""

    exhaustive_params = {
        "req_int": 0,
        "req_lst": ["test"],
        "opt_str": "test",
        "opt_tup": (0, 1),
        "opt_dct": {"key": 0.0},
        "opt_sec": Section("test", 1),
        "opt_flt": None,
    }

    def test_all_params(self) -> None:
        """Test that parsing from an exhaustive dict of valid params works."""
        parsed = DemoTomlConfig.from_params(**self.exhaustive_params)
        assert isinstance(parsed, DemoTomlConfig)
        for key, val in self.exhaustive_params.items():
            assert getattr(parsed, key) == val

    def test_partial_params(self) -> None:
        """Test that parsing without some optional params works."""
        parsed = DemoTomlConfig.from_params(req_int=0, req_lst=["test"])
        assert parsed.opt_str == "default"
        assert parsed.opt_sec == Section()

    def test_bad_params(self) -> None:
        """Test that parsing with some bad params fails."""
        with pytest.raises(RuntimeError):
            DemoTomlConfig.from_params(req_int=0, opt_str="test")
        with pytest.raises(RuntimeError):
            DemoTomlConfig.from_params(req_int=0, req_lst=1)

    def test_extra_params(self) -> None:
        """Test that providing extra parameters raises a warning."""
        with pytest.warns(UserWarning):
            DemoTomlConfig.from_params(req_int=0, req_lst=["1"], extra=2)


class TestTomlConfigFromToml:
    """Unit tests for `TomlConfig.from_toml`, using a demo subclass."""

    exhaustive_toml = """
    req_int = 0
    req_lst = ["test"]
    opt_str = "test"
    opt_tup = [0, 1]
    opt_dct = {key = 0.0}
    opt_flt = nan

    [opt_sec]
    name = "test"
    level = 1
    """

    def write(self, folder: str, content: str) -> str:
        """Export some TOML content to a file and return its path."""
        path = os.path.join(folder, "config.toml")
        with open(path, "w", encoding="utf-8") as file:
            file.write(content)
        return path

    def test_from_exhaustive_toml(self, tmp_path: str) -> None:
        """Test that parsing from an exhaustive and valid TOML file works."""
        path = self.write(tmp_path, self.exhaustive_toml)
        parsed = DemoTomlConfig.from_toml(path)
        assert isinstance(parsed, DemoTomlConfig)
        for key, val in TestTomlConfigFromParams.exhaustive_params.items():
            assert getattr(parsed, key) == val

    def test_missing_section_fails(self, tmp_path: str) -> None:
        """Test that a missing required field results in a RuntimeError."""
        path = self.write(tmp_path, "req_int = 0")
        with pytest.raises(RuntimeError):
            DemoTomlConfig.from_toml(path)

    def test_wrong_file_fails(self, tmp_path: str) -> None:
        """Test that a proper error is raised when parsing an invalid file."""
        path = self.write(tmp_path, "this is not a TOML file")
        with pytest.raises(RuntimeError):
            DemoTomlConfig.from_toml(path)

    def test_unused_section_warns(self, tmp_path: str) -> None:
        """Test that unused TOML contents raise a warning."""
        path = self.write(tmp_path, "unused = 1\n" + self.exhaustive_toml)
        with pytest.warns(UserWarning):
            DemoTomlConfig.from_toml(path)
