from __future__ import annotations

import dataclasses
import unittest

from plainkit_converter import ConversionConfig, Converter


class TestConversionConfig(unittest.TestCase):
    def test_defaults(self) -> None:
        config = ConversionConfig()
        assert config.htmx is False
        assert config.alpine is False
        assert config.package == "main"
        assert config.fragment_container == "div"
        assert config.strict is False

    def test_normalization(self) -> None:
        config = ConversionConfig(htmx=1, package=" views ", fragment_container=" TR ")
        assert config.htmx is True
        assert config.package == "views"
        assert config.fragment_container == "tr"

    def test_empty_values_are_rejected(self) -> None:
        with self.assertRaises(ValueError):
            ConversionConfig(package="  ")
        with self.assertRaises(ValueError):
            ConversionConfig(fragment_container="")

    def test_frozen(self) -> None:
        config = ConversionConfig()
        with self.assertRaises(dataclasses.FrozenInstanceError):
            config.htmx = True  # type: ignore[misc]


class TestConverterConfig(unittest.TestCase):
    def test_keyword_flags_build_a_config(self) -> None:
        converter = Converter(htmx=True, alpine=True)
        assert converter.config == ConversionConfig(htmx=True, alpine=True)

    def test_explicit_config_wins(self) -> None:
        config = ConversionConfig(package="views")
        converter = Converter(config, htmx=True)
        assert converter.config is config
        assert converter.convert("<p>x</p>").startswith("package views\n\n")

    def test_fragment_container_is_used(self) -> None:
        converter = Converter(ConversionConfig(fragment_container="tr"))
        assert "return Td(T(\"x\"))" in converter.convert("<td>x</td>")
        assert "return T(\"x\")" in Converter().convert("<td>x</td>")
