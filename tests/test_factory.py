"""Tests for creating enhancements from stylesheet-style attributes."""

import pytest

from pageforge.core import types as pf
from pageforge.core.error import ConfigurationError
from pageforge.enhancement.border import Border
from pageforge.enhancement.factory import EnhancementFactory


@pytest.fixture
def factory():
    return EnhancementFactory()


class TestEnhancementFactory:
    def test_create_border_from_attributes(self, factory):
        border = factory.create("border", {
            "color": "#000000",
            "type": "top+left",
            "size": "0.5mm",
            "style": "2 1",
            "position": "-1",
        })
        assert isinstance(border, Border)
        assert border.type == pf.EDGE_TOP | pf.EDGE_LEFT
        assert border.style == [2.0, 1.0]
        assert border.size == "0.5mm"
        assert border.color == (0.0, 0.0, 0.0)

    def test_create_without_params(self, factory):
        assert factory.create("border").type == pf.EDGE_ALL

    def test_unknown_enhancement(self, factory):
        with pytest.raises(ConfigurationError, match="shadow"):
            factory.create("shadow", {})

    def test_unknown_attribute(self, factory):
        with pytest.raises(ConfigurationError, match="thickness"):
            factory.create("border", {"thickness": "2"})

    def test_invalid_value_fails_fast(self, factory):
        with pytest.raises(ConfigurationError):
            factory.create("border", {"type": "top+diagonal"})

    def test_register_custom_enhancement(self, factory):
        class Outline(Border):
            pass

        factory.register("outline", Outline)
        assert isinstance(factory.create("outline", {"size": 3}), Outline)
        assert factory.get_names() == ["border", "outline"]

    def test_create_all(self, factory):
        enhancements = factory.create_all({"border": {"type": "bottom"}})
        assert [e.type for e in enhancements] == [pf.EDGE_BOTTOM]
