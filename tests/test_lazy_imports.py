"""Tests for the lazy top-level ``roost`` namespace."""

import pytest

import roost


class TestLazyImports:
    @pytest.mark.parametrize("name", roost.__all__)
    def test_every_export_resolves(self, name: str) -> None:
        assert getattr(roost, name) is not None

    def test_identity(self) -> None:
        from roost.app import App
        from roost.errors import NotFound
        from roost.routing.route import get

        assert roost.App is App
        assert roost.NotFound is NotFound
        assert roost.get is get

    def test_unknown_attribute(self) -> None:
        with pytest.raises(AttributeError, match="no attribute 'nope'"):
            roost.nope  # noqa: B018

    def test_version(self) -> None:
        assert roost.__version__
