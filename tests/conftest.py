"""Shared test fixtures."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from svg_avatars import SvgAvatar, SvgAvatarBuilder

SVG_NS = "{http://www.w3.org/2000/svg}"


def parse_avatar(avatar: SvgAvatar) -> ET.Element:
    return ET.fromstring(bytes(avatar))


def avatar_paths(avatar: SvgAvatar) -> list[ET.Element]:
    return list(parse_avatar(avatar).iter(f"{SVG_NS}path"))


def parse_fill(fill: str) -> tuple[float, float, float]:
    """'hsl(H, S%, L%)' -> (H, S, L)."""
    assert fill.startswith("hsl(") and fill.endswith("%)")
    hue, saturation, lightness = fill[len("hsl("):-1].split(", ")
    return float(hue), float(saturation.rstrip("%")), float(lightness.rstrip("%"))


@pytest.fixture
def builder() -> SvgAvatarBuilder:
    return SvgAvatarBuilder()


@pytest.fixture
def foo_avatar() -> SvgAvatar:
    return SvgAvatarBuilder().identifier("foo").build()
