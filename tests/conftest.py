import pytest

from clipicons.glyphs import GLYPH_GROUPS
from clipicons.models import GlyphGroup


@pytest.fixture
def glyph_for():
    """Look up a group's glyph by group name."""
    by_name = {group.name: group.glyph for group in GLYPH_GROUPS}
    return by_name.__getitem__


@pytest.fixture
def make_group():
    """Factory fixture to create GlyphGroup instances for testing."""

    def _make_group(name: str = "sample", glyph: str = "*", extensions: tuple[str, ...] = ("smp",)) -> GlyphGroup:
        return GlyphGroup(name=name, glyph=glyph, extensions=extensions)

    return _make_group
