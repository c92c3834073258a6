"""Picking concrete fonts for text drawn on a diagram, and texture sizes."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

# Concrete families tried, in order, for each generic family name.
_GENERIC_FAMILIES: dict[str, tuple[str, ...]] = {
    "sans": ("helvetica", "arial"),
    "serif": ("times", "times new roman", "garamond"),
    "monospaced": ("courier", "courier new", "monaco"),
}

# Pixels added around measured text so the glyphs get a small edge.
_TEXT_PADDING = 2


class FontWeight(Enum):
    NORMAL = "normal"
    BOLD = "bold"


class FontStyle(Enum):
    NORMAL = "normal"
    ITALIC = "italic"


@dataclass(frozen=True)
class FontSpec:
    """What the diagram asks for: a family name, a size, weight and style."""

    family: str
    size: float
    weight: FontWeight = FontWeight.NORMAL
    style: FontStyle = FontStyle.NORMAL


@dataclass(frozen=True)
class Font:
    """A concrete font from the available families."""

    family: str
    size: float
    weight: FontWeight = FontWeight.NORMAL
    style: FontStyle = FontStyle.NORMAL

    @property
    def style_name(self) -> str:
        """Style description such as ``"Bold Italic"``; empty for plain."""
        parts = []
        if self.weight is FontWeight.BOLD:
            parts.append("Bold")
        if self.style is FontStyle.ITALIC:
            parts.append("Italic")
        return " ".join(parts)


def _power_of_two_at_least(value: float) -> int:
    return 1 << math.ceil(math.log2(value))


def texture_dimensions(text_width: float, text_height: float) -> tuple[int, int]:
    """Texture width and height for text of the given measured extent.

    The text is padded by a pixel on each side and the texture is the
    smallest power of two that holds the padded text plus a further
    two-pixel margin.
    """
    if text_width < 0 or text_height < 0:
        raise ValueError("text extent must not be negative")
    padded_width = text_width + _TEXT_PADDING
    padded_height = text_height + _TEXT_PADDING
    return (
        _power_of_two_at_least(padded_width + 2),
        _power_of_two_at_least(padded_height + 2),
    )


class FontResolver:
    """Maps font specifications onto the families that are installed.

    Results are cached per specification. Generic names (``sans``,
    ``serif``, ``monospaced``) are tried against a fixed list of common
    families; any other name matches installed families that contain it,
    ignoring case. When nothing fits, the default family is used.
    """

    def __init__(self, families: Iterable[str], default_family: str) -> None:
        self.families = list(families)
        self.default_family = default_family
        self._cache: dict[FontSpec, Font] = {}

    def _default_font(self, spec: FontSpec) -> Font:
        return Font(self.default_family, spec.size, spec.weight, spec.style)

    def _with_family(self, spec: FontSpec, family: str) -> FontSpec:
        return FontSpec(family, spec.size, spec.weight, spec.style)

    def _resolve_generic(self, spec: FontSpec, candidates: tuple[str, ...]) -> Font:
        default = self._default_font(spec)
        font = default
        for candidate in candidates:
            if candidate in self.default_family:
                return default
            font = self.resolve(self._with_family(spec, candidate))
            if font != default:
                return font
        return font

    def _resolve_named(self, spec: FontSpec) -> Font:
        default = self._default_font(spec)
        font = default
        for family in self.family_list(spec.family):
            font = Font(family, spec.size, spec.weight, spec.style)
            if font != default:
                break
        return font

    def resolve(self, spec: FontSpec) -> Font:
        """The font to use for ``spec``."""
        cached = self._cache.get(spec)
        if cached is not None:
            return cached
        candidates = _GENERIC_FAMILIES.get(spec.family.lower())
        if candidates is not None:
            font = self._resolve_generic(spec, candidates)
        else:
            font = self._resolve_named(spec)
        self._cache[spec] = font
        return font

    def similar_families(self, name: str) -> set[str]:
        """Installed families whose name contains ``name``, ignoring case."""
        needle = name.lower()
        return {family for family in self.families if needle in family.lower()}

    def family_list(self, family: str) -> list[str]:
        """Families similar to ``family``, best match first."""
        return sorted(self.similar_families(family))