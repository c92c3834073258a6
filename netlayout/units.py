"""SI base unit kinds and decimal scale prefixes."""

from __future__ import annotations

from enum import IntEnum


class BaseUnitKind(IntEnum):
    """The base units from which all other units are built."""

    dimensionless = 0  # must stay the lowest value
    meter = 1
    gram = 2
    second = 3
    ampere = 4
    kelvin = 5
    item = 6  # mole is derived through Avogadro's number
    candela = 7
    avogadro = 8
    undefined = 9


class Scale(IntEnum):
    """Decimal exponent attached to an SI prefix."""

    yocto = -24
    zepto = -21
    atto = -18
    femto = -15
    pico = -12
    nano = -9
    micro = -6
    milli = -3
    centi = -2
    deci = -1
    zero = 0
    hecto = 2
    kilo = 3
    mega = 6
    giga = 9
    tera = 12
    peta = 15
    exa = 18
    zetta = 21
    yotta = 24

    @property
    def prefix(self) -> str:
        """The one-letter symbol of this scale; empty for no scaling."""
        return _PREFIX_BY_SCALE[self]

    @classmethod
    def from_prefix(cls, prefix: str) -> "Scale":
        """Return the scale named by a prefix symbol such as ``"k"``."""
        try:
            return _SCALE_BY_PREFIX[prefix]
        except KeyError:
            raise ValueError(f"unknown unit prefix: {prefix!r}") from None

    @classmethod
    def prefix_from_scale(cls, scale: int) -> str:
        """Return the prefix symbol for a decimal exponent."""
        try:
            return cls(scale).prefix
        except ValueError:
            raise ValueError(f"no unit prefix for scale {scale}") from None


_PREFIX_BY_SCALE = {
    Scale.yocto: "y",
    Scale.zepto: "z",
    Scale.atto: "a",
    Scale.femto: "f",
    Scale.pico: "p",
    Scale.nano: "n",
    Scale.micro: "u",
    Scale.milli: "m",
    Scale.centi: "c",
    Scale.deci: "d",
    Scale.zero: "",
    Scale.hecto: "h",
    Scale.kilo: "k",
    Scale.mega: "M",
    Scale.giga: "G",
    Scale.tera: "T",
    Scale.peta: "P",
    Scale.exa: "E",
    Scale.zetta: "Z",
    Scale.yotta: "Y",
}

_SCALE_BY_PREFIX = {symbol: scale for scale, symbol in _PREFIX_BY_SCALE.items()}