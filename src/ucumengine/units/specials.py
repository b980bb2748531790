"""Function pairs for special (non-proportional) units.

Each pair maps a value on the special scale to a value in the atom's
reference unit (``to_base``) and back (``from_base``). The conversion engine
applies the pair explicitly; the relation is never folded into a factor.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict
import math

from ..errors import RegistryError

_KELVIN_AT_ZERO_CELSIUS = 273.15


@dataclass(frozen=True)
class SpecialFunction:
    name: str
    to_base: Callable[[float], float]
    from_base: Callable[[float], float]


# Temperature scales are written around the Celsius offset so that the
# freezing point lands exactly on each scale's zero.
SPECIAL_FUNCTIONS: Dict[str, SpecialFunction] = {
    fn.name: fn
    for fn in (
        SpecialFunction(
            "cel",
            lambda x: x + _KELVIN_AT_ZERO_CELSIUS,
            lambda y: y - _KELVIN_AT_ZERO_CELSIUS,
        ),
        SpecialFunction(
            "degf",
            lambda x: (x - 32) * 5 / 9 + _KELVIN_AT_ZERO_CELSIUS,
            lambda y: (y - _KELVIN_AT_ZERO_CELSIUS) * 9 / 5 + 32,
        ),
        SpecialFunction(
            "degre",
            lambda x: x * 5 / 4 + _KELVIN_AT_ZERO_CELSIUS,
            lambda y: (y - _KELVIN_AT_ZERO_CELSIUS) * 4 / 5,
        ),
        SpecialFunction("ph", lambda x: 10.0 ** (-x), lambda y: -math.log10(y)),
        SpecialFunction("ln", math.exp, math.log),
        SpecialFunction("lg", lambda x: 10.0**x, math.log10),
        SpecialFunction("2lg", lambda x: 10.0 ** (x / 2), lambda y: 2 * math.log10(y)),
        SpecialFunction("100tan", lambda x: math.atan(x / 100), lambda y: 100 * math.tan(y)),
    )
}


def special_function(name: str) -> SpecialFunction:
    try:
        return SPECIAL_FUNCTIONS[name]
    except KeyError:
        raise RegistryError(f"Unknown special unit function '{name}'") from None


__all__ = ["SpecialFunction", "SPECIAL_FUNCTIONS", "special_function"]
