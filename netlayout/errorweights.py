"""Error weight vector for stiff ODE integration."""

from __future__ import annotations

from collections.abc import Sequence


def _first(value: float | Sequence[float]) -> float:
    if isinstance(value, (int, float)):
        return float(value)
    return float(value[0])


def error_weights(
    itol: int,
    rtol: float | Sequence[float],
    atol: float | Sequence[float],
    ycur: Sequence[float],
) -> list[float]:
    """Return ``rtol[i] * |ycur[i]| + atol[i]`` for every component.

    ``itol`` selects which tolerances are per-component:
    1 both scalar, 2 scalar ``rtol`` and vector ``atol``,
    3 vector ``rtol`` and scalar ``atol``, 4 both vectors.
    Any other value is treated as 1. A scalar tolerance may be given
    as a number or as a sequence whose first entry is used.
    """
    rtol_vector = itol in (3, 4)
    atol_vector = itol in (2, 4)
    r_scalar = None if rtol_vector else _first(rtol)
    a_scalar = None if atol_vector else _first(atol)

    weights = []
    for i, y in enumerate(ycur):
        r = rtol[i] if rtol_vector else r_scalar
        a = atol[i] if atol_vector else a_scalar
        weights.append(r * abs(y) + a)
    return weights