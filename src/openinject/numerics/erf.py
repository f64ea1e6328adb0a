"""Inverse error function.

An initial estimate from Giles' single-precision polynomial
("Approximating the erfinv function", 2010) is refined with Newton steps
against ``math.erf``/``math.erfc``, which brings the result to double
precision.
"""

from __future__ import annotations

import math

_TWO_OVER_SQRT_PI = 2.0 / math.sqrt(math.pi)
_NEWTON_STEPS = 3


def erfinv(y: float) -> float:
    """Return ``x`` such that ``erf(x) == y``.

    Args:
        y: value in the closed interval [-1, 1].

    Returns:
        The inverse error function of ``y``; ``±inf`` at ``y == ±1``.

    Raises:
        ValueError: if ``y`` is NaN or outside [-1, 1].
    """
    if math.isnan(y) or y < -1.0 or y > 1.0:
        msg = f"erfinv is only defined on [-1, 1], got {y}"
        raise ValueError(msg)
    if y == 1.0:
        return math.inf
    if y == -1.0:
        return -math.inf
    if y == 0.0:
        return 0.0

    x = _initial_estimate(y)
    for _ in range(_NEWTON_STEPS):
        x -= _residual(x, y) / (_TWO_OVER_SQRT_PI * math.exp(-x * x))
    return x


def _residual(x: float, y: float) -> float:
    # erf(x) - y, written with erfc to keep precision in the tails
    if x > 0:
        return (1.0 - y) - math.erfc(x)
    return math.erfc(-x) - (1.0 + y)


def _initial_estimate(y: float) -> float:
    w = -math.log((1.0 - y) * (1.0 + y))
    if w < 5.0:
        w -= 2.5
        p = 2.81022636e-08
        p = 3.43273939e-07 + p * w
        p = -3.5233877e-06 + p * w
        p = -4.39150654e-06 + p * w
        p = 0.00021858087 + p * w
        p = -0.00125372503 + p * w
        p = -0.00417768164 + p * w
        p = 0.246640727 + p * w
        p = 1.50140941 + p * w
    else:
        w = math.sqrt(w) - 3.0
        p = -0.000200214257
        p = 0.000100950558 + p * w
        p = 0.00134934322 + p * w
        p = -0.00367342844 + p * w
        p = 0.00573950773 + p * w
        p = -0.0076224613 + p * w
        p = 0.00943887047 + p * w
        p = 1.00167406 + p * w
        p = 2.83297682 + p * w
    return p * y
