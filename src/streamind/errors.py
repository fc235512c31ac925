"""
Construction-time errors for indicators and combinators.

Every indicator validates its parameters in ``__init__`` and raises an
``InvalidParameter`` subclass before any state is built, so a failed
construction never leaves a usable half-initialized object behind.
``update()`` never raises these.
"""

from __future__ import annotations

from typing import Any


class InvalidParameter(ValueError):
    """A constructor argument is outside its valid domain."""

    def __init__(self, name: str, value: Any, message: str | None = None) -> None:
        self.name = name
        self.value = value
        super().__init__(message or f"invalid parameter {name}={value!r}")


class InvalidRange(InvalidParameter):
    """Parameter outside a lower-, upper- or both-bounded range."""

    def __init__(
        self,
        name: str,
        value: Any,
        *,
        min: float | None = None,
        max: float | None = None,
    ) -> None:
        self.min = min
        self.max = max
        if min is not None and max is not None:
            bound = f"{min} <= {name} <= {max}"
        elif min is not None:
            bound = f"{min} <= {name}"
        else:
            bound = f"{name} <= {max}"
        super().__init__(
            name, value, f"invalid range: expected to be {bound}, but actually {value}."
        )


class InvalidRelation(InvalidParameter):
    """Two parameters violate a required relation (e.g. short < long)."""

    def __init__(
        self, operator: str, lhs: tuple[str, Any], rhs: tuple[str, Any]
    ) -> None:
        self.operator = operator
        self.lhs = lhs
        self.rhs = rhs
        (lname, lvalue), (rname, rvalue) = lhs, rhs
        super().__init__(
            lname,
            lvalue,
            f"invalid relation: expected to be {lname} {operator} {rname}, "
            f"found {lvalue} {operator} {rvalue}.",
        )


# ─── Validation helpers ────────────────────────────────────────────────────────


def require_period(name: str, value: Any, minimum: int = 1) -> int:
    """Return ``value`` if it is an integer ``>= minimum``, else raise."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameter(name, value, f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise InvalidRange(name, value, min=minimum)
    return value


def require_factor(name: str, value: float) -> float:
    """Smoothing factors live in the half-open interval (0, 1]."""
    if not 0.0 < value <= 1.0:
        raise InvalidParameter(
            name, value, f"invalid range: expected to be 0 < {name} <= 1, but actually {value}."
        )
    return float(value)
