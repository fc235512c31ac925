"""Elementary indicators and the always-present adapter."""

from __future__ import annotations

from typing import Any, Generic

from streamind.indicators.base import Indicator, In, Out


class Identity(Indicator[In, In]):
    """Return the input unchanged."""

    __slots__ = ("_current",)

    def __init__(self) -> None:
        self._current: In | None = None

    def update(self, value: In) -> In:
        self._current = value
        return value

    @property
    def value(self) -> In | None:
        return self._current

    def reset(self) -> None:
        self._current = None


class Constant(Indicator[Any, Out], Generic[Out]):
    """Ignore the input and always return ``constant``."""

    __slots__ = ("constant",)

    def __init__(self, constant: Out) -> None:
        self.constant = constant

    def update(self, value: Any = None) -> Out:
        return self.constant

    @property
    def value(self) -> Out:
        return self.constant

    def reset(self) -> None:
        pass


class Fill(Indicator[In, Out]):
    """Always-present view of ``inner``: absent outputs become ``default``."""

    __slots__ = ("inner", "default")

    def __init__(self, inner: Indicator[In, Out], default: Out) -> None:
        self.inner = inner
        self.default = default

    def update(self, value: In) -> Out:
        output = self.inner.update(value)
        return self.default if output is None else output

    @property
    def ready(self) -> bool:
        return self.inner.ready

    @property
    def value(self) -> Out:
        output = self.inner.value
        return self.default if output is None else output

    def reset(self) -> None:
        self.inner.reset()
