"""Sequence and stream adapters."""

from streamind.adapters.iterator import IndicatorIterator  # noqa: F401
from streamind.adapters.stream import IndicatorStream  # noqa: F401
