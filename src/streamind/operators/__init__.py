"""Combinators that wrap any indicator."""

from streamind.operators.composition import Composition  # noqa: F401
from streamind.operators.elementary import Constant, Fill, Identity  # noqa: F401
from streamind.operators.map import Map  # noqa: F401
from streamind.operators.mature import Mature  # noqa: F401
from streamind.operators.parallel import Diff, Together  # noqa: F401
from streamind.operators.window import Window  # noqa: F401
