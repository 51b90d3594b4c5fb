from .base import Conductor, Direction  # noqa: F401
from .passive import Wire, Resistor  # noqa: F401
from .sources import Source  # noqa: F401
from .loads import Load, OverloadLoad  # noqa: F401
from .switch import Switch  # noqa: F401
