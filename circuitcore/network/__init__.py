from .branch import Branch, DirectedBranch  # noqa: F401
from .node import Node  # noqa: F401
from .cycle import Cycle, CycleEquation, OpenPath, CycleResult  # noqa: F401
