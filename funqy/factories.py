import builtins
from .types import *


def range(n: int) -> List[int]:
    """create the list [0, 1, ..., n - 1]. empty when n <= 0."""
    return list(builtins.range(max(n, 0)))
