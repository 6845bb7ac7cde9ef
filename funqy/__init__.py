r"""
'    ___________ _______    ________ _____.___.
'    \_   _____/|   \      \  \_____  \__  |   |
'     |    __)  |   /   |   \  /  / \  \/   |   |
'     |     \   |  /    |    \/   \_/.  \____   |
'     \___  /   |__\____|__  /\_____\ \_/ ______|
'         \/               \/        \__>/
"""

# expose the traversal primitives
from .traversal import each, reduce, shape_of, property_of

# expose the collection operations
from .extensions.core import map, pluck, select, reject, first, last, sort_by
from .extensions.terminal import every, any, contains
from .extensions.set import uniq, intersection, difference
from .extensions.zip import zip
from .extensions.utility import flatten, shuffle
from .extensions.merge import extend, defaults
from .extensions.functions import once, memoize, delay

# expose the factory functions
from .factories import range

# expose supporting types and schedulers
from .types import Shape, MISSING, strictly_equal
from .scheduler import (
    Scheduler,
    SchedulerConfig,
    ThreadingScheduler,
    ManualScheduler,
    DelayHandle,
    DEFAULT_SCHEDULER
)

# --- aliases ---
where = select
fold = reduce
unique = uniq
all_ = every

# define what `import *` does
__all__ = [
    "each",
    "reduce",
    "shape_of",
    "property_of",
    "map",
    "pluck",
    "select",
    "reject",
    "first",
    "last",
    "sort_by",
    "every",
    "any",
    "contains",
    "uniq",
    "intersection",
    "difference",
    "zip",
    "flatten",
    "shuffle",
    "extend",
    "defaults",
    "once",
    "memoize",
    "delay",
    "range",
    "Shape",
    "MISSING",
    "strictly_equal",
    "Scheduler",
    "SchedulerConfig",
    "ThreadingScheduler",
    "ManualScheduler",
    "DelayHandle",
    "DEFAULT_SCHEDULER",
    "where",
    "fold",
    "unique",
    "all_"
]
