from .effects import if_faulted, if_fulfilled, tap
from .filter import fault, filter_or
from .monad import ap, bibind, bimap, bind, fmap, map_error, then

__all__ = (
    # Monad
    "ap",
    "bibind",
    "bimap",
    "bind",
    "fmap",
    "map_error",
    "then",
    # Filter
    "fault",
    "filter_or",
    # Effects
    "if_faulted",
    "if_fulfilled",
    "tap",
)
