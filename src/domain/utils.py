"""Domain Utilities - Helpers shared by the hospital and university models.

Security Impact:
    - No security impact - pure utility functions
"""

from typing import Any, Iterable, Optional, Union


def as_tuple(v: Optional[Union[str, Iterable[Any]]]) -> tuple:
    """Normalize an optional collection to a tuple.

    ``None`` becomes an empty tuple and a single string becomes a one-item
    tuple rather than a tuple of characters. Any other iterable is copied,
    so later changes to the caller's list do not reach the model.
    """
    if v is None:
        return ()
    if isinstance(v, str):
        return (v,)
    return tuple(v)
