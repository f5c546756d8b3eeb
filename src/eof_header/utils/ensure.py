"""
Ensure (Assertion) Utilities
^^^^^^^^^^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Guard used by the header reader to reject a container on the first rule it
breaks.
"""

from typing import Callable, Union

from ..exceptions import EofError, InvalidEof


def ensure(
    value: bool,
    error: Union[EofError, Callable[[], BaseException], BaseException],
) -> None:
    """
    Does nothing if `value` is truthy, otherwise raises.

    Parameters
    ----------

    value :
        Condition the container must satisfy.

    error :
        Either the `EofError` kind to raise as `InvalidEof`, or an exception
        (or exception constructor) to raise as is.
    """
    if value:
        return
    if isinstance(error, EofError):
        raise InvalidEof(error)
    raise error  # type: ignore
