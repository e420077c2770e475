"""Echo functions that pass values through the library's conversions and back.

Each function converts its argument with the checked conversions of
``qfkit.convert`` and returns the result as a plain Python value or a numpy
array.  Values that cannot be converted raise ``QfError``.
"""

from typing import Any, List

import numpy as np

from qfkit.convert import (
    as_bool,
    as_dbl_matrix,
    as_dbl_vec,
    as_double,
    as_int,
    as_int_vec,
    as_str_vec,
    as_string,
    get_field,
)


def echo_bool(value: Any) -> bool:
    """Return the truth value of an integer."""
    return as_bool(value)


def echo_int(value: Any) -> int:
    """Return ``value`` as a signed 32-bit integer."""
    return as_int(value)


def echo_double(value: Any) -> float:
    """Return ``value`` as a float."""
    return as_double(value)


def echo_string(value: Any) -> str:
    """Return the ASCII text of ``value``."""
    return as_string(value)


def echo_int_list(value: Any) -> List[int]:
    """Return a one-dimensional sequence of integers as a list."""
    return as_int_vec(value).tolist()


def echo_dbl_list(value: Any) -> List[float]:
    """Return a one-dimensional sequence of numbers as a list of floats."""
    return as_dbl_vec(value).tolist()


def echo_str_list(value: Any) -> List[str]:
    """Return a one-dimensional sequence of strings as a list."""
    return as_str_vec(value)


def echo_int_array(value: Any) -> np.ndarray:
    """Return a one-dimensional sequence of integers as an int32 array."""
    return as_int_vec(value)


def echo_dbl_array(value: Any) -> np.ndarray:
    """Return a one-dimensional sequence of numbers as a float64 array."""
    return as_dbl_vec(value)


def echo_str_array(value: Any) -> np.ndarray:
    """Return a one-dimensional sequence of strings as a numpy unicode array."""
    return np.array(as_str_vec(value), dtype=np.str_)


def echo_dbl_array_2d(value: Any) -> np.ndarray:
    """Return a two-dimensional table of numbers as a float64 array."""
    return as_dbl_matrix(value)


def echo_dbl_vec_field(obj: Any, field: str) -> np.ndarray:
    """Return the entry or attribute ``field`` of ``obj`` as a float64 array."""
    if not isinstance(field, str):
        raise TypeError("field name must be a str")
    return as_dbl_vec(get_field(obj, field))