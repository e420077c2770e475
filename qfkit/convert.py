"""Checked conversions of Python and numpy values to plain scalars, vectors and matrices."""

import operator
from typing import Any, List

import numpy as np

from qfkit.core import QfError, ensure

_LONG_MIN = -(2**63)
_LONG_MAX = 2**63 - 1
_MISSING = object()


def is_none(value: Any) -> bool:
    """True if ``value`` is None."""
    return value is None


def as_bool(value: Any) -> bool:
    """Truth value of an integer; other types are rejected."""
    ensure(isinstance(value, int), "asBool: arg not convertible to bool")
    return value != 0


def is_integer(value: Any) -> bool:
    """True if ``value`` is a Python integer (bools included)."""
    return isinstance(value, int)


def _as_long(value: Any, message: str) -> int:
    try:
        result = operator.index(value)
    except TypeError as exc:
        raise QfError(message) from exc
    ensure(_LONG_MIN <= result <= _LONG_MAX, message)
    return result


def as_int(value: Any) -> int:
    """Integer value of ``value``, truncated to a signed 32-bit integer."""
    result = _as_long(value, "asInt: arg not convertible to int") & 0xFFFFFFFF
    return result - 0x100000000 if result >= 0x80000000 else result


def is_double(value: Any) -> bool:
    """True if ``value`` is a Python float."""
    return isinstance(value, float)


def is_real(value: Any) -> bool:
    """True if ``value`` is an integer or a float."""
    return is_integer(value) or is_double(value)


def as_double(value: Any) -> float:
    """Float value of a number; strings and other objects are rejected."""
    message = "asDouble: arg not convertible to double"
    if isinstance(value, (str, bytes, bytearray)):
        raise QfError(message)
    try:
        return float(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise QfError(message) from exc


def is_string(value: Any) -> bool:
    """True if ``value`` is a str."""
    return isinstance(value, str)


def as_string(value: Any) -> str:
    """ASCII text of ``str(value)``, cut at the first NUL character."""
    text = str(value)
    try:
        text.encode("ascii")
    except UnicodeEncodeError as exc:
        raise QfError("asString: arg not convertible to std::string") from exc
    return text.split("\0", 1)[0]


def _as_array(value: Any, dtype: Any, ndim: int, message: str) -> np.ndarray:
    if isinstance(value, np.ndarray) and not np.can_cast(value.dtype, dtype, casting="safe"):
        raise QfError(f"cannot convert array of {value.dtype} to {np.dtype(dtype)}")
    try:
        arr = np.array(value, dtype=dtype)
    except (TypeError, ValueError, OverflowError) as exc:
        raise QfError(f"cannot convert input to an array of {np.dtype(dtype)}") from exc
    ensure(arr.ndim == ndim, message)
    return arr


def as_int_vec(value: Any) -> np.ndarray:
    """A one-dimensional int32 array made from ``value``."""
    arr = _as_array(value, np.int64, 1, "asIntVec: input object is not one dimensional")
    return arr.astype(np.int32)


def as_dbl_vec(value: Any) -> np.ndarray:
    """A one-dimensional float64 array made from ``value`` (always a copy)."""
    return _as_array(value, np.float64, 1, "asDblVec: input object is not one dimensional")


def as_dbl_matrix(value: Any) -> np.ndarray:
    """A two-dimensional float64 array made from ``value`` (always a copy)."""
    return _as_array(value, np.float64, 2, "asDblVecVec: input object is not two dimensional")


def as_str_vec(value: Any) -> List[str]:
    """A list of ASCII strings made from a one-dimensional sequence."""
    try:
        arr = np.asarray(value)
    except (TypeError, ValueError) as exc:
        raise QfError("asStrVec: input object not convertible to strings") from exc
    ensure(arr.ndim == 1, "asStrVec: input object is not one dimensional")
    try:
        encoded = arr.astype(np.bytes_)
    except (UnicodeEncodeError, TypeError, ValueError) as exc:
        raise QfError("asStrVec: input object not convertible to strings") from exc
    return [item.decode("ascii") for item in encoded]


def get_field(obj: Any, field: str) -> Any:
    """The entry ``field`` of a dict, or the attribute ``field`` of any other object."""
    if isinstance(obj, dict):
        result = obj.get(field, _MISSING)
    else:
        result = getattr(obj, field, _MISSING)
    if result is _MISSING:
        raise QfError(f"getField: no field {field}")
    return result