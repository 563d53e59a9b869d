"""Runtime values of the interpreter."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable

from .nodes import Type


def _to_f32(number: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", number))[0]
    except OverflowError:
        return math.copysign(math.inf, number)


def _format_f32(number: float) -> str:
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "inf" if number > 0 else "-inf"
    text = repr(number)
    for digits in range(1, 18):
        candidate = f"{number:.{digits}g}"
        if _to_f32(float(candidate)) == number:
            text = candidate
            break
    result = format(Decimal(text), "f")
    if "." in result:
        result = result.rstrip("0").rstrip(".")
    return result


def _integer(low: int, high: int) -> Callable[[Any], int]:
    def check(data: Any) -> int:
        if not isinstance(data, int) or isinstance(data, bool):
            raise TypeError(f"expected an integer, got {data!r}")
        if not low <= data <= high:
            raise OverflowError(f"{data} is out of range [{low}, {high}]")
        return data

    return check


def _float(data: Any) -> float:
    if not isinstance(data, (int, float)) or isinstance(data, bool):
        raise TypeError(f"expected a number, got {data!r}")
    return _to_f32(float(data))


def _string(data: Any) -> str:
    if not isinstance(data, str):
        raise TypeError(f"expected a string, got {data!r}")
    return data


def _char(data: Any) -> str:
    if not isinstance(data, str) or len(data) != 1:
        raise TypeError(f"expected a single character, got {data!r}")
    return data


def _bool(data: Any) -> bool:
    if not isinstance(data, bool):
        raise TypeError(f"expected a bool, got {data!r}")
    return data


def _void(data: Any) -> None:
    if data is not None:
        raise TypeError(f"void carries no data, got {data!r}")
    return None


_VALIDATORS: dict[Type, Callable[[Any], Any]] = {
    Type.INT: _integer(-(2**31), 2**31 - 1),
    Type.SHORT: _integer(-(2**7), 2**7 - 1),
    Type.LONG: _integer(-(2**127), 2**127 - 1),
    Type.FLOAT: _float,
    Type.STRING: _string,
    Type.CHAR: _char,
    Type.BOOL: _bool,
    Type.VOID: _void,
}


@dataclass(frozen=True)
class Value:
    """A typed runtime value.

    Integers are range checked for their kind and floats are kept at
    single precision.
    """

    kind: Type
    data: Any = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", _VALIDATORS[self.kind](self.data))

    def expect(self, kind: Type) -> Any:
        """Return the payload if this value is of ``kind``, else raise TypeError."""
        if self.kind is not kind:
            raise TypeError(f"expected {kind} value, got {self.kind}")
        return self.data

    def __str__(self) -> str:
        if self.kind is Type.VOID:
            return "void"
        if self.kind is Type.BOOL:
            return "true" if self.data else "false"
        if self.kind is Type.FLOAT:
            return _format_f32(self.data)
        return str(self.data)


VOID = Value(Type.VOID)