from decimal import Decimal
from typing import Any, Union
import math
import numbers


def _float_text(value: float) -> str:
    """Shortest round-trip digits, laid out with the plain/exponent cut-offs of a JS number"""
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    stripped = digits.rstrip("0")
    exponent += len(digits) - len(stripped)
    digits = stripped

    # value == 0.<digits> * 10 ** point
    point = exponent + len(digits)
    if len(digits) <= point <= 21:
        return sign + digits + "0" * (point - len(digits))
    if 0 < point <= 21:
        return sign + digits[:point] + "." + digits[point:]
    if -6 < point <= 0:
        return sign + "0." + "0" * -point + digits

    power = point - 1
    mantissa = digits if len(digits) == 1 else f"{digits[0]}.{digits[1:]}"
    return f"{sign}{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"


def number_text(value: Union[int, float]) -> str:
    """Render a number the way it is shown in the form, without a trailing .0"""
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        return _float_text(value)
    return str(value)


def scalar_text(value: Any) -> str:
    """Canonical text form of a scalar rule or answer value"""
    # bool is checked first, it is also an int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return number_text(value)
    if isinstance(value, numbers.Real):
        return number_text(float(value))
    return str(value)
