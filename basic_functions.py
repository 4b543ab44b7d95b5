"""
Basic functions: integer addition, a greeting and the factorial.
"""

from config import config
from logger import app_logger

def _check_width(value: int) -> int:
    """Raise OverflowError if value does not fit the configured integer width."""
    bits = config.INT_BITS
    if bits <= 0:
        return value
    
    limit = 1 << (bits - 1)
    if not -limit <= value < limit:
        raise OverflowError(f"{value} does not fit in a {bits}-bit signed integer")
    
    return value

def add(a: int, b: int) -> int:
    """Add two integers."""
    _check_width(a)
    _check_width(b)
    result = _check_width(a + b)
    app_logger.logger.debug(f"add({a}, {b}) = {result}")
    return result

def greet(name: str) -> None:
    """Print a greeting for name."""
    app_logger.logger.debug(f"Greeting {name!r}")
    print(f"Hello, {name}!")

def factorial(n: int) -> int:
    """Calculate the factorial of a non-negative integer."""
    if n < 0:
        raise ValueError("Factorial is not defined for negative numbers")
    
    result = 1
    for i in range(2, n + 1):
        result = _check_width(result * i)
    
    app_logger.logger.debug(f"factorial({n}) = {result}")
    return result
