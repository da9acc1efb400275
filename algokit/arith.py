"""Integer arithmetic: factorials, binomial coefficients and primes."""

from __future__ import annotations


def factorial(n: int) -> int:
    """Return ``n!`` for a non-negative integer ``n``."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def n_choose_r(n: int, r: int) -> int:
    """Return the number of ways to choose ``r`` items from ``n``."""
    if not 0 <= r <= n:
        raise ValueError(f"r must lie in 0..n, got n={n}, r={r}")
    return factorial(n) // (factorial(r) * factorial(n - r))


def is_prime(num: int) -> bool:
    """Return True if ``num`` is a prime number."""
    if num <= 1:
        return False
    divisor = 2
    while divisor * divisor <= num:
        if num % divisor == 0:
            return False
        divisor += 1
    return True


def next_prime(n: int) -> int:
    """Return the smallest prime strictly greater than ``n``."""
    candidate = n + 1
    while not is_prime(candidate):
        candidate += 1
    return candidate