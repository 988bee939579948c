"""Prime selection for table sizing."""

# Witnesses that make Miller-Rabin deterministic for every n < 3.3e24.
_WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41)


def is_probable_prime(n: int) -> bool:
    """Miller-Rabin primality test.

    Exact for all 64-bit inputs.

    Args:
        n: Integer to test

    Returns:
        True if n is prime
    """
    if n < 2:
        return False
    for p in _WITNESSES:
        if n % p == 0:
            return n == p

    d = n - 1
    r = 0
    while d % 2 == 0:
        d //= 2
        r += 1

    for a in _WITNESSES:
        x = pow(a, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(r - 1):
            x = pow(x, 2, n)
            if x == n - 1:
                break
        else:
            return False
    return True


def find_prime(n: int) -> int:
    """Return the largest prime <= n.

    Args:
        n: Upper bound (inclusive)

    Returns:
        Largest prime not exceeding n

    Raises:
        ValueError: If n < 2
    """
    if n < 2:
        raise ValueError(f"no prime <= {n}")
    for candidate in range(n, 1, -1):
        if is_probable_prime(candidate):
            return candidate
    raise AssertionError("unreachable: 2 is prime")
