"""Integer palindrome check."""


def is_palindrome(x: int) -> bool:
    """Return True if the decimal digits of ``x`` read the same both ways.

    Negative numbers are never palindromes.
    """
    if x < 0:
        return False
    reversed_number = 0
    remaining = x
    while remaining:
        remaining, digit = divmod(remaining, 10)
        reversed_number = reversed_number * 10 + digit
    return reversed_number == x