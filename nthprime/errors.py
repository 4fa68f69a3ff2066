"""
Exception types.

Bad input is reported with ValueError. InvariantError marks a defect in the
analytic bounds or the sieve itself; it is never a user error and retrying
reproduces it.
"""


class InvariantError(RuntimeError):
    """An internal guarantee of the nth-prime search did not hold."""
