"""The Park-Miller "minimal standard" pseudo-random generator."""

_MASK64 = (1 << 64) - 1


def do_rand(ctx):
    """Advance state ``ctx`` and return the next value, which is also the new state.

    Computes (16807 * x) mod (2**31 - 1) by Schrage's method, with x
    mapped into [1, 0x7ffffffe]; the result lies in [0, 0x7ffffffd].
    """
    x = ((ctx & _MASK64) % 0x7FFFFFFE) + 1
    hi, lo = divmod(x, 127773)
    x = 16807 * lo - 2836 * hi
    if x < 0:
        x += 0x7FFFFFFF
    return x - 1


class ParkMiller:
    """A generator holding its own state, seeded with 1 by default."""

    def __init__(self, seed=1):
        self.state = seed & _MASK64

    def next(self):
        """Return the next pseudo-random value."""
        self.state = do_rand(self.state)
        return self.state

    def __iter__(self):
        return self

    def __next__(self):
        return self.next()