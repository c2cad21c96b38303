"""Seedable RNG for deterministic gameplay."""

import time

# Linear congruential generator parameters (Numerical Recipes)
LCG_MULTIPLIER = 1664525
LCG_INCREMENT = 1013904223
LCG_MODULUS = 2**32


class GameRNG:
    """Linear congruential random source for deterministic game behavior.

    All randomness in the game should go through this class to ensure
    deterministic behavior when using the same seed. The generator is passed
    explicitly to every call that needs it; there is no module-level instance.
    """

    def __init__(self, seed: int | None = None):
        """Initialize RNG with given seed.

        Args:
            seed: Integer seed for deterministic randomness. None or 0 means
                "no seed" and is replaced by the current wall-clock time.
        """
        if not seed:
            seed = int(time.time() * 1000)
        self.seed = seed % LCG_MODULUS
        self.state = self.seed

    def _next_float(self) -> float:
        """Advance the generator and return a float in [0.0, 1.0)."""
        self.state = (LCG_MULTIPLIER * self.state + LCG_INCREMENT) % LCG_MODULUS
        return self.state / LCG_MODULUS

    def next_int(self, min_inclusive: int, max_exclusive: int) -> int:
        """Return random integer in range [min_inclusive, max_exclusive).

        A degenerate range (max <= min) returns min_inclusive without
        advancing the generator.

        Args:
            min_inclusive: Lower bound (inclusive)
            max_exclusive: Upper bound (exclusive)

        Returns:
            Random integer in the half-open range
        """
        if max_exclusive <= min_inclusive:
            return min_inclusive

        span = max_exclusive - min_inclusive
        return min_inclusive + int(self._next_float() * span)

    def get_state(self) -> int:
        """Get the current generator state.

        Returns:
            State value that can be used with set_state
        """
        return self.state

    def set_state(self, state: int) -> None:
        """Restore a generator state captured with get_state.

        Args:
            state: State value from get_state
        """
        self.state = state % LCG_MODULUS
