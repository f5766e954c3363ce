import os
from dataclasses import dataclass

A = 16807
M = 0x7FFFFFFF  # 2^31-1

def pm_next(state: int) -> int:
    return (state * A) % M

def seed_state(seed: int) -> int:
    """
    Fold any integer into a valid Park–Miller state (1..M-1).
    0 is a fixed point of the recurrence, so it is remapped to 1.
    """
    s = seed % M
    return s if s != 0 else 1

def fresh_seed() -> int:
    # 31 bits of OS entropy; used when the caller does not pin a seed
    return seed_state(int.from_bytes(os.urandom(4), "little"))

@dataclass
class PMRandom:
    state: int

    def __post_init__(self):
        self.state = seed_state(self.state)

    @classmethod
    def from_seed(cls, seed: int) -> "PMRandom":
        return cls(seed)

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def below(self, n: int) -> int:
        """Return a value in 0..n-1."""
        if n <= 0:
            raise ValueError(f"below() needs n > 0, got {n}")
        # Rejection keeps the draw unbiased for n that do not divide M-1
        limit = (M - 1) - ((M - 1) % n)
        while True:
            v = self.next32() - 1   # 0..M-2
            if v < limit:
                return v % n
