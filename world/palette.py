"""Randomized sand colors. Seed -1 = new random seed each run; any other seed is reproducible."""

import random
from dataclasses import dataclass
from typing import Tuple

from world.constants import SAND_RED, SAND_GREEN, SAND_BLUE

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class Palette:
    """Inclusive (low, high) range per channel."""

    red: Tuple[int, int] = SAND_RED
    green: Tuple[int, int] = SAND_GREEN
    blue: Tuple[int, int] = SAND_BLUE

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            low, high = getattr(self, name)
            if not 0 <= low <= high <= 255:
                raise ValueError(f"{name} range must satisfy 0 <= low <= high <= 255, got ({low}, {high})")


def make_rng(seed: int) -> Tuple[random.Random, int]:
    """Return (rng, seed_used). If seed == -1, choose a new random seed."""
    if seed == -1:
        seed_used = random.randint(0, 2**31 - 1)
    else:
        seed_used = seed
    return random.Random(seed_used), seed_used


def random_color(rng: random.Random, palette: Palette = Palette()) -> Color:
    return (
        rng.randint(*palette.red),
        rng.randint(*palette.green),
        rng.randint(*palette.blue),
    )
