"""Funkcje pomocnicze dla silnika symulacji."""
import random
import time
from typing import Optional


def clock_seed() -> int:
    """Seed z zegara wysokiej rozdzielczości, inny przy każdym uruchomieniu."""
    return time.time_ns() ^ time.perf_counter_ns()


def make_rng(seed: Optional[int] = None) -> random.Random:
    """
    Tworzy generator liczb losowych dla jednej symulacji.

    Generator jest przekazywany jawnie do łuczników, meczów i sesji;
    jeden uchwyt = jeden strumień losowań na przebieg.

    Args:
        seed: Seed dla powtarzalności (None = seed z zegara)

    Returns:
        Nowy random.Random
    """
    if seed is None:
        seed = clock_seed()
    return random.Random(seed)
