from __future__ import annotations
from typing import Dict, Optional
import random

from models.shot import DEFAULT_PRECISION, Gender, PrecisionTable, Shot


def sample_shot_distribution(gender: Gender, draws: int, rng: random.Random,
                             precision: Optional[Dict[Gender, PrecisionTable]] = None) -> Dict[Shot, float]:
    """Empiryczne częstości stref tarczy z `draws` losowań dla danej płci."""
    if draws <= 0:
        raise ValueError(f"Liczba losowań musi być dodatnia, jest {draws}")
    table = (precision or DEFAULT_PRECISION)[gender]
    counts = {s: 0 for s in Shot}
    for _ in range(draws):
        counts[table.outcome(rng.random())] += 1
    return {s: counts[s] / draws for s in Shot}


def max_deviation(observed: Dict[Shot, float], table: PrecisionTable) -> float:
    expected = dict(zip(Shot, table.as_tuple()))
    return max(abs(observed[s] - expected[s]) for s in Shot)
