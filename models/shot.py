"""Wyniki strzału, płeć łucznika i tabele celności."""
from __future__ import annotations
import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class InvalidPrecisionTable(ValueError):
    """Tabela celności nie jest poprawnym rozkładem prawdopodobieństwa."""


class Shot(Enum):
    """Strefy tarczy w stałej kolejności progów: środek, pierścień, zewnętrzna, pudło."""
    CENTRAL = 10
    INTERMEDIATE = 9
    OUTSIDE = 8
    MISS = 0

    @property
    def score(self) -> int:
        return self.value


class Gender(Enum):
    MALE = "male"
    FEMALE = "female"

    @property
    def label(self) -> str:
        return _GENDER_LABELS[self]


_GENDER_LABELS = {Gender.MALE: "Mężczyzna", Gender.FEMALE: "Kobieta"}

# tolerancja sumy prawdopodobieństw
SUM_TOLERANCE = 1e-9


@dataclass(frozen=True)
class PrecisionTable:
    """
    Rozkład wyników pojedynczego strzału dla danej płci.

    Attributes:
        central: P(10 pkt)
        intermediate: P(9 pkt)
        outside: P(8 pkt)
        miss: P(0 pkt)
    """
    central: float
    intermediate: float
    outside: float
    miss: float

    def __post_init__(self) -> None:
        probs = self.as_tuple()
        for p in probs:
            if not isinstance(p, (int, float)) or math.isnan(p) or p < 0.0 or p > 1.0:
                raise InvalidPrecisionTable(f"Prawdopodobieństwo poza zakresem [0, 1]: {p!r}")
        total = sum(probs)
        if abs(total - 1.0) > SUM_TOLERANCE:
            raise InvalidPrecisionTable(f"Prawdopodobieństwa sumują się do {total}, a nie do 1.0")

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.central, self.intermediate, self.outside, self.miss)

    def thresholds(self) -> Tuple[float, float, float]:
        """Progi skumulowane dla CENTRAL, INTERMEDIATE i OUTSIDE."""
        c1 = self.central
        c2 = c1 + self.intermediate
        c3 = c2 + self.outside
        return (c1, c2, c3)

    def outcome(self, u: float) -> Shot:
        """Mapuje losowanie u z [0, 1) na strefę tarczy; wszystko ponad trzecim progiem to pudło."""
        c1, c2, c3 = self.thresholds()
        if u < c1:
            return Shot.CENTRAL
        if u < c2:
            return Shot.INTERMEDIATE
        if u < c3:
            return Shot.OUTSIDE
        return Shot.MISS

    @classmethod
    def from_mapping(cls, data: Dict[str, float]) -> "PrecisionTable":
        try:
            probs = [float(data[key]) for key in ("central", "intermediate", "outside", "miss")]
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidPrecisionTable(f"Niekompletna lub nieliczbowa tabela celności: {data!r}") from e
        return cls(*probs)


DEFAULT_PRECISION: Dict[Gender, PrecisionTable] = {
    Gender.MALE: PrecisionTable(central=0.20, intermediate=0.33, outside=0.40, miss=0.07),
    Gender.FEMALE: PrecisionTable(central=0.30, intermediate=0.38, outside=0.27, miss=0.05),
}
