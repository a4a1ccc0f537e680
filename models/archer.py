"""Model łucznika."""
from __future__ import annotations
import math
import random
from typing import Dict, Optional

from models.shot import DEFAULT_PRECISION, Gender, PrecisionTable, Shot

STAMINA_RANGE = (25, 45)
STAMINA_PER_SHOT = 5
FATIGUE_RANGE = (1, 2)
START_EXPERIENCE = 10
EXPERIENCE_PER_WIN = 3
LUCK_MIN = 1.0
LUCK_MAX = 3.0
NO_BONUS_YET = -1


class Archer:
    """
    Reprezentuje łucznika w jednym meczu.

    Stan zmienia się wyłącznie przez metody poniżej; atrybuty są tylko do odczytu.

    Attributes:
        archer_id: Identyfikator (1..10 w meczu)
        gender: Płeć, wybiera tabelę celności
        stamina_budget: Wytrzymałość pozostała w bieżącej rundzie
        stamina_baseline: Wytrzymałość, do której łucznik wraca po rundzie
        experience: Doświadczenie (start 10, +3 za wygraną rundę)
        luck_value: Szczęście z [1, 3), losowane co rundę
        luck_counter: Ile razy dostał strzał za szczęście
        bonus_shots_won: Długość serii wygranych strzałów bonusowych
        last_bonus_round: Runda ostatniego strzału bonusowego (-1 = jeszcze żadnego)
    """

    def __init__(self, archer_id: int, rng: random.Random,
                 precision: Optional[Dict[Gender, PrecisionTable]] = None) -> None:
        self._rng = rng
        self._precision = precision or DEFAULT_PRECISION
        self._archer_id = int(archer_id)
        self._stamina_baseline = rng.randint(*STAMINA_RANGE)
        self._stamina_budget = self._stamina_baseline
        self._experience = START_EXPERIENCE
        self._luck_value = self._roll_luck()
        self._gender = rng.choice((Gender.MALE, Gender.FEMALE))
        self._round_score = 0
        self._total_score = 0
        self._rounds_won = 0
        self._luck_counter = 0
        self._bonus_shots_won = 0
        self._last_bonus_round = NO_BONUS_YET

    def __repr__(self) -> str:
        return (f"Archer(id={self._archer_id}, gender={self._gender.name}, "
                f"total={self._total_score}, exp={self._experience}, luck={self._luck_counter})")

    @property
    def archer_id(self) -> int:
        return self._archer_id

    @property
    def gender(self) -> Gender:
        return self._gender

    @property
    def stamina_budget(self) -> int:
        return self._stamina_budget

    @property
    def stamina_baseline(self) -> int:
        return self._stamina_baseline

    @property
    def experience(self) -> int:
        return self._experience

    @property
    def luck_value(self) -> float:
        return self._luck_value

    @property
    def luck_counter(self) -> int:
        return self._luck_counter

    @property
    def round_score(self) -> int:
        return self._round_score

    @property
    def total_score(self) -> int:
        return self._total_score

    @property
    def rounds_won(self) -> int:
        return self._rounds_won

    @property
    def bonus_shots_won(self) -> int:
        return self._bonus_shots_won

    @property
    def last_bonus_round(self) -> int:
        return self._last_bonus_round

    def _roll_luck(self) -> float:
        luck = LUCK_MIN + self._rng.random() * (LUCK_MAX - LUCK_MIN)
        # zaokrąglenie float może dać dokładnie 3.0
        if luck >= LUCK_MAX:
            luck = math.nextafter(LUCK_MAX, LUCK_MIN)
        return luck

    def draw_shot(self) -> Shot:
        """Jedno losowanie z [0, 1) przez tabelę celności płci łucznika."""
        return self._precision[self._gender].outcome(self._rng.random())

    def shoot(self) -> int:
        """
        Oddaje pojedynczy strzał.

        Nie zmienia stanu łucznika (poza zużyciem jednego losowania).

        Returns:
            Punkty: 10, 9, 8 albo 0
        """
        return self.draw_shot().score

    def execute_round(self) -> int:
        """
        Strzela, dopóki starcza wytrzymałości, potem regeneracja i nowe szczęście.

        Returns:
            Liczba oddanych strzałów
        """
        shots = 0
        while self._stamina_budget > 0:
            points = self.shoot()
            self._round_score += points
            self._total_score += points
            self._stamina_budget -= STAMINA_PER_SHOT
            shots += 1
        fatigue = self._rng.randint(*FATIGUE_RANGE)
        self._stamina_baseline -= fatigue
        self._stamina_budget = self._stamina_baseline
        self._luck_value = self._roll_luck()
        return shots

    def record_bonus_shot_win(self, round_index: int) -> None:
        """Aktualizuje serię strzałów bonusowych; seria trwa tylko w kolejnych rundach."""
        if self._last_bonus_round == NO_BONUS_YET:
            self._bonus_shots_won = 1
        elif round_index == self._last_bonus_round + 1:
            self._bonus_shots_won += 1
        else:
            self._bonus_shots_won = 1
        self._last_bonus_round = round_index

    def increment_luck_counter(self) -> None:
        self._luck_counter += 1

    def gain_experience(self) -> None:
        self._experience += EXPERIENCE_PER_WIN

    def drain_stamina_by_experience(self) -> None:
        self._stamina_budget -= 1

    def win_round(self) -> None:
        self._rounds_won += 1

    def reset_round_score(self) -> None:
        self._round_score = 0
