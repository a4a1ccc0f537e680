"""Model drużyny łuczniczej."""
from __future__ import annotations
import random
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from models.archer import Archer
from models.shot import Gender, PrecisionTable

TEAM_SIZE = 5
STREAK_FOR_BONUS = 3


def _max_by(archers: Tuple[Archer, ...], key: Callable[[Archer], float]) -> Optional[Archer]:
    # max() zwraca pierwszego z remisujących, czyli kolejność w składzie
    if not archers:
        return None
    return max(archers, key=key)


@dataclass
class Team:
    """
    Reprezentuje drużynę łuczniczą.

    Pełny skład TEAM_SIZE łuczników buduje Team.create i tylko tej drogi
    używa Game. Konstruktor przyjmuje dowolny skład, także pusty; wtedy
    zapytania o łuczników zwracają None.

    Attributes:
        team_id: Numer drużyny w meczu (1 albo 2)
        archers: Skład (stały przez cały mecz)
        score: Punkty drużyny zebrane w meczu
        rounds_won: Wygrane rundy drużynowo
    """
    team_id: int
    archers: Tuple[Archer, ...] = ()
    score: int = 0
    rounds_won: int = 0

    def __post_init__(self) -> None:
        self.archers = tuple(self.archers)

    @classmethod
    def create(cls, team_id: int, first_archer_id: int, rng: random.Random,
               precision: Optional[Dict[Gender, PrecisionTable]] = None) -> "Team":
        """Nowa drużyna z pięcioma świeżymi łucznikami o kolejnych numerach."""
        archers = tuple(
            Archer(first_archer_id + i, rng, precision) for i in range(TEAM_SIZE)
        )
        return cls(team_id=team_id, archers=archers)

    @property
    def label(self) -> str:
        return f"Drużyna {self.team_id}"

    def luckiest_by_luck_value(self) -> Optional[Archer]:
        return _max_by(self.archers, lambda a: a.luck_value)

    def grant_bonus_shot_to_luckiest(self, round_index: int) -> Optional[Archer]:
        """
        Dodatkowy strzał dla łucznika z największym szczęściem w tej rundzie.

        Punkty trafiają tylko do wyniku drużyny, nie do wyniku rundy łucznika.

        Returns:
            Wybrany łucznik albo None przy pustym składzie
        """
        archer = self.luckiest_by_luck_value()
        if archer is None:
            return None
        self.score += archer.shoot()
        archer.record_bonus_shot_win(round_index)
        archer.increment_luck_counter()
        return archer

    def grant_streak_bonus(self, drain_stamina: bool = False) -> List[Archer]:
        """
        Strzał za serię: dostaje go każdy łucznik z serią równą dokładnie 3.

        Sprawdzane co rundę od nowa, więc seria stojąca na 3 daje bonus w każdej rundzie.

        Args:
            drain_stamina: Wariant, w którym strzelec traci też 1 pkt wytrzymałości
        """
        rewarded: List[Archer] = []
        for archer in self.archers:
            if archer.bonus_shots_won == STREAK_FOR_BONUS:
                self.score += archer.shoot()
                if drain_stamina:
                    archer.drain_stamina_by_experience()
                rewarded.append(archer)
        return rewarded

    def highest_round_scorer(self) -> Optional[Archer]:
        return _max_by(self.archers, lambda a: a.round_score)

    def most_rounds_won(self) -> Optional[Archer]:
        return _max_by(self.archers, lambda a: a.rounds_won)

    def most_experienced(self) -> Optional[Archer]:
        return _max_by(self.archers, lambda a: a.experience)

    def luckiest_by_counter(self) -> Optional[Archer]:
        return _max_by(self.archers, lambda a: a.luck_counter)

    def round_score_total(self) -> int:
        return sum(a.round_score for a in self.archers)

    def commit_round_total(self) -> int:
        """Dolicza sumę rundy do wyniku drużyny i zwraca tę sumę."""
        total = self.round_score_total()
        self.score += total
        return total

    def win_round(self) -> None:
        self.rounds_won += 1

    def reset_round_scores(self) -> None:
        for archer in self.archers:
            archer.reset_round_score()
