from __future__ import annotations
import random
from collections import Counter
from typing import Dict, List, Optional, Tuple

from models.archer import Archer
from models.shot import Gender, PrecisionTable
from models.team import TEAM_SIZE, Team
from engine.match import Match
from engine.utils import make_rng

# Numery łuczników: drużyna 1 -> 1..5, drużyna 2 -> 6..10
TEAM_A_FIRST_ID = 1
TEAM_B_FIRST_ID = TEAM_A_FIRST_ID + TEAM_SIZE


class Game:
    """
    Sesja N niezależnych meczów i statystyki zbiorcze.

    Każdy mecz dostaje świeże drużyny; numery łuczników się powtarzają,
    stan nie. Statystyki są liczone od nowa z listy meczów przy każdym
    wywołaniu, więc kolejne wywołania dają ten sam wynik.
    """

    def __init__(self, rng: Optional[random.Random] = None,
                 precision: Optional[Dict[Gender, PrecisionTable]] = None, *,
                 verbose: bool = False, log_events: bool = False,
                 streak_drains_stamina: bool = False) -> None:
        self._rng = rng if rng is not None else make_rng()
        self._precision = precision
        self.verbose = verbose
        self.log_events = log_events
        self.streak_drains_stamina = streak_drains_stamina
        self.matches: List[Match] = []

    @classmethod
    def simulate(cls, n: int, seed: Optional[int] = None, **kwargs) -> "Game":
        return cls(make_rng(seed), **kwargs).run(n)

    def _new_match(self) -> Match:
        team_a = Team.create(1, TEAM_A_FIRST_ID, self._rng, self._precision)
        team_b = Team.create(2, TEAM_B_FIRST_ID, self._rng, self._precision)
        return Match(
            team_a,
            team_b,
            verbose=self.verbose,
            log_events=self.log_events,
            streak_drains_stamina=self.streak_drains_stamina,
        )

    def run(self, n: int) -> "Game":
        """
        Rozgrywa n meczów po kolei. Sesję można rozegrać tylko raz.

        Raises:
            ValueError: Gdy n nie jest nieujemną liczbą całkowitą
            RuntimeError: Gdy sesja ma już rozegrane mecze
        """
        if isinstance(n, bool) or not isinstance(n, int) or n < 0:
            raise ValueError(f"Liczba gier musi być nieujemną liczbą całkowitą, jest {n!r}")
        if self.matches:
            raise RuntimeError("Sesja została już rozegrana")
        for _ in range(n):
            match = self._new_match()
            match.play()
            self.matches.append(match)
        return self

    # --- płeć ---

    def gender_win_counts(self) -> Dict[Gender, int]:
        """Zwycięstwa wg płci; liczone od zera przy każdym wywołaniu."""
        counts: Counter = Counter({g: 0 for g in Gender})
        for match in self.matches:
            counts[match.winner_gender] += 1
        return {g: counts[g] for g in Gender}

    def gender_win_rate_label(self) -> str:
        counts = self.gender_win_counts()
        # remis (także przy zerze meczów) -> druga kategoria
        best = Gender.MALE if counts[Gender.MALE] > counts[Gender.FEMALE] else Gender.FEMALE
        return best.label

    def gender_by_match_report(self) -> List[Tuple[int, str]]:
        return [(i, m.winner_gender.label) for i, m in enumerate(self.matches, start=1)]

    # --- drużyny ---

    def team_score_totals(self) -> Tuple[int, int]:
        total_a = sum(m.team_score(0) for m in self.matches)
        total_b = sum(m.team_score(1) for m in self.matches)
        return total_a, total_b

    def winning_team_id(self) -> int:
        total_a, total_b = self.team_score_totals()
        return 2 if total_b > total_a else 1

    def winning_team_label(self) -> str:
        return f"Drużyna {self.winning_team_id()}"

    def winning_points(self) -> int:
        return max(self.team_score_totals())

    # --- raporty per mecz ---

    def lucky_archers_report(self) -> List[Tuple[int, int, int]]:
        rows = []
        for i, match in enumerate(self.matches, start=1):
            a = match.luckiest_archer()
            rows.append((i, a.archer_id, a.luck_counter))
        return rows

    def experienced_archers_report(self) -> List[Tuple[int, int, int]]:
        rows = []
        for i, match in enumerate(self.matches, start=1):
            a = match.most_experienced_archer()
            rows.append((i, a.archer_id, a.experience))
        return rows

    def all_archers(self) -> List[Archer]:
        archers: List[Archer] = []
        for match in self.matches:
            archers.extend(match.all_archers())
        return archers

    def score_series(self) -> Dict[int, List[Tuple[int, int]]]:
        """Punkty łączne każdego łucznika (1..10) w kolejnych meczach, do wykresu."""
        series: Dict[int, List[Tuple[int, int]]] = {
            archer_id: [] for archer_id in range(TEAM_A_FIRST_ID, TEAM_B_FIRST_ID + TEAM_SIZE)
        }
        for i, match in enumerate(self.matches, start=1):
            for archer in match.all_archers():
                series.setdefault(archer.archer_id, []).append((i, archer.total_score))
        return series
