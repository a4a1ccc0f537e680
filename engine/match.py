from __future__ import annotations
from typing import Dict, List, Optional, Tuple

from models.archer import Archer
from models.shot import Gender
from models.team import Team
from engine.eventlog import add_event

# Eksportowane stałe
ROUNDS_PER_MATCH = 10
# bonus za serię od trzeciej rundy (licznik pętli od zera)
STREAK_BONUS_FROM_ROUND = 2


class Match:
    """
    Jeden mecz dwóch drużyn: 10 rund, strzały bonusowe, dogrywki i zwycięzcy.

    Stan: round_index rośnie od 1 o jeden na rundę; po 10 rundach mecz jest
    zakończony i ma ustawione winner_gender.
    """

    def __init__(self, team_a: Team, team_b: Team, *, verbose: bool = False,
                 log_events: bool = False, streak_drains_stamina: bool = False) -> None:
        self.teams: Tuple[Team, Team] = (team_a, team_b)
        self.verbose = verbose
        self.streak_drains_stamina = streak_drains_stamina
        self.round_index = 1
        self.rounds_played = 0
        self.winner_gender: Optional[Gender] = None
        self._events: Optional[List[Dict]] = [] if (log_events or verbose) else None

    @property
    def team_a(self) -> Team:
        return self.teams[0]

    @property
    def team_b(self) -> Team:
        return self.teams[1]

    @property
    def is_complete(self) -> bool:
        return self.rounds_played >= ROUNDS_PER_MATCH

    @property
    def events(self) -> List[Dict]:
        return list(self._events or [])

    def _add_event(self, kind: str, text: str) -> None:
        add_event(self, self.round_index, kind, text)

    def play(self) -> "Match":
        """Rozgrywa wszystkie rundy i ustala płeć zwycięzcy."""
        if self.is_complete:
            raise RuntimeError("Mecz został już rozegrany")
        self._add_event("banner", f"Mecz: {self.team_a.label} vs {self.team_b.label}")
        for round_no in range(ROUNDS_PER_MATCH):
            self.play_round(round_no)
        self.winner_gender = self.compute_winner_gender()
        self._add_event(
            "match_end",
            f"Koniec meczu! {self.team_a.label} {self.team_a.score} - {self.team_b.score} {self.team_b.label}"
            f" | zwycięska płeć: {self.winner_gender.label}",
        )
        return self

    def play_round(self, round_no: int) -> None:
        """
        Jedna runda.

        Args:
            round_no: Numer rundy liczony od zera (steruje bonusem za serię)
        """
        if self.is_complete:
            raise RuntimeError("Wszystkie rundy zostały już rozegrane")
        self.shoot_round()
        self.grant_bonus_shots()
        if round_no >= STREAK_BONUS_FROM_ROUND:
            self.grant_streak_bonuses()
        self.decide_round_archer()
        self.decide_round_team()
        self.round_index += 1
        self.rounds_played += 1
        for team in self.teams:
            team.reset_round_scores()

    def shoot_round(self) -> None:
        for team in self.teams:
            for archer in team.archers:
                archer.execute_round()

    def grant_bonus_shots(self) -> None:
        for team in self.teams:
            lucky = team.grant_bonus_shot_to_luckiest(self.round_index)
            if lucky is not None:
                self._add_event(
                    "bonus_shot",
                    f"R{self.round_index} - {team.label}: strzał za szczęście dla łucznika {lucky.archer_id}"
                    f" (seria {lucky.bonus_shots_won})",
                )

    def grant_streak_bonuses(self) -> None:
        for team in self.teams:
            for archer in team.grant_streak_bonus(drain_stamina=self.streak_drains_stamina):
                self._add_event(
                    "streak_bonus",
                    f"R{self.round_index} - {team.label}: łucznik {archer.archer_id} strzela za serię 3 bonusów",
                )

    def resolve_tiebreak(self, archer_a: Optional[Archer], archer_b: Optional[Archer]) -> Archer:
        """
        Rozstrzyga pojedynek dwóch najlepszych łuczników rundy.

        Przy remisie obaj strzelają ponownie (liczy się tylko nowy strzał),
        aż wyniki się różnią. Zwycięzca dostaje wygraną rundę.

        Raises:
            ValueError: Gdy któryś łucznik to None
        """
        if archer_a is None or archer_b is None:
            raise ValueError("Łucznicy w dogrywce nie mogą być None")
        score_a = archer_a.round_score
        score_b = archer_b.round_score
        extra = 0
        while score_a == score_b:
            score_a = archer_a.shoot()
            score_b = archer_b.shoot()
            extra += 1
        if extra:
            self._add_event(
                "tiebreak",
                f"R{self.round_index} - dogrywka łuczników {archer_a.archer_id} i {archer_b.archer_id}"
                f" rozstrzygnięta po {extra} strzałach",
            )
        winner = archer_a if score_a > score_b else archer_b
        winner.win_round()
        return winner

    def decide_round_archer(self) -> Archer:
        winner = self.resolve_tiebreak(
            self.team_a.highest_round_scorer(),
            self.team_b.highest_round_scorer(),
        )
        winner.gain_experience()
        self._add_event(
            "round_archer",
            f"R{self.round_index} - rundę indywidualnie wygrywa łucznik {winner.archer_id}",
        )
        return winner

    def decide_round_team(self) -> Optional[Team]:
        """Dolicza sumy rundy do wyników; równe sumy = runda bez zwycięzcy drużynowego."""
        total_a = self.team_a.commit_round_total()
        total_b = self.team_b.commit_round_total()
        if total_a == total_b:
            self._add_event("round_team", f"R{self.round_index} - remis drużynowy {total_a}:{total_b}")
            return None
        winner = self.team_a if total_a > total_b else self.team_b
        winner.win_round()
        self._add_event("round_team", f"R{self.round_index} - rundę wygrywa {winner.label} ({total_a}:{total_b})")
        return winner

    # --- zapytania ---

    def match_winner_archer(self) -> Archer:
        """Łucznik z największą liczbą wygranych rund; remis rozstrzyga się na korzyść drużyny 2."""
        a = self.team_a.most_rounds_won()
        b = self.team_b.most_rounds_won()
        if a is None or b is None:
            return a or b
        return a if a.rounds_won > b.rounds_won else b

    def compute_winner_gender(self) -> Optional[Gender]:
        winner = self.match_winner_archer()
        return winner.gender if winner is not None else None

    def most_experienced_archer(self) -> Archer:
        """Najbardziej doświadczony łucznik; remis na korzyść drużyny 2."""
        a = self.team_a.most_experienced()
        b = self.team_b.most_experienced()
        if a is None or b is None:
            return a or b
        return a if a.experience > b.experience else b

    def luckiest_archer(self) -> Archer:
        """Łucznik z największym licznikiem szczęścia; remis na korzyść drużyny 1."""
        a = self.team_a.luckiest_by_counter()
        b = self.team_b.luckiest_by_counter()
        if a is None or b is None:
            return a or b
        return a if a.luck_counter >= b.luck_counter else b

    def team_score(self, position: int) -> int:
        if position not in (0, 1):
            raise IndexError(f"Pozycja drużyny musi być 0 albo 1, jest {position}")
        return self.teams[position].score

    def all_archers(self) -> List[Archer]:
        return list(self.team_a.archers) + list(self.team_b.archers)
