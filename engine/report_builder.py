from __future__ import annotations
"""
engine/report_builder.py

Składanie raportu końcowego sesji dla warstwy prezentacji (CLI/wykresy).
API: build_report(game) -> dict

Tylko proste typy (int/str/list/dict), bez formatowania liczb.
"""
from typing import Any, Dict, List


def build_report(game: Any) -> Dict:
    lucky: List[Dict] = [
        {'match': i, 'archer_id': archer_id, 'luck_counter': luck}
        for (i, archer_id, luck) in game.lucky_archers_report()
    ]
    experienced: List[Dict] = [
        {'match': i, 'archer_id': archer_id, 'experience': exp}
        for (i, archer_id, exp) in game.experienced_archers_report()
    ]
    genders: List[Dict] = [
        {'match': i, 'gender': label}
        for (i, label) in game.gender_by_match_report()
    ]
    total_a, total_b = game.team_score_totals()
    gender_wins = {g.label: n for g, n in game.gender_win_counts().items()}
    # klucze JSON muszą być napisami
    series = {
        str(archer_id): [[i, score] for (i, score) in points]
        for archer_id, points in game.score_series().items()
    }
    return {
        'games': len(game.matches),
        'winning_team': game.winning_team_label(),
        'winning_points': game.winning_points(),
        'team_scores': {'team_1': total_a, 'team_2': total_b},
        'gender_win_rate': game.gender_win_rate_label(),
        'gender_wins': gender_wins,
        'lucky_archers': lucky,
        'experienced_archers': experienced,
        'genders_by_match': genders,
        'score_series': series,
    }
