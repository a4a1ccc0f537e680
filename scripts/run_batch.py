from __future__ import annotations
import csv
from pathlib import Path
from typing import Dict, List

from engine.game import Game


def simulate_many(seeds: int = 20, games_per_seed: int = 50) -> List[Dict]:
    """Jedna sesja na seed; wiersz CSV na każdy mecz."""
    rows: List[Dict] = []
    for seed in range(seeds):
        game = Game.simulate(games_per_seed, seed=seed)
        lucky = game.lucky_archers_report()
        experienced = game.experienced_archers_report()
        for match_no, match in enumerate(game.matches, start=1):
            _, lucky_id, lucky_count = lucky[match_no - 1]
            _, exp_id, exp_value = experienced[match_no - 1]
            rows.append({
                "seed": seed,
                "match": match_no,
                "score_1": match.team_score(0),
                "score_2": match.team_score(1),
                "rounds_won_1": match.team_a.rounds_won,
                "rounds_won_2": match.team_b.rounds_won,
                "winner_gender": match.winner_gender.value,
                "lucky_id": lucky_id,
                "lucky_count": lucky_count,
                "experienced_id": exp_id,
                "experience": exp_value,
            })
    return rows


def write_csv(rows: List[Dict], path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    if not rows:
        return
    with path.open("w", encoding="utf-8", newline="") as f:
        w = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
        w.writeheader()
        w.writerows(rows)


if __name__ == "__main__":
    data = simulate_many()
    out = Path(__file__).resolve().parents[1] / "reports" / "batch_stats.csv"
    write_csv(data, out)
    print(f"Wrote {len(data)} rows to {out}")
