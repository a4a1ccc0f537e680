from __future__ import annotations
import argparse
import json
import sys
from pathlib import Path
from typing import Dict, List, Optional

from engine.config import ConfigError, DEFAULT_CONFIG_PATH, InvalidPrecisionTable, load_config
from engine.game import Game
from engine.report_builder import build_report
from engine.telemetry import max_deviation, sample_shot_distribution
from engine.utils import make_rng
from models.shot import Gender

# Wymuś wyjście UTF-8 w konsoli (zapobiega krzaczeniu polskich znaków)
try:
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")
except (AttributeError, ValueError):
    pass


def format_points(points: int) -> str:
    # separator tysięcy: spacja
    return f"{points:,}".replace(",", " ")


def _print_rows(title: str, rows: List[str], limit: int) -> None:
    print(f"\n{title}:")
    if not rows:
        print("   (brak meczów)")
        return
    shown = rows if limit <= 0 else rows[:limit]
    for line in shown:
        print(f"   {line}")
    if len(shown) < len(rows):
        print(f"   ... i {len(rows) - len(shown)} kolejnych")


def print_session_report(report: Dict, *, limit: int = 10) -> None:
    print("\n" + "=" * 70)
    print(f"🏹 RAPORT Z SYMULACJI: {report['games']} gier")
    print("=" * 70 + "\n")
    print(f"🏆 ZWYCIĘSKA DRUŻYNA: {report['winning_team']} ({format_points(report['winning_points'])} pkt)")
    ts = report["team_scores"]
    print(f"   Drużyna 1: {format_points(ts['team_1'])} | Drużyna 2: {format_points(ts['team_2'])}")

    wins = report["gender_wins"]
    print(f"\n⚥ PŁEĆ Z WIĘKSZĄ LICZBĄ ZWYCIĘSTW: {report['gender_win_rate']}")
    print("   " + "  |  ".join(f"{label}: {n}" for label, n in wins.items()))

    _print_rows(
        "NAJWIĘKSZY SZCZĘŚCIARZ W MECZU",
        [f"Mecz {r['match']}: Łucznik {r['archer_id']} - strzały za szczęście: {r['luck_counter']}"
         for r in report["lucky_archers"]],
        limit,
    )
    _print_rows(
        "NAJBARDZIEJ DOŚWIADCZONY W MECZU",
        [f"Mecz {r['match']}: Łucznik {r['archer_id']} - doświadczenie: {r['experience']}"
         for r in report["experienced_archers"]],
        limit,
    )
    _print_rows(
        "ZWYCIĘSKA PŁEĆ W MECZU",
        [f"Mecz {r['match']}: {r['gender']}" for r in report["genders_by_match"]],
        limit,
    )
    print("\n" + "=" * 70 + "\n")


def print_calibration(draws: int, seed: Optional[int], precision) -> None:
    rng = make_rng(seed)
    print(f"\n🎯 KALIBRACJA STRZAŁU ({draws} losowań na płeć)")
    for g in Gender:
        observed = sample_shot_distribution(g, draws, rng, precision)
        parts = "  ".join(f"{s.name}: {p:.4f}" for s, p in observed.items())
        dev = max_deviation(observed, precision[g])
        print(f"   {g.label:<10} {parts}  | maks. odchylenie {dev:.4f}")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Symulacja meczów łuczniczych 5 na 5")
    p.add_argument("--games", type=int, help="Liczba gier (domyślnie z konfiguracji: 20000)")
    p.add_argument("--seed", type=int)
    p.add_argument("--verbose", action="store_true", help="Wypisuj zdarzenia każdej rundy")
    p.add_argument("--config", type=str, default=DEFAULT_CONFIG_PATH, help="Plik YAML z konfiguracją")
    p.add_argument("--limit", type=int, default=10, help="Ile meczów pokazać w każdej sekcji (0 = wszystkie)")
    p.add_argument(
        "--save-json",
        dest="save_json",
        type=lambda v: str(v).lower() not in ("0", "false", "no"),
        default=True,
        help="Czy zapisać raport do pliku JSON (domyślnie True)",
    )
    p.add_argument(
        "--json-path",
        type=str,
        default=str(Path("out") / "last_report.json"),
        help="Ścieżka docelowa pliku JSON (domyślnie out/last_report.json)",
    )
    p.add_argument("--calibrate", type=int, metavar="DRAWS", help="Sprawdź rozkład strzałów i zakończ")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        cfg = load_config(args.config)
        precision = cfg.precision_tables()
    except (ConfigError, InvalidPrecisionTable) as e:
        print(f"[BŁĄD] Niepoprawna konfiguracja {args.config}: {e}")
        return 1

    if args.calibrate is not None:
        if args.calibrate <= 0:
            print("[BŁĄD] --calibrate wymaga dodatniej liczby losowań.")
            return 1
        print_calibration(args.calibrate, args.seed, precision)
        return 0

    games = args.games if args.games is not None else cfg.default_games
    if games < 0:
        print(f"[BŁĄD] Liczba gier nie może być ujemna: {games}")
        return 1

    print("\n🏹 ARCHERY SIMULATOR - MATCH ENGINE")
    print(f"   Gry: {games} | Drużyny: 2 x 5 łuczników | Rundy: 10\n")

    game = Game(
        make_rng(args.seed),
        precision,
        verbose=bool(args.verbose),
        streak_drains_stamina=cfg.streak_drains_stamina,
    )
    game.run(games)
    report = build_report(game)
    print_session_report(report, limit=args.limit)

    if args.save_json:
        out_path = Path(args.json_path)
        try:
            out_path.parent.mkdir(parents=True, exist_ok=True)
            out_path.write_text(json.dumps(report, ensure_ascii=False, indent=2), encoding="utf-8")
        except OSError as e:
            print(f"[UWAGA] Nie udało się zapisać raportu {out_path}: {e}")
        else:
            print(f"Raport zapisany: {out_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
