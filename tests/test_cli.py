from __future__ import annotations
import json

import pytest

import main as cli


def test_cli_writes_json_report(tmp_path, capsys):
    out_path = tmp_path / "report.json"
    code = cli.main([
        "--games", "3",
        "--seed", "1",
        "--limit", "2",
        "--config", str(tmp_path / "none.yml"),
        "--json-path", str(out_path),
    ])
    assert code == 0
    report = json.loads(out_path.read_text(encoding="utf-8"))
    assert report["games"] == 3
    assert len(report["lucky_archers"]) == 3
    out = capsys.readouterr().out
    assert "ZWYCIĘSKA DRUŻYNA" in out
    assert "... i 1 kolejnych" in out


def test_cli_without_json(tmp_path):
    out_path = tmp_path / "report.json"
    code = cli.main([
        "--games", "0",
        "--config", str(tmp_path / "none.yml"),
        "--save-json", "false",
        "--json-path", str(out_path),
    ])
    assert code == 0
    assert not out_path.exists()


def test_cli_rejects_bad_config(tmp_path, capsys):
    cfg = tmp_path / "bad.yml"
    cfg.write_text("precision:\n  male: {central: 0.9, intermediate: 0.9, outside: 0, miss: 0}\n", encoding="utf-8")
    assert cli.main(["--games", "1", "--config", str(cfg), "--save-json", "false"]) == 1
    assert "[BŁĄD]" in capsys.readouterr().out


@pytest.mark.parametrize("body", [
    "precision:\n  male: {central: abc, intermediate: 0.33, outside: 0.40, miss: 0.07}\n",
    "rules:\n  streak_bonus_drains_stamina: 'false'\n",
    "simulation:\n  default_games: abc\n",
])
def test_cli_rejects_badly_typed_config(tmp_path, capsys, body):
    cfg = tmp_path / "bad.yml"
    cfg.write_text(body, encoding="utf-8")
    assert cli.main(["--games", "1", "--config", str(cfg), "--save-json", "false"]) == 1
    assert "[BŁĄD]" in capsys.readouterr().out


def test_cli_rejects_negative_games(tmp_path, capsys):
    assert cli.main(["--games", "-2", "--config", str(tmp_path / "none.yml"), "--save-json", "false"]) == 1
    assert "[BŁĄD]" in capsys.readouterr().out


def test_cli_calibration(tmp_path, capsys):
    code = cli.main(["--calibrate", "5000", "--seed", "3", "--config", str(tmp_path / "none.yml")])
    assert code == 0
    out = capsys.readouterr().out
    assert "KALIBRACJA" in out
    assert "Mężczyzna" in out and "Kobieta" in out


def test_format_points_thousands():
    assert cli.format_points(1234567) == "1 234 567"
    assert cli.format_points(12) == "12"
