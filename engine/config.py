"""
Konfiguracja symulacji.

Domyślne wartości są tutaj; plik YAML (archery_config.yml) nadpisuje je
przez deep-merge. Tabele celności są walidowane przy wczytaniu.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict
import json
import os

import yaml

from models.shot import DEFAULT_PRECISION, Gender, InvalidPrecisionTable, PrecisionTable


class ConfigError(ValueError):
    """Niepoprawny plik konfiguracyjny."""


DEFAULT_CONFIG_PATH = 'archery_config.yml'

DEFAULTS: Dict[str, Any] = {
    'precision': {
        g.value: {
            'central': t.central,
            'intermediate': t.intermediate,
            'outside': t.outside,
            'miss': t.miss,
        }
        for g, t in DEFAULT_PRECISION.items()
    },
    'rules': {
        'streak_bonus_drains_stamina': False,
    },
    'simulation': {
        'default_games': 20000,
    },
}


@dataclass
class EngineConfig:
    data: Dict[str, Any] = field(default_factory=lambda: json.loads(json.dumps(DEFAULTS)))

    def get(self, path: str, default: Any = None) -> Any:
        cur: Any = self.data
        for part in path.split('.'):
            if isinstance(cur, dict) and part in cur:
                cur = cur[part]
            else:
                return default
        return cur

    def precision_tables(self) -> Dict[Gender, PrecisionTable]:
        raw = self.get('precision', {}) or {}
        if not isinstance(raw, dict):
            raise ConfigError("Sekcja 'precision' musi być słownikiem")
        known = {g.value for g in Gender}
        unknown = set(raw) - known
        if unknown:
            raise ConfigError(f"Nieznane płcie w 'precision': {sorted(unknown)}")
        tables: Dict[Gender, PrecisionTable] = {}
        for g in Gender:
            entry = raw.get(g.value)
            if entry is None:
                tables[g] = DEFAULT_PRECISION[g]
                continue
            if not isinstance(entry, dict):
                raise ConfigError(f"precision.{g.value} musi być słownikiem")
            tables[g] = PrecisionTable.from_mapping(entry)
        return tables

    @property
    def streak_drains_stamina(self) -> bool:
        value = self.get('rules.streak_bonus_drains_stamina', False)
        # tylko prawdziwy bool YAML; napis 'false' byłby prawdą
        if not isinstance(value, bool):
            raise ConfigError(f"rules.streak_bonus_drains_stamina musi być true/false, jest {value!r}")
        return value

    @property
    def default_games(self) -> int:
        value = self.get('simulation.default_games', 20000)
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ConfigError(f"simulation.default_games musi być nieujemną liczbą całkowitą, jest {value!r}")
        return value

    def validate(self) -> None:
        self.precision_tables()
        _ = self.streak_drains_stamina
        _ = self.default_games


def _merge(a: Dict[str, Any], b: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(a)
    for k, v in (b or {}).items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _merge(out[k], v)
        else:
            out[k] = v
    return out


def load_config(path: str = DEFAULT_CONFIG_PATH) -> EngineConfig:
    """
    Wczytuje konfigurację z YAML (jeśli plik istnieje) i waliduje tabele celności.

    Raises:
        ConfigError: Plik nie jest mapą YAML albo wartość ma zły typ
        InvalidPrecisionTable: Tabela nie sumuje się do 1.0
    """
    cfg = EngineConfig()
    if os.path.exists(path):
        with open(path, 'r', encoding='utf-8') as f:
            try:
                loaded = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"Nie udało się sparsować {path}: {e}") from e
        if not isinstance(loaded, dict):
            raise ConfigError(f"{path}: oczekiwano mapy na najwyższym poziomie")
        cfg.data = _merge(json.loads(json.dumps(DEFAULTS)), loaded)
    cfg.validate()
    return cfg


__all__ = ['ConfigError', 'EngineConfig', 'InvalidPrecisionTable', 'load_config', 'DEFAULTS']
