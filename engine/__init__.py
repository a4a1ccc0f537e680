"""Silnik symulacji łuczniczej i komponenty meczu."""
from engine.match import Match
from engine.game import Game
from engine.utils import make_rng

__all__ = ['Match', 'Game', 'make_rng']
