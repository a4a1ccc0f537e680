"""Modele domenowe: łucznik, drużyna, strzał."""
