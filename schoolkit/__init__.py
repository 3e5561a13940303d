"""Small school and hobby utilities: statistics, equations, wire sizing, visit tracking, games and build helpers."""

__version__ = "0.1.0"