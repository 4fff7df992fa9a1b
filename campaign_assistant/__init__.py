"""
D&D 3.5 campaign assistant.

Table-driven random generation (names, NPCs, encounters, treasure,
adventures) and the story tools built on it: backstories, plot outlines,
relationship tracking and per-character story tracking.
"""

__version__ = "1.0.0"
