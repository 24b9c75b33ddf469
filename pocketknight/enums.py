"""Enumerations shared across the game."""

from enum import Enum


class DifficultyLevel(Enum):
    """Difficulty chosen in the menu; NONE until the player picks one."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    NONE = "none"


class TntColor(Enum):
    """Colour of a TNT goblin: blue ones are the player's, red ones the enemy's."""

    BLUE = "blue"
    RED = "red"