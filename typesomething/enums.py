"""Enumerations shared across the game."""

from enum import Enum


class Key(Enum):
    """Keys used to hit notes."""

    D = 0
    F = 1
    J = 2
    K = 3


class Scene(Enum):
    """Scenes the game can be in."""

    TITLE = 0
    GAME = 1
    SETTING = 2
    QUIT = 3
    END = 4


class Tile(Enum):
    """Contents of one cell of the play area."""

    NODE = 0
    ROAD = 1
    INPUT_NODE = 2
    OUTPUT_NODE = 3
    SPACE = 4


class JudgeResult(Enum):
    """Outcome of judging a key press against a note."""

    NONE = 0
    PERFECT = 1
    GOOD = 2
    MISS = 3