"""Parts of a two-lane terminal rhythm game: notes, judgement, input and title screen."""

__version__ = "0.1.0"