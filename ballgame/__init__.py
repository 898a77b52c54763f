"""An arcade ball game: collect stars, dodge bouncing enemies."""

__version__ = "0.1.0"