"""distle: guess a secret word from edit-distance feedback."""

__version__ = "0.1.0"
