"""The running score, the high-score table and their text forms."""

from __future__ import annotations

from dataclasses import dataclass, field

from ballgame.states import EventReader, GameOver

DEFAULT_PLAYER_NAME = "Player"


@dataclass
class Score:
    """Stars collected in the current game."""

    value: int = 0

    def increment(self) -> int:
        """Add one point and return the new total."""
        self.value += 1
        return self.value


@dataclass
class HighScores:
    """Final scores of finished games, oldest first."""

    scores: list[tuple[str, int]] = field(default_factory=list)

    def add(self, name: str, score: int) -> None:
        self.scores.append((name, score))


def update_high_scores(
    reader: EventReader[GameOver], high_scores: HighScores
) -> bool:
    """Record every unread game-over event; True if the table changed."""
    changed = False
    for event in reader.read():
        high_scores.add(DEFAULT_PLAYER_NAME, event.score)
        changed = True
    return changed


def format_score(score: Score) -> str:
    """The line shown when the score changes."""
    return f"Score: {score.value}"


def _quote(name: str) -> str:
    escaped = name.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def format_high_scores(high_scores: HighScores) -> str:
    """The line shown when the high-score table changes."""
    entries = ", ".join(f"({_quote(name)}, {value})" for name, value in high_scores.scores)
    return f"High Scores: HighScores {{ scores: [{entries}] }}"