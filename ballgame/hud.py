"""The heads-up display: collected stars on the left, enemies on the right."""

from __future__ import annotations

from ballgame.scoring import Score
from ballgame.styles import (
    BACKGROUND_COLOR,
    HUD_IMAGE_STYLE,
    HUD_STYLE,
    LHS_STYLE,
    RHS_STYLE,
    hud_text_style,
)
from ballgame.widgets import Node
from ballgame.world import ENEMY_SPRITE, STAR_SPRITE

HUD = "hud"
SCORE_TEXT = "score_text"
ENEMY_TEXT = "enemy_text"

INITIAL_TEXT = "0"


def build_hud() -> Node:
    """A star with the score beside it, and the enemy count beside an enemy."""
    left = Node(
        style=LHS_STYLE,
        background_color=BACKGROUND_COLOR,
        children=[
            Node(style=HUD_IMAGE_STYLE, image=STAR_SPRITE),
            Node(tag=SCORE_TEXT, text=INITIAL_TEXT, text_style=hud_text_style()),
        ],
    )
    right = Node(
        style=RHS_STYLE,
        background_color=BACKGROUND_COLOR,
        children=[
            Node(tag=ENEMY_TEXT, text=INITIAL_TEXT, text_style=hud_text_style()),
            Node(style=HUD_IMAGE_STYLE, image=ENEMY_SPRITE),
        ],
    )
    return Node(tag=HUD, style=HUD_STYLE, children=[left, right])


def update_score_text(hud: Node, score: Score) -> str:
    """Show the current score; return the text set."""
    text = str(score.value)
    hud.find(SCORE_TEXT).text = text
    return text


def update_enemy_text(hud: Node, enemy_count: int) -> str:
    """Show how many enemies are on the field; return the text set."""
    if enemy_count < 0:
        raise ValueError(f"enemy count cannot be negative: {enemy_count}")
    text = str(enemy_count)
    hud.find(ENEMY_TEXT).text = text
    return text