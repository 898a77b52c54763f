"""The main menu shown when the application starts."""

from __future__ import annotations

from ballgame.styles import (
    BUTTON_STYLE,
    IMAGE_STYLE,
    MAIN_MENU_STYLE,
    NORMAL_BUTTON_COLOR,
    TITLE_STYLE,
    button_text_style,
    title_text_style,
)
from ballgame.widgets import MAIN_MENU, PLAY_BUTTON, QUIT_BUTTON, Node

TITLE = "Bevy Ball Game"
PLAYER_IMAGE = "sprites/ball_blue_large.png"
ENEMY_IMAGE = "sprites/ball_red_large.png"


def _button(tag: str, label: str) -> Node:
    return Node(
        tag=tag,
        style=BUTTON_STYLE,
        background_color=NORMAL_BUTTON_COLOR,
        button=True,
        children=[Node(text=label, text_style=button_text_style())],
    )


def build_main_menu() -> Node:
    """Title flanked by two balls, then the play and quit buttons."""
    title = Node(
        style=TITLE_STYLE,
        children=[
            Node(style=IMAGE_STYLE, image=PLAYER_IMAGE),
            Node(text=TITLE, text_style=title_text_style()),
            Node(style=IMAGE_STYLE, image=ENEMY_IMAGE),
        ],
    )
    return Node(
        tag=MAIN_MENU,
        style=MAIN_MENU_STYLE,
        children=[
            title,
            _button(PLAY_BUTTON, "Play"),
            _button(QUIT_BUTTON, "Quit"),
        ],
    )