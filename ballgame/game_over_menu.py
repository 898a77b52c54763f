"""The menu shown when the player has been hit."""

from __future__ import annotations

from typing import Optional

from ballgame.states import AppState, EventReader, GameOver, State
from ballgame.styles import (
    BACKGROUND_COLOR,
    BUTTON_STYLE,
    GAME_OVER_MENU_CONTAINER_STYLE,
    GAME_OVER_MENU_STYLE,
    NORMAL_BUTTON_COLOR,
    button_text_style,
    final_score_text_style,
    title_text_style,
)
from ballgame.widgets import Interaction, Node, interact_with_button

GAME_OVER_MENU = "game_over_menu"
FINAL_SCORE_TEXT = "final_score_text"
RESTART_BUTTON = "restart_button"
MAIN_MENU_BUTTON = "main_menu_button"
QUIT_BUTTON = "quit_button"

TITLE = "Game Over"
FINAL_SCORE_PLACEHOLDER = "Your final score was:"

# Drawn above the HUD and the pause menu.
GAME_OVER_MENU_Z_INDEX = 2


def _button(tag: str, label: str) -> Node:
    return Node(
        tag=tag,
        style=BUTTON_STYLE,
        background_color=NORMAL_BUTTON_COLOR,
        button=True,
        children=[Node(text=label, text_style=button_text_style())],
    )


def build_game_over_menu() -> Node:
    """Title, final score and the restart, main-menu and quit buttons."""
    container = Node(
        style=GAME_OVER_MENU_CONTAINER_STYLE,
        background_color=BACKGROUND_COLOR,
        children=[
            Node(text=TITLE, text_style=title_text_style()),
            Node(
                tag=FINAL_SCORE_TEXT,
                text=FINAL_SCORE_PLACEHOLDER,
                text_style=final_score_text_style(),
            ),
            _button(RESTART_BUTTON, "Restart"),
            _button(MAIN_MENU_BUTTON, "Main Menu"),
            _button(QUIT_BUTTON, "Quit"),
        ],
    )
    return Node(
        tag=GAME_OVER_MENU,
        style=GAME_OVER_MENU_STYLE,
        z_index=GAME_OVER_MENU_Z_INDEX,
        children=[container],
    )


def interact_with_restart_button(
    button: Node, interaction: Interaction, app_state: State[AppState]
) -> bool:
    """Start a new game when the restart button is clicked."""
    clicked = interact_with_button(button, interaction)
    if clicked:
        app_state.set(AppState.GAME)
    return clicked


def interact_with_main_menu_button(
    button: Node, interaction: Interaction, app_state: State[AppState]
) -> bool:
    """Return to the main menu when the button is clicked."""
    clicked = interact_with_button(button, interaction)
    if clicked:
        app_state.set(AppState.MAIN_MENU)
    return clicked


def interact_with_quit_button(button: Node, interaction: Interaction) -> bool:
    """Recolour the quit button; True when the application should exit."""
    return interact_with_button(button, interaction)


def update_final_score_text(
    reader: EventReader[GameOver], menu: Node
) -> Optional[str]:
    """Show the score of each unread game-over event; return the last text set."""
    text_node = menu.find(FINAL_SCORE_TEXT)
    shown = None
    for event in reader.read():
        shown = f"Final Score: {event.score}"
        text_node.text = shown
    return shown