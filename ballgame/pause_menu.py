"""The menu shown while the simulation is paused."""

from __future__ import annotations

from ballgame.states import AppState, SimulationState, State
from ballgame.styles import (
    BACKGROUND_COLOR,
    BUTTON_STYLE,
    NORMAL_BUTTON_COLOR,
    PAUSE_MENU_CONTAINER_STYLE,
    PAUSE_MENU_STYLE,
    button_text_style,
    title_text_style,
)
from ballgame.widgets import Interaction, Node, interact_with_button

PAUSE_MENU = "pause_menu"
RESUME_BUTTON = "resume_button"
MAIN_MENU_BUTTON = "main_menu_button"
QUIT_BUTTON = "quit_button"

TITLE = "Pause Menu"

# Drawn above the HUD.
PAUSE_MENU_Z_INDEX = 1


def _button(tag: str, label: str) -> Node:
    return Node(
        tag=tag,
        style=BUTTON_STYLE,
        background_color=NORMAL_BUTTON_COLOR,
        button=True,
        children=[Node(text=label, text_style=button_text_style())],
    )


def build_pause_menu() -> Node:
    """Title and the resume, main-menu and quit buttons."""
    container = Node(
        style=PAUSE_MENU_CONTAINER_STYLE,
        background_color=BACKGROUND_COLOR,
        children=[
            Node(text=TITLE, text_style=title_text_style()),
            _button(RESUME_BUTTON, "Resume"),
            _button(MAIN_MENU_BUTTON, "Main Menu"),
            _button(QUIT_BUTTON, "Quit"),
        ],
    )
    return Node(
        tag=PAUSE_MENU,
        style=PAUSE_MENU_STYLE,
        z_index=PAUSE_MENU_Z_INDEX,
        children=[container],
    )


def interact_with_resume_button(
    button: Node, interaction: Interaction, simulation_state: State[SimulationState]
) -> bool:
    """Resume the simulation when the button is clicked."""
    clicked = interact_with_button(button, interaction)
    if clicked:
        simulation_state.set(SimulationState.RUNNING)
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