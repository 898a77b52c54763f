"""UI node trees, button interactions and the main-menu buttons."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterator, Optional

from ballgame.states import AppState, State
from ballgame.styles import (
    HOVERED_BUTTON_COLOR,
    NORMAL_BUTTON_COLOR,
    PRESSED_BUTTON_COLOR,
    Color,
    Style,
    TextStyle,
)

MAIN_MENU = "main_menu"
PLAY_BUTTON = "play_button"
QUIT_BUTTON = "quit_button"


class Interaction(Enum):
    """How the pointer is interacting with a button."""

    CLICKED = auto()
    HOVERED = auto()
    NONE = auto()


@dataclass
class Node:
    """A UI element: a box, an image, a text or a button, with children."""

    tag: Optional[str] = None
    style: Style = field(default_factory=Style)
    background_color: Optional[Color] = None
    text: Optional[str] = None
    text_style: Optional[TextStyle] = None
    image: Optional[str] = None
    button: bool = False
    z_index: int = 0
    children: list[Node] = field(default_factory=list)

    def walk(self) -> Iterator[Node]:
        """Yield this node and its descendants, depth first, parents first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def find(self, tag: str) -> Node:
        """The first node in the tree carrying the tag."""
        for node in self.walk():
            if node.tag == tag:
                return node
        raise KeyError(tag)

    @property
    def label(self) -> Optional[str]:
        """The first text found in this node's subtree."""
        return next((node.text for node in self.walk() if node.text is not None), None)


def button_color(interaction: Interaction) -> Color:
    """Background colour of a button in the given interaction."""
    if interaction is Interaction.CLICKED:
        return PRESSED_BUTTON_COLOR
    if interaction is Interaction.HOVERED:
        return HOVERED_BUTTON_COLOR
    return NORMAL_BUTTON_COLOR


def interact_with_button(button: Node, interaction: Interaction) -> bool:
    """Recolour a button for an interaction; True when it was clicked."""
    button.background_color = button_color(interaction)
    return interaction is Interaction.CLICKED


def interact_with_play_button(
    button: Node, interaction: Interaction, app_state: State[AppState]
) -> bool:
    """Start the game when the play button is clicked."""
    clicked = interact_with_button(button, interaction)
    if clicked:
        app_state.set(AppState.GAME)
    return clicked


def interact_with_quit_button(button: Node, interaction: Interaction) -> bool:
    """Recolour the quit button; True when the application should exit."""
    return interact_with_button(button, interaction)