import pytest

from ballgame.game_over_menu import (
    FINAL_SCORE_TEXT,
    GAME_OVER_MENU,
    GAME_OVER_MENU_Z_INDEX,
    MAIN_MENU_BUTTON,
    QUIT_BUTTON,
    RESTART_BUTTON,
    build_game_over_menu,
    interact_with_main_menu_button,
    interact_with_quit_button,
    interact_with_restart_button,
    update_final_score_text,
)
from ballgame.states import AppState, EventQueue, GameOver, State
from ballgame.styles import (
    BACKGROUND_COLOR,
    GAME_OVER_MENU_STYLE,
    HOVERED_BUTTON_COLOR,
    NORMAL_BUTTON_COLOR,
    PRESSED_BUTTON_COLOR,
)
from ballgame.widgets import Interaction


@pytest.fixture
def menu():
    return build_game_over_menu()


def test_root_node(menu):
    assert menu.tag == GAME_OVER_MENU
    assert menu.style == GAME_OVER_MENU_STYLE
    assert menu.z_index == GAME_OVER_MENU_Z_INDEX == 2


def test_container_background(menu):
    assert len(menu.children) == 1
    assert menu.children[0].background_color == BACKGROUND_COLOR


def test_texts_in_order(menu):
    texts = [node.text for node in menu.walk() if node.text is not None]
    assert texts == ["Game Over", "Your final score was:", "Restart", "Main Menu", "Quit"]


@pytest.mark.parametrize(
    "tag, label",
    [(RESTART_BUTTON, "Restart"), (MAIN_MENU_BUTTON, "Main Menu"), (QUIT_BUTTON, "Quit")],
)
def test_buttons(menu, tag, label):
    button = menu.find(tag)
    assert button.button is True
    assert button.label == label
    assert button.background_color == NORMAL_BUTTON_COLOR


def test_restart_click_starts_game(menu):
    state = State(AppState.GAME_OVER)
    button = menu.find(RESTART_BUTTON)
    assert interact_with_restart_button(button, Interaction.CLICKED, state) is True
    assert state.pending == AppState.GAME
    assert button.background_color == PRESSED_BUTTON_COLOR


def test_restart_hover_only_recolours(menu):
    state = State(AppState.GAME_OVER)
    button = menu.find(RESTART_BUTTON)
    assert interact_with_restart_button(button, Interaction.HOVERED, state) is False
    assert state.pending is None
    assert button.background_color == HOVERED_BUTTON_COLOR
    interact_with_restart_button(button, Interaction.NONE, state)
    assert button.background_color == NORMAL_BUTTON_COLOR


def test_main_menu_click(menu):
    state = State(AppState.GAME_OVER)
    button = menu.find(MAIN_MENU_BUTTON)
    assert interact_with_main_menu_button(button, Interaction.CLICKED, state) is True
    assert state.apply() == (AppState.GAME_OVER, AppState.MAIN_MENU)


def test_main_menu_none_leaves_state(menu):
    state = State(AppState.GAME_OVER)
    button = menu.find(MAIN_MENU_BUTTON)
    assert interact_with_main_menu_button(button, Interaction.NONE, state) is False
    assert state.apply() is None


def test_quit_button(menu):
    button = menu.find(QUIT_BUTTON)
    assert interact_with_quit_button(button, Interaction.HOVERED) is False
    assert button.background_color == HOVERED_BUTTON_COLOR
    assert interact_with_quit_button(button, Interaction.CLICKED) is True
    assert button.background_color == PRESSED_BUTTON_COLOR


def test_update_final_score_text(menu):
    queue = EventQueue()
    reader = queue.reader()
    queue.send(GameOver(7))
    assert update_final_score_text(reader, menu) == "Final Score: 7"
    assert menu.find(FINAL_SCORE_TEXT).text == "Final Score: 7"


def test_update_without_events_keeps_text(menu):
    queue = EventQueue()
    assert update_final_score_text(queue.reader(), menu) is None
    assert menu.find(FINAL_SCORE_TEXT).text == "Your final score was:"


def test_update_uses_last_event_and_reads_once(menu):
    queue = EventQueue()
    reader = queue.reader()
    queue.send(GameOver(3))
    queue.send(GameOver(11))
    assert update_final_score_text(reader, menu) == "Final Score: 11"
    assert update_final_score_text(reader, menu) is None
    assert menu.find(FINAL_SCORE_TEXT).text == "Final Score: 11"