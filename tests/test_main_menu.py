from ballgame.main_menu import build_main_menu
from ballgame.states import AppState, State
from ballgame.styles import (
    BUTTON_STYLE,
    MAIN_MENU_STYLE,
    NORMAL_BUTTON_COLOR,
    PRESSED_BUTTON_COLOR,
    button_text_style,
    title_text_style,
)
from ballgame.widgets import (
    MAIN_MENU,
    PLAY_BUTTON,
    QUIT_BUTTON,
    Interaction,
    interact_with_play_button,
)


def test_root_is_main_menu():
    menu = build_main_menu()
    assert menu.tag == MAIN_MENU
    assert menu.style == MAIN_MENU_STYLE
    assert len(menu.children) == 3


def test_title_text_and_images():
    title = build_main_menu().children[0]
    assert [child.image for child in title.children] == [
        "sprites/ball_blue_large.png",
        None,
        "sprites/ball_red_large.png",
    ]
    assert title.children[1].text == "Bevy Ball Game"
    assert title.children[1].text_style == title_text_style()


def test_buttons_have_labels_and_styles():
    menu = build_main_menu()
    play = menu.find(PLAY_BUTTON)
    quit_button = menu.find(QUIT_BUTTON)
    assert play.label == "Play"
    assert quit_button.label == "Quit"
    for button in (play, quit_button):
        assert button.button is True
        assert button.style == BUTTON_STYLE
        assert button.background_color == NORMAL_BUTTON_COLOR
        assert button.children[0].text_style == button_text_style()


def test_button_order():
    tags = [node.tag for node in build_main_menu().walk() if node.button]
    assert tags == [PLAY_BUTTON, QUIT_BUTTON]


def test_each_build_is_independent():
    first = build_main_menu()
    second = build_main_menu()
    interact_with_play_button(
        first.find(PLAY_BUTTON), Interaction.CLICKED, State(AppState.MAIN_MENU)
    )
    assert first.find(PLAY_BUTTON).background_color == PRESSED_BUTTON_COLOR
    assert second.find(PLAY_BUTTON).background_color == NORMAL_BUTTON_COLOR