import dataclasses

import pytest

from ballgame import styles
from ballgame.styles import Color, Style, TextStyle, Val


def test_rgb_is_opaque():
    color = Color.rgb(0.15, 0.15, 0.15)
    assert color.a == 1.0
    assert color == Color.rgba(0.15, 0.15, 0.15, 1.0)


def test_color_channel_out_of_range():
    with pytest.raises(ValueError):
        Color.rgb(1.5, 0.0, 0.0)
    with pytest.raises(ValueError):
        Color.rgba(0.0, 0.0, 0.0, -0.1)


def test_button_colors_from_source():
    assert styles.NORMAL_BUTTON_COLOR == Color.rgb(0.15, 0.15, 0.15)
    assert styles.HOVERED_BUTTON_COLOR == Color.rgb(0.25, 0.25, 0.25)
    assert styles.PRESSED_BUTTON_COLOR == Color.rgb(0.35, 0.75, 0.35)
    assert styles.BACKGROUND_COLOR == Color.rgba(0.25, 0.25, 0.25, 0.5)


def test_val_constructors():
    assert Val.px(8) == Val("px", 8.0)
    assert Val.percent(100) == Val("percent", 100.0)
    assert Val.auto().unit == "auto"
    assert str(Val.px(8)) == "8px"
    assert str(Val.percent(100)) == "100%"


def test_val_rejects_unknown_unit():
    with pytest.raises(ValueError):
        Val("em", 1.0)


def test_val_auto_takes_no_value():
    with pytest.raises(ValueError):
        Val("auto", 3.0)


def test_style_is_frozen():
    style = Style()
    original_display = style.display
    with pytest.raises(dataclasses.FrozenInstanceError):
        style.display = "none"
    assert style.display == original_display
    assert style == Style()


def test_default_style():
    style = Style()
    assert style.size == (Val.auto(), Val.auto())
    assert style.position_type == "relative"


def test_button_style_size():
    assert styles.BUTTON_STYLE.size == (Val.px(200.0), Val.px(80.0))
    assert styles.BUTTON_STYLE.justify_content == "center"


def test_main_menu_style_fills_window():
    assert styles.MAIN_MENU_STYLE.size == (Val.percent(100.0), Val.percent(100.0))
    assert styles.MAIN_MENU_STYLE.flex_direction == "column"
    assert styles.MAIN_MENU_STYLE.gap == (Val.px(8.0), Val.px(8.0))


def test_overlay_menus_are_absolute():
    for style in (styles.PAUSE_MENU_STYLE, styles.GAME_OVER_MENU_STYLE):
        assert style.position_type == "absolute"
        assert style.size == (Val.percent(100.0), Val.percent(100.0))
    assert styles.PAUSE_MENU_CONTAINER_STYLE == styles.GAME_OVER_MENU_CONTAINER_STYLE
    assert styles.PAUSE_MENU_CONTAINER_STYLE.size == (Val.px(400.0), Val.px(400.0))


def test_hud_margins_are_mirrored():
    left = styles.LHS_STYLE.margin
    right = styles.RHS_STYLE.margin
    assert (left[0], left[1]) == (right[1], right[0])
    assert left[0] == Val.px(32.0)
    assert styles.LHS_STYLE.size == styles.RHS_STYLE.size
    assert styles.LHS_STYLE.size == (Val.px(200.0), Val.percent(80.0))


def test_text_style_sizes():
    assert styles.title_text_style().font_size == 64.0
    assert styles.button_text_style().font_size == 32.0
    assert styles.final_score_text_style().font_size == 48.0
    assert styles.hud_text_style().font_size == 64.0


def test_text_styles_use_the_font_in_white():
    for make in (
        styles.title_text_style,
        styles.button_text_style,
        styles.final_score_text_style,
        styles.hud_text_style,
    ):
        text_style = make()
        assert text_style.font == "fonts/FiraSans-Bold.ttf"
        assert text_style.color == Color.rgb(1.0, 1.0, 1.0)


def test_text_style_equality():
    assert styles.title_text_style() == TextStyle(styles.FONT, 64.0, styles.WHITE)