"""Colours, layout styles and text styles shared by the menus and the HUD."""

from __future__ import annotations

from dataclasses import dataclass, field

FONT = "fonts/FiraSans-Bold.ttf"

_UNITS = ("auto", "undefined", "px", "percent")


@dataclass(frozen=True)
class Color:
    """An RGBA colour with channels in the range 0..1."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0.0 <= channel <= 1.0:
                raise ValueError(f"colour channel out of range: {channel}")

    @classmethod
    def rgb(cls, r: float, g: float, b: float) -> Color:
        return cls(r, g, b, 1.0)

    @classmethod
    def rgba(cls, r: float, g: float, b: float, a: float) -> Color:
        return cls(r, g, b, a)


WHITE = Color.rgb(1.0, 1.0, 1.0)


@dataclass(frozen=True)
class Val:
    """A layout length: automatic, undefined, pixels or a percentage."""

    unit: str
    value: float = 0.0

    def __post_init__(self) -> None:
        if self.unit not in _UNITS:
            raise ValueError(f"unknown unit: {self.unit!r}")
        if self.unit in ("auto", "undefined") and self.value != 0.0:
            raise ValueError(f"{self.unit} takes no value")

    @classmethod
    def px(cls, value: float) -> Val:
        return cls("px", float(value))

    @classmethod
    def percent(cls, value: float) -> Val:
        return cls("percent", float(value))

    @classmethod
    def auto(cls) -> Val:
        return cls("auto")

    @classmethod
    def undefined(cls) -> Val:
        return cls("undefined")

    def __str__(self) -> str:
        if self.unit == "px":
            return f"{self.value:g}px"
        if self.unit == "percent":
            return f"{self.value:g}%"
        return self.unit


@dataclass(frozen=True)
class Style:
    """Flex layout of a UI node.

    ``size`` and ``gap`` are (width, height); ``margin`` is
    (left, right, top, bottom).
    """

    display: str = "flex"
    position_type: str = "relative"
    flex_direction: str = "row"
    justify_content: str = "flex_start"
    align_items: str = "stretch"
    size: tuple[Val, Val] = (Val.auto(), Val.auto())
    gap: tuple[Val, Val] = (Val.undefined(), Val.undefined())
    margin: tuple[Val, Val, Val, Val] = (Val.px(0), Val.px(0), Val.px(0), Val.px(0))


@dataclass(frozen=True)
class TextStyle:
    font: str = FONT
    font_size: float = 12.0
    color: Color = field(default=WHITE)


# Buttons, shared by every menu.
NORMAL_BUTTON_COLOR = Color.rgb(0.15, 0.15, 0.15)
HOVERED_BUTTON_COLOR = Color.rgb(0.25, 0.25, 0.25)
PRESSED_BUTTON_COLOR = Color.rgb(0.35, 0.75, 0.35)

BACKGROUND_COLOR = Color.rgba(0.25, 0.25, 0.25, 0.5)

BUTTON_STYLE = Style(
    justify_content="center",
    align_items="center",
    size=(Val.px(200.0), Val.px(80.0)),
)

# Main menu.
MAIN_MENU_STYLE = Style(
    flex_direction="column",
    justify_content="center",
    align_items="center",
    size=(Val.percent(100.0), Val.percent(100.0)),
    gap=(Val.px(8.0), Val.px(8.0)),
)

IMAGE_STYLE = Style(
    size=(Val.px(64.0), Val.px(64.0)),
    margin=(Val.px(8.0), Val.px(8.0), Val.px(8.0), Val.px(8.0)),
)

TITLE_STYLE = Style(
    flex_direction="row",
    justify_content="center",
    align_items="center",
    size=(Val.px(300.0), Val.px(120.0)),
)

# Overlay menus (pause and game over) sit on top of the HUD.
_OVERLAY_STYLE = Style(
    position_type="absolute",
    display="flex",
    justify_content="center",
    align_items="center",
    size=(Val.percent(100.0), Val.percent(100.0)),
)

_OVERLAY_CONTAINER_STYLE = Style(
    display="flex",
    flex_direction="column",
    justify_content="center",
    align_items="center",
    size=(Val.px(400.0), Val.px(400.0)),
    gap=(Val.px(8.0), Val.px(8.0)),
)

PAUSE_MENU_STYLE = _OVERLAY_STYLE
PAUSE_MENU_CONTAINER_STYLE = _OVERLAY_CONTAINER_STYLE
GAME_OVER_MENU_STYLE = _OVERLAY_STYLE
GAME_OVER_MENU_CONTAINER_STYLE = _OVERLAY_CONTAINER_STYLE

# Heads-up display.
HUD_STYLE = Style(
    display="flex",
    flex_direction="row",
    justify_content="space_between",
    align_items="center",
    size=(Val.percent(100.0), Val.percent(15.0)),
)

LHS_STYLE = Style(
    display="flex",
    flex_direction="row",
    justify_content="center",
    align_items="center",
    size=(Val.px(200.0), Val.percent(80.0)),
    margin=(Val.px(32.0), Val.px(0.0), Val.px(0.0), Val.px(0.0)),
)

RHS_STYLE = Style(
    display="flex",
    flex_direction="row",
    justify_content="center",
    align_items="center",
    size=(Val.px(200.0), Val.percent(80.0)),
    margin=(Val.px(0.0), Val.px(32.0), Val.px(0.0), Val.px(0.0)),
)

HUD_IMAGE_STYLE = Style(
    size=(Val.px(48.0), Val.px(48.0)),
    margin=(Val.px(8.0), Val.px(8.0), Val.px(8.0), Val.px(8.0)),
)


def title_text_style() -> TextStyle:
    """Large white text for menu titles."""
    return TextStyle(FONT, 64.0, WHITE)


def button_text_style() -> TextStyle:
    """White text for button labels."""
    return TextStyle(FONT, 32.0, WHITE)


def final_score_text_style() -> TextStyle:
    """White text for the final score on the game-over menu."""
    return TextStyle(FONT, 48.0, WHITE)


def hud_text_style() -> TextStyle:
    """Large white text for the HUD counters."""
    return TextStyle(FONT, 64.0, WHITE)