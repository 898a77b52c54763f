"""The game application: screens, state transitions, the frame loop and a window."""

from __future__ import annotations

import argparse
import contextlib
import random
from pathlib import Path
from typing import Callable, Optional, Sequence

from ballgame.game_over_menu import (
    MAIN_MENU_BUTTON as GAME_OVER_MAIN_MENU_BUTTON,
    QUIT_BUTTON as GAME_OVER_QUIT_BUTTON,
    RESTART_BUTTON,
    build_game_over_menu,
    interact_with_main_menu_button as game_over_main_menu_clicked,
    interact_with_quit_button as game_over_quit_clicked,
    interact_with_restart_button,
    update_final_score_text,
)
from ballgame.hud import ENEMY_TEXT, SCORE_TEXT, build_hud, update_enemy_text, update_score_text
from ballgame.main_menu import build_main_menu
from ballgame.pause_menu import (
    MAIN_MENU_BUTTON as PAUSE_MAIN_MENU_BUTTON,
    QUIT_BUTTON as PAUSE_QUIT_BUTTON,
    RESUME_BUTTON,
    build_pause_menu,
    interact_with_main_menu_button as pause_main_menu_clicked,
    interact_with_quit_button as pause_quit_clicked,
    interact_with_resume_button,
)
from ballgame.scoring import HighScores, format_high_scores, format_score, update_high_scores
from ballgame.states import (
    AppState,
    EventQueue,
    GameOver,
    Input,
    Key,
    SimulationState,
    State,
    exit_requested,
    handle_game_over,
    pause_simulation,
    resume_simulation,
    toggle_simulation,
    transition_to_game_state,
    transition_to_main_menu_state,
)
from ballgame.styles import TextStyle, Val
from ballgame.widgets import (
    PLAY_BUTTON,
    QUIT_BUTTON,
    Interaction,
    Node,
    interact_with_play_button,
    interact_with_quit_button,
)
from ballgame.world import ENEMY_SIZE, PLAYER_SIZE, STAR_SIZE, Window, World

FRAME_TIME = 1.0 / 60.0
CAPTION = "Ball Game"

ButtonHandler = Callable[[Node, Interaction], bool]


class Game:
    """All game state, advanced one frame at a time by :meth:`step`."""

    def __init__(self, window: Optional[Window] = None, seed: Optional[int] = None) -> None:
        self.window = window or Window()
        self.world = World(window=self.window, rng=random.Random(seed))
        self.app_state: State[AppState] = State(AppState.default())
        self.simulation_state: State[SimulationState] = State(SimulationState.default())
        self.keys = Input()
        self.game_over_events: EventQueue[GameOver] = EventQueue()
        self.high_scores = HighScores()
        self.sounds: list[str] = []
        self.exited = False

        self.main_menu: Optional[Node] = None
        self.hud: Optional[Node] = None
        self.pause_menu: Optional[Node] = None
        self.game_over_menu: Optional[Node] = None

        self._game_over_reader = self.game_over_events.reader()
        self._high_score_reader = self.game_over_events.reader()
        self._final_score_reader = self.game_over_events.reader()
        self._shown_score: Optional[int] = None
        self._hovered: Optional[str] = None

        self._enter_app(self.app_state.current)

    # State transitions

    def _enter_app(self, state: AppState) -> None:
        if state is AppState.MAIN_MENU:
            self.main_menu = build_main_menu()
        elif state is AppState.GAME:
            pause_simulation(self.simulation_state)
            self.world.spawn_enemies()
            self.world.spawn_player()
            self.world.insert_score()
            self.world.spawn_stars()
            self.hud = build_hud()
            self._shown_score = None
        elif state is AppState.GAME_OVER:
            self.game_over_menu = build_game_over_menu()

    def _exit_app(self, state: AppState) -> None:
        if state is AppState.MAIN_MENU:
            self.main_menu = None
        elif state is AppState.GAME:
            resume_simulation(self.simulation_state)
            self.world.despawn_enemies()
            self.world.despawn_player()
            self.world.remove_score()
            self.world.despawn_stars()
            self.hud = None
        elif state is AppState.GAME_OVER:
            self.game_over_menu = None
            self.game_over_events.clear()

    def _enter_simulation(self, state: SimulationState) -> None:
        if state is SimulationState.PAUSED:
            print("Spawning Pause Menu")
            self.pause_menu = build_pause_menu()

    def _exit_simulation(self, state: SimulationState) -> None:
        if state is SimulationState.PAUSED:
            self.pause_menu = None

    def _apply_transitions(self) -> None:
        change = self.app_state.apply()
        if change is not None:
            exited, entered = change
            self._exit_app(exited)
            self._enter_app(entered)
        sim_change = self.simulation_state.apply()
        if sim_change is not None:
            exited_sim, entered_sim = sim_change
            self._exit_simulation(exited_sim)
            self._enter_simulation(entered_sim)

    # Frame

    def _run_world(self, delta: float) -> None:
        world = self.world
        world.enemy_movement(delta)
        world.update_enemy_direction()
        world.confine_enemy_movement()
        world.tick_enemy_spawn_timer(delta)
        world.spawn_enemies_over_time()
        world.player_movement(self.keys, delta)
        world.confine_player_movement()
        world.enemy_hit_player(self.game_over_events, self.sounds.append)
        world.player_hit_star(self.sounds.append)
        world.tick_star_spawn_timer(delta)
        world.spawn_stars_over_time()

    def _update_score_display(self) -> None:
        score = self.world.score
        if score is None:
            return
        if score.value != self._shown_score:
            print(format_score(score))
            self._shown_score = score.value
            if self.hud is not None:
                update_score_text(self.hud, score)

    def step(self, delta: float) -> None:
        """Apply pending state changes, then run one frame of delta seconds."""
        self._apply_transitions()
        in_game = self.app_state.current is AppState.GAME

        if in_game and self.simulation_state.current is SimulationState.RUNNING:
            self._run_world(delta)

        transition_to_game_state(self.keys, self.app_state)
        transition_to_main_menu_state(self.keys, self.app_state)
        if exit_requested(self.keys):
            self.exited = True
        handle_game_over(self._game_over_reader, self.app_state)

        if in_game:
            toggle_simulation(self.keys, self.simulation_state)
            self._update_score_display()
            if self.hud is not None:
                update_enemy_text(self.hud, len(self.world.enemies))

        if update_high_scores(self._high_score_reader, self.high_scores):
            print(format_high_scores(self.high_scores))

        if self.app_state.current is AppState.GAME_OVER and self.game_over_menu is not None:
            update_final_score_text(self._final_score_reader, self.game_over_menu)

        self.keys.clear()

    # Buttons

    def _quit(self, clicked: bool) -> bool:
        if clicked:
            self.exited = True
        return clicked

    def _button_handlers(self) -> list[tuple[Node, dict[str, ButtonHandler]]]:
        handlers: list[tuple[Node, dict[str, ButtonHandler]]] = []
        if self.app_state.current is AppState.MAIN_MENU and self.main_menu is not None:
            handlers.append((self.main_menu, {
                PLAY_BUTTON: lambda b, i: interact_with_play_button(b, i, self.app_state),
                QUIT_BUTTON: lambda b, i: self._quit(interact_with_quit_button(b, i)),
            }))
        if self.simulation_state.current is SimulationState.PAUSED and self.pause_menu is not None:
            handlers.append((self.pause_menu, {
                RESUME_BUTTON: lambda b, i: interact_with_resume_button(
                    b, i, self.simulation_state
                ),
                PAUSE_MAIN_MENU_BUTTON: lambda b, i: pause_main_menu_clicked(
                    b, i, self.app_state
                ),
                PAUSE_QUIT_BUTTON: lambda b, i: self._quit(pause_quit_clicked(b, i)),
            }))
        if self.app_state.current is AppState.GAME_OVER and self.game_over_menu is not None:
            handlers.append((self.game_over_menu, {
                RESTART_BUTTON: lambda b, i: interact_with_restart_button(b, i, self.app_state),
                GAME_OVER_MAIN_MENU_BUTTON: lambda b, i: game_over_main_menu_clicked(
                    b, i, self.app_state
                ),
                GAME_OVER_QUIT_BUTTON: lambda b, i: self._quit(game_over_quit_clicked(b, i)),
            }))
        return handlers

    def _interact(self, tag: str, interaction: Interaction) -> bool:
        for menu, handlers in self._button_handlers():
            handler = handlers.get(tag)
            if handler is not None:
                return handler(menu.find(tag), interaction)
        raise KeyError(tag)

    def click(self, tag: str) -> bool:
        """Click a button of the active menu; True when it was handled as a click."""
        return self._interact(tag, Interaction.CLICKED)

    def hover(self, tag: Optional[str]) -> None:
        """Move the pointer onto a button of the active menu, or off all buttons."""
        if tag == self._hovered:
            return
        if tag is not None:
            self._interact(tag, Interaction.HOVERED)
        previous, self._hovered = self._hovered, tag
        if previous is not None:
            with contextlib.suppress(KeyError):
                self._interact(previous, Interaction.NONE)

    @property
    def menus(self) -> list[Node]:
        """The menus currently on screen, lowest first."""
        present = [m for m in (self.main_menu, self.pause_menu, self.game_over_menu) if m]
        return sorted(present, key=lambda menu: menu.z_index)


# Window


def _px(val: Val, fallback: float) -> float:
    return val.value if val.unit == "px" else fallback


def _rgba(color) -> tuple[int, int, int, int]:
    return tuple(round(channel * 255) for channel in (color.r, color.g, color.b, color.a))


_GAP = 8.0


class _Renderer:
    """Draws a game into a pygame surface, using asset files when present."""

    def __init__(self, screen, assets: Path) -> None:
        import pygame

        self._pg = pygame
        self._screen = screen
        self._assets = assets
        self._images: dict = {}
        self._fonts: dict = {}
        self._sounds: dict = {}
        try:
            pygame.mixer.init()
            self._audio = True
        except pygame.error:
            self._audio = False

    def _image(self, path: str):
        if path not in self._images:
            file = self._assets / path
            self._images[path] = (
                self._pg.image.load(str(file)).convert_alpha() if file.is_file() else None
            )
        return self._images[path]

    def _font(self, style: TextStyle):
        key = (style.font, style.font_size)
        if key not in self._fonts:
            file = self._assets / style.font
            self._fonts[key] = self._pg.font.Font(
                str(file) if file.is_file() else None, int(style.font_size)
            )
        return self._fonts[key]

    def play(self, path: str) -> None:
        if not self._audio:
            return
        if path not in self._sounds:
            file = self._assets / path
            self._sounds[path] = self._pg.mixer.Sound(str(file)) if file.is_file() else None
        sound = self._sounds[path]
        if sound is not None:
            sound.play()

    def _to_screen(self, position) -> tuple[int, int]:
        return round(position.x), round(self._screen.get_height() - position.y)

    def _sprite(self, position, sprite: str, size: float, colour) -> None:
        centre = self._to_screen(position)
        image = self._image(sprite)
        if image is not None:
            self._screen.blit(image, image.get_rect(center=centre))
        else:
            self._pg.draw.circle(self._screen, colour, centre, round(size / 2.0))

    def _text(self, node: Node, centre: tuple[float, float]) -> float:
        style = node.text_style or TextStyle()
        surface = self._font(style).render(node.text or "", True, _rgba(style.color)[:3])
        self._screen.blit(surface, surface.get_rect(center=(round(centre[0]), round(centre[1]))))
        return surface.get_width()

    def _row_height(self, row: Node) -> float:
        if row.button or row.text is None:
            return _px(row.style.size[1], 120.0)
        style = row.text_style or TextStyle()
        return style.font_size * 1.2

    def _title_row(self, row: Node, cy: float) -> None:
        width = self._screen.get_width()
        text_node = next((child for child in row.children if child.text is not None), None)
        text_width = self._text(text_node, (width / 2.0, cy)) if text_node else 0.0
        images = [child for child in row.children if child.image]
        for side, child in zip((-1, 1), images):
            size = _px(child.style.size[0], 64.0)
            x = width / 2.0 + side * (text_width / 2.0 + size / 2.0 + 8.0)
            image = self._image(child.image)
            if image is not None:
                scaled = self._pg.transform.smoothscale(image, (round(size), round(size)))
                self._screen.blit(scaled, scaled.get_rect(center=(round(x), round(cy))))

    def _menu(self, menu: Node) -> dict:
        width, height = self._screen.get_size()
        rows = menu.children
        if len(rows) == 1 and rows[0].children:
            panel = rows[0]
            rows = panel.children
            if panel.background_color is not None:
                size = (round(_px(panel.style.size[0], 400.0)), round(_px(panel.style.size[1], 400.0)))
                surface = self._pg.Surface(size, self._pg.SRCALPHA)
                surface.fill(_rgba(panel.background_color))
                self._screen.blit(surface, surface.get_rect(center=(width // 2, height // 2)))
        heights = [self._row_height(row) for row in rows]
        y = (height - sum(heights) - _GAP * (len(rows) - 1)) / 2.0
        buttons = {}
        for row, row_height in zip(rows, heights):
            cy = y + row_height / 2.0
            if row.button:
                rect = self._pg.Rect(
                    0, 0, round(_px(row.style.size[0], 200.0)), round(row_height)
                )
                rect.center = (round(width / 2.0), round(cy))
                if row.background_color is not None:
                    self._pg.draw.rect(self._screen, _rgba(row.background_color)[:3], rect)
                label = next((n for n in row.walk() if n.text is not None), None)
                if label is not None:
                    self._text(label, rect.center)
                buttons[row.tag] = rect
            elif row.text is not None:
                self._text(row, (width / 2.0, cy))
            else:
                self._title_row(row, cy)
            y += row_height + _GAP
        return buttons

    def draw(self, game: Game) -> dict:
        """Draw a frame; return the on-screen rectangle of each active button."""
        self._screen.fill((30, 30, 30))
        world = game.world
        for star in world.stars:
            self._sprite(star.position, star.sprite, STAR_SIZE, (240, 200, 40))
        for enemy in world.enemies:
            self._sprite(enemy.position, enemy.sprite, ENEMY_SIZE, (200, 50, 50))
        if world.player is not None:
            self._sprite(world.player.position, world.player.sprite, PLAYER_SIZE, (50, 90, 220))
        if game.hud is not None:
            width = self._screen.get_width()
            self._text(game.hud.find(SCORE_TEXT), (140.0, 54.0))
            self._text(game.hud.find(ENEMY_TEXT), (width - 140.0, 54.0))
        buttons: dict = {}
        for menu in game.menus:
            buttons = self._menu(menu)
        return buttons


def _run_window(game: Game, assets: Path) -> None:
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((round(game.window.width), round(game.window.height)))
        pygame.display.set_caption(CAPTION)
        keymap = {
            pygame.K_g: Key.G, pygame.K_m: Key.M, pygame.K_ESCAPE: Key.ESCAPE,
            pygame.K_SPACE: Key.SPACE, pygame.K_LEFT: Key.LEFT, pygame.K_RIGHT: Key.RIGHT,
            pygame.K_UP: Key.UP, pygame.K_DOWN: Key.DOWN, pygame.K_a: Key.A,
            pygame.K_d: Key.D, pygame.K_w: Key.W, pygame.K_s: Key.S,
        }
        renderer = _Renderer(screen, assets)
        clock = pygame.time.Clock()
        buttons: dict = {}

        def button_at(pos) -> Optional[str]:
            return next((tag for tag, rect in buttons.items() if rect.collidepoint(pos)), None)

        while not game.exited:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.exited = True
                elif event.type == pygame.KEYDOWN and event.key in keymap:
                    game.keys.press(keymap[event.key])
                elif event.type == pygame.KEYUP and event.key in keymap:
                    game.keys.release(keymap[event.key])
                elif event.type == pygame.MOUSEMOTION:
                    with contextlib.suppress(KeyError):
                        game.hover(button_at(event.pos))
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    tag = button_at(event.pos)
                    if tag is not None:
                        with contextlib.suppress(KeyError):
                            game.click(tag)
            game.step(clock.tick(60) / 1000.0)
            for sound in game.sounds:
                renderer.play(sound)
            game.sounds.clear()
            buttons = renderer.draw(game)
            pygame.display.flip()
    finally:
        pygame.quit()


def _run_headless(game: Game, frames: int, start: bool) -> None:
    for frame in range(frames):
        if game.exited:
            break
        if start and frame == 0:
            game.keys.press(Key.G)
        if start and frame == 1:
            game.keys.press(Key.SPACE)
        game.step(FRAME_TIME)
        game.keys.release(Key.G)
        game.keys.release(Key.SPACE)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Dodge the red balls and collect the stars.")
    parser.add_argument("--headless", action="store_true", help="run without a window")
    parser.add_argument("--frames", type=int, default=600, help="frames to run when headless")
    parser.add_argument("--start", action="store_true", help="begin a game and unpause it")
    parser.add_argument("--seed", type=int, default=None, help="seed for spawn positions")
    parser.add_argument("--assets", type=Path, default=Path("assets"), help="asset directory")
    args = parser.parse_args(argv)
    if args.frames < 0:
        parser.error("--frames cannot be negative")

    game = Game(seed=args.seed)
    if args.headless:
        _run_headless(game, args.frames, args.start)
    else:
        if args.start:
            game.keys.press(Key.G)
        _run_window(game, args.assets)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())