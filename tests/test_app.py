import pytest

from ballgame.app import Game, main
from ballgame.hud import ENEMY_TEXT, SCORE_TEXT
from ballgame.states import AppState, Key, SimulationState
from ballgame.styles import HOVERED_BUTTON_COLOR, NORMAL_BUTTON_COLOR, PRESSED_BUTTON_COLOR
from ballgame.world import (
    NUMBER_OF_ENEMIES,
    NUMBER_OF_STARS,
    STAR_SOUND,
    EXPLOSION_SOUND,
    Enemy,
    Star,
    Vec2,
)


def running_game() -> Game:
    game = Game(seed=3)
    game.click("play_button")
    game.step(0.0)
    game.world.enemies.clear()
    game.world.stars.clear()
    game.keys.press(Key.SPACE)
    game.step(0.0)
    game.keys.release(Key.SPACE)
    game.step(0.0)
    return game


def test_starts_in_main_menu():
    game = Game(seed=1)
    assert game.app_state.current is AppState.MAIN_MENU
    assert game.main_menu is not None
    assert game.menus == [game.main_menu]
    assert game.world.player is None


def test_play_button_enters_paused_game():
    game = Game(seed=1)
    assert game.click("play_button") is True
    assert game.main_menu.find("play_button").background_color == PRESSED_BUTTON_COLOR
    game.step(0.0)
    assert game.app_state.current is AppState.GAME
    assert game.simulation_state.current is SimulationState.PAUSED
    assert game.main_menu is None
    assert game.pause_menu is not None
    assert game.world.player is not None
    assert len(game.world.enemies) == NUMBER_OF_ENEMIES
    assert len(game.world.stars) == NUMBER_OF_STARS


def test_g_key_needs_a_second_frame():
    game = Game(seed=1)
    game.keys.press(Key.G)
    game.step(0.0)
    assert game.app_state.current is AppState.MAIN_MENU
    game.step(0.0)
    assert game.app_state.current is AppState.GAME


def test_space_resumes_simulation():
    game = running_game()
    assert game.simulation_state.current is SimulationState.RUNNING
    assert game.pause_menu is None


def test_paused_game_does_not_move_player():
    game = Game(seed=1)
    game.click("play_button")
    game.step(0.0)
    start = game.world.player.position
    game.keys.press(Key.RIGHT)
    game.step(0.1)
    assert game.world.player.position == start


def test_running_game_moves_player():
    game = running_game()
    start = game.world.player.position
    game.keys.press(Key.RIGHT)
    game.step(0.1)
    assert game.world.player.position.x > start.x
    assert game.world.player.position.y == start.y


def test_escape_exits():
    game = Game(seed=1)
    game.keys.press(Key.ESCAPE)
    game.step(0.0)
    assert game.exited


def test_quit_button_exits():
    game = Game(seed=1)
    assert game.click("quit_button") is True
    assert game.exited


def test_hover_and_leave():
    game = Game(seed=1)
    button = game.main_menu.find("play_button")
    game.hover("play_button")
    assert button.background_color == HOVERED_BUTTON_COLOR
    game.hover(None)
    assert button.background_color == NORMAL_BUTTON_COLOR
    assert game.app_state.pending is None


def test_unknown_button_raises():
    game = Game(seed=1)
    with pytest.raises(KeyError):
        game.click("resume_button")
    with pytest.raises(KeyError):
        game.hover("restart_button")


def test_collecting_a_star_scores():
    game = running_game()
    game.world.stars.append(Star(game.world.player.position))
    game.step(0.0)
    assert game.world.score.value == 1
    assert game.world.stars == []
    assert game.hud.find(SCORE_TEXT).text == str(game.world.score.value)
    assert STAR_SOUND in game.sounds


def test_hud_counts_enemies():
    game = running_game()
    game.world.enemies.extend(
        [Enemy(Vec2(100.0, 100.0), Vec2(1.0, 0.0)), Enemy(Vec2(100.0, 600.0), Vec2(1.0, 0.0))]
    )
    game.step(0.0)
    assert game.hud.find(ENEMY_TEXT).text == str(len(game.world.enemies))


def test_enemy_hit_leads_to_game_over():
    game = running_game()
    game.world.enemies.append(Enemy(game.world.player.position, Vec2(1.0, 0.0)))
    game.step(0.0)
    assert game.world.player is None
    assert EXPLOSION_SOUND in game.sounds
    assert game.high_scores.scores == [("Player", 0)]
    game.step(0.0)
    assert game.app_state.current is AppState.GAME_OVER
    assert game.hud is None
    assert game.world.enemies == []
    assert game.world.score is None
    assert game.game_over_menu.find("final_score_text").text == "Final Score: 0"


def test_restart_after_game_over_clears_events():
    game = running_game()
    game.world.enemies.append(Enemy(game.world.player.position, Vec2(1.0, 0.0)))
    game.step(0.0)
    game.step(0.0)
    assert len(game.game_over_events) == 1
    game.click("restart_button")
    game.step(0.0)
    assert game.app_state.current is AppState.GAME
    assert len(game.game_over_events) == 0
    assert game.game_over_menu is None
    assert game.world.player is not None


def test_pause_menu_main_menu_button():
    game = Game(seed=1)
    game.click("play_button")
    game.step(0.0)
    game.click("main_menu_button")
    game.step(0.0)
    assert game.app_state.current is AppState.MAIN_MENU
    assert game.simulation_state.current is SimulationState.RUNNING
    assert game.pause_menu is None
    assert game.main_menu is not None
    assert game.world.stars == []


def test_pause_menu_quit_button():
    game = Game(seed=1)
    game.click("play_button")
    game.step(0.0)
    game.click("quit_button")
    assert game.exited


def test_main_headless_start(capsys):
    assert main(["--headless", "--frames", "3", "--start", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "Entered AppState::Game" in out
    assert "Simulation Running." in out


def test_main_rejects_negative_frames():
    with pytest.raises(SystemExit) as info:
        main(["--headless", "--frames", "-1"])
    assert info.value.code == 2