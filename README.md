# ballgame

A small arcade game. You steer a blue ball around the window, pick up stars
to score points and keep away from the red balls that bounce off the walls.
Ten stars and four enemies are placed when a game begins; after that a new
star turns up every second and a new enemy every five seconds. When an enemy
touches you the game is over and your final score is shown.

## Installing

```
pip install .
```

This pulls in `pygame`, which draws the window and plays the sounds.

## Playing

```
ballgame
```

The game opens on the main menu. Click **Play** to start or **Quit** to leave.

| Key                   | Action                                 |
|-----------------------|----------------------------------------|
| Arrow keys or W A S D | Move the ball                          |
| Space                 | Pause or resume while in a game        |
| G                     | Jump straight into a game              |
| M                     | Go back to the main menu               |
| Escape                | Quit                                   |

A new game starts paused; press Space to get moving. The pause menu offers
**Resume**, **Main Menu** and **Quit**. The game-over menu offers **Restart**,
**Main Menu** and **Quit**. The heads-up display shows your score on the left
and the number of enemies on the right. Each final score is added to the
high-score list, which is printed to the console.

### Options

| Option             | Meaning                                                        |
|--------------------|----------------------------------------------------------------|
| `--assets DIR`     | Directory holding sprites, fonts and sounds (default `assets`) |
| `--seed N`         | Seed for the random spawn positions and directions             |
| `--start`          | Begin a game at once; with `--headless` it is also unpaused    |
| `--headless`       | Run the game logic without opening a window                    |
| `--frames N`       | Number of 1/60 s frames to run when headless (default 600)     |

The asset directory is looked up for `sprites/ball_blue_large.png`,
`sprites/ball_red_large.png`, `sprites/star.png`, `fonts/FiraSans-Bold.ttf`,
`audio/explosionCrunch_000.ogg` and `audio/laserLarge_000.ogg`. Any file that
is missing is simply done without: balls and stars are drawn as coloured
circles, text uses pygame's default font, and the sound is not played.

## The people example

```
ballgame-people
```

prints a short roster of people, who among them has a job, who is ready for
hire, and what each employed person does.

## Using the pieces

The game logic runs without a window, which makes it easy to drive from code
or tests.

- `ballgame.app.Game` holds the whole game. `Game.step(delta)` applies any
  pending state change and advances one frame of `delta` seconds;
  `Game.click(tag)` and `Game.hover(tag)` act on a button of the active menu
  (for example `"play_button"`, `"resume_button"`, `"restart_button"`).
  Sounds the game wants played collect in `Game.sounds`.
- `ballgame.world.World` holds the player, enemies, stars, score and spawn
  timers, with one method per movement, collision and spawning rule.
- `ballgame.states` has `AppState`, `SimulationState`, the `State` holder with
  its queued transitions, keyboard `Input`, and the `GameOver` event queue.
- `ballgame.scoring` has `Score`, `HighScores` and their text forms.
- `ballgame.main_menu`, `ballgame.pause_menu`, `ballgame.game_over_menu` and
  `ballgame.hud` build the screens as trees of `ballgame.widgets.Node`;
  `ballgame.styles` holds their colours and layout styles.

## What it does not do

- No sprites, fonts or sounds come with the package; point `--assets` at a
  directory of your own to use them.
- High scores are kept only while the program runs and are never saved.
- Menus are laid out as a simple centred column, not by a full flex layout.

## Running the tests

```
pip install ".[test]"
pytest
```