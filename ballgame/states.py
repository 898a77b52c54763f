"""Application and simulation states, keyboard input and game-over events."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Generic, Iterator, TypeVar

S = TypeVar("S")
E = TypeVar("E")


class AppState(Enum):
    """Top-level screens of the game."""

    MAIN_MENU = auto()
    GAME = auto()
    GAME_OVER = auto()

    @classmethod
    def default(cls) -> AppState:
        return cls.MAIN_MENU


class SimulationState(Enum):
    """Whether the game world is advancing."""

    RUNNING = auto()
    PAUSED = auto()

    @classmethod
    def default(cls) -> SimulationState:
        return cls.RUNNING


class Key(Enum):
    """Keyboard keys the game reacts to."""

    G = auto()
    M = auto()
    ESCAPE = auto()
    SPACE = auto()
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    A = auto()
    D = auto()
    W = auto()
    S = auto()


@dataclass(frozen=True)
class GameOver:
    """Sent when the player is hit; carries the final score."""

    score: int


class State(Generic[S]):
    """A current state plus a queued next state applied on demand."""

    def __init__(self, initial: S) -> None:
        self.current: S = initial
        self.pending: S | None = None

    def set(self, state: S) -> None:
        """Queue a transition; a later call replaces an earlier one."""
        self.pending = state

    def apply(self) -> tuple[S, S] | None:
        """Apply the queued transition and return (exited, entered), if any.

        A transition is applied even when it re-enters the current state.
        """
        if self.pending is None:
            return None
        entered = self.pending
        self.pending = None
        exited, self.current = self.current, entered
        return exited, entered

    def __repr__(self) -> str:
        return f"State(current={self.current!r}, pending={self.pending!r})"


class Input:
    """Tracks held keys and keys pressed since the last clear."""

    def __init__(self) -> None:
        self._pressed: set[Key] = set()
        self._just_pressed: set[Key] = set()

    def press(self, key: Key) -> None:
        if key not in self._pressed:
            self._pressed.add(key)
            self._just_pressed.add(key)

    def release(self, key: Key) -> None:
        self._pressed.discard(key)

    def pressed(self, key: Key) -> bool:
        return key in self._pressed

    def just_pressed(self, key: Key) -> bool:
        return key in self._just_pressed

    def clear(self) -> None:
        """Forget which keys were just pressed; held keys stay held."""
        self._just_pressed.clear()


@dataclass
class EventQueue(Generic[E]):
    """Stores events until cleared; each reader sees every event once."""

    _events: list[E] = field(default_factory=list)
    _start: int = 0

    def send(self, event: E) -> None:
        self._events.append(event)

    def clear(self) -> None:
        self._start += len(self._events)
        self._events.clear()

    def reader(self) -> EventReader[E]:
        return EventReader(self)

    def __len__(self) -> int:
        return len(self._events)

    def _since(self, position: int) -> tuple[list[E], int]:
        offset = max(position - self._start, 0)
        return self._events[offset:], self._start + len(self._events)


class EventReader(Generic[E]):
    """A cursor over an event queue."""

    def __init__(self, queue: EventQueue[E]) -> None:
        self._queue = queue
        self._position = 0

    def read(self) -> Iterator[E]:
        """Yield events not yet seen by this reader."""
        events, self._position = self._queue._since(self._position)
        yield from events


def transition_to_game_state(keys: Input, app_state: State[AppState]) -> bool:
    """Queue the game state when G is pressed outside the game."""
    if keys.just_pressed(Key.G) and app_state.current != AppState.GAME:
        app_state.set(AppState.GAME)
        print("Entered AppState::Game")
        return True
    return False


def transition_to_main_menu_state(keys: Input, app_state: State[AppState]) -> bool:
    """Queue the main menu when M is pressed outside it."""
    if keys.just_pressed(Key.M) and app_state.current != AppState.MAIN_MENU:
        app_state.set(AppState.MAIN_MENU)
        print("Entered AppState::MainMenu")
        return True
    return False


def handle_game_over(
    reader: EventReader[GameOver], app_state: State[AppState]
) -> list[GameOver]:
    """Move to the game-over screen for each unread game-over event."""
    handled = []
    for event in reader.read():
        print(f"Your final score is: {event.score}")
        app_state.set(AppState.GAME_OVER)
        print("Entered AppState::GameOver")
        handled.append(event)
    return handled


def exit_requested(keys: Input) -> bool:
    """True when Escape was just pressed."""
    return keys.just_pressed(Key.ESCAPE)


def pause_simulation(simulation_state: State[SimulationState]) -> None:
    simulation_state.set(SimulationState.PAUSED)


def resume_simulation(simulation_state: State[SimulationState]) -> None:
    simulation_state.set(SimulationState.RUNNING)


def toggle_simulation(keys: Input, simulation_state: State[SimulationState]) -> bool:
    """Flip between running and paused when Space is pressed."""
    if not keys.just_pressed(Key.SPACE):
        return False
    if simulation_state.current == SimulationState.RUNNING:
        simulation_state.set(SimulationState.PAUSED)
        print("Simulation Paused.")
    elif simulation_state.current == SimulationState.PAUSED:
        simulation_state.set(SimulationState.RUNNING)
        print("Simulation Running.")
    return True