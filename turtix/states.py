"""Menu screens and the transitions between them, free of any rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum, auto

from turtix import config

Color = tuple[int, int, int]

YELLOW: Color = (255, 255, 0)
BLACK: Color = (0, 0, 0)
RED: Color = (255, 0, 0)
GREEN: Color = (0, 255, 0)

MENU_FONT_SIZE = 40


class StateId(IntEnum):
    """Slots of the shared state table."""

    MAIN_MENU = 0
    PLAY = 1
    ABOUT = 2
    EXIT = 3
    CHOOSE_MAP = 4
    WIN = 5
    LOSE = 6
    PAUSE = 7


class Key(Enum):
    """Keys that the menu screens react to."""

    ESCAPE = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ENTER = auto()
    SPACE = auto()
    W = auto()
    L = auto()
    R = auto()
    P = auto()


@dataclass
class Label:
    """A line of text shown on a screen."""

    text: str
    color: Color
    position: tuple[int, int]
    size: int = MENU_FONT_SIZE


@dataclass
class MenuContext:
    """The state table shared by all screens and the open flag of their window."""

    states: dict[StateId, GameState] = field(default_factory=dict)
    open: bool = True

    def close(self) -> None:
        self.open = False


def _install(context: MenuContext, state_id: StateId, state: GameState) -> GameState:
    context.states[state_id] = state
    return state


def _existing(context: MenuContext, state_id: StateId) -> GameState:
    try:
        return context.states[state_id]
    except KeyError:
        raise LookupError(f"no {state_id.name} state has been created") from None


class GameState:
    """A screen: reacts to key presses and tells which screen comes next."""

    background: str | None = None

    def __init__(self) -> None:
        self.gems = 0
        self.stars = 0
        self.labels: list[Label] = []

    @property
    def background_path(self) -> str | None:
        """Full path of the background picture, if the screen has one."""
        if self.background is None:
            return None
        return config.BACKGROUND_DIR + self.background

    def handle_key(self, key: Key, context: MenuContext) -> GameState:
        """React to a key press and return the screen to show next."""
        return self

    def update(self, context: MenuContext) -> GameState:
        """Refresh what the screen shows and return the screen to show next."""
        return self


class _SelectionMenu(GameState):
    """A vertical list of options with one highlighted choice."""

    OPTIONS: tuple[str, ...] = ()
    ORIGIN: tuple[int, int] = (0, 0)

    def __init__(self) -> None:
        super().__init__()
        x, y = self.ORIGIN
        self.labels = [
            Label(text, YELLOW, (x, y + 100 * row))
            for row, text in enumerate(self.OPTIONS)
        ]
        self.selected = 0

    def _select(self, index: int) -> None:
        self.labels[self.selected].color = YELLOW
        self.selected = index
        self.labels[self.selected].color = BLACK

    def _step_up(self) -> None:
        if self.selected - 1 >= 0:
            self._select(self.selected - 1)

    def _step_down(self) -> None:
        self._select((self.selected + 1) % len(self.labels))


class MainMenuState(_SelectionMenu):
    """The opening menu: play, about and exit."""

    background = "mainMenu.png"
    OPTIONS = ("PLAY", "ABOUT", "EXIT")
    ORIGIN = (140, 100)

    def move_up(self) -> None:
        """Highlight the option above; nothing happens at the top."""
        self._step_up()

    def move_down(self) -> None:
        """Highlight the option below, wrapping round to the top."""
        self._step_down()

    def handle_key(self, key: Key, context: MenuContext) -> GameState:
        if key is Key.SPACE:
            return _install(context, StateId.PLAY, PlayState())
        if key is Key.UP:
            self.move_up()
        elif key is Key.DOWN:
            self.move_down()
        elif key is Key.ENTER:
            if self.selected == 0:
                return _install(context, StateId.CHOOSE_MAP, ChooseMapState())
            if self.selected == 1:
                return _install(context, StateId.ABOUT, AboutState())
            if self.selected == 2:
                context.close()
                return _install(context, StateId.EXIT, ExitState())
        return self


class ChooseMapState(_SelectionMenu):
    """Map selection screen."""

    background = "maxresdefault.jpg"
    OPTIONS = ("MAP_1", "MAP_2", "MAP_3")
    ORIGIN = (570, 350)

    def move_up(self) -> None:
        """Highlight the map above; nothing happens at the top."""
        self._step_up()

    def move_down(self) -> None:
        """Highlight the map below, wrapping round to the top."""
        self._step_down()

    def handle_key(self, key: Key, context: MenuContext) -> GameState:
        if key is Key.UP:
            self.move_up()
        elif key is Key.DOWN:
            self.move_down()
        elif key is Key.ENTER:
            return _install(context, StateId.PLAY, PlayState())
        elif key is Key.ESCAPE:
            return _existing(context, StateId.MAIN_MENU)
        return self


class AboutState(GameState):
    """Information screen; Escape goes back to the main menu."""

    background = "about.png"

    def handle_key(self, key: Key, context: MenuContext) -> GameState:
        if key is Key.ESCAPE:
            return _existing(context, StateId.MAIN_MENU)
        return self


class ExitState(GameState):
    """Screen reached when leaving the game."""

    def handle_key(self, key: Key, context: MenuContext) -> GameState:
        if key is Key.ESCAPE:
            return _existing(context, StateId.MAIN_MENU)
        return self


class PlayState(GameState):
    """Marks that a game is being played."""

    background = "gamePlay.png"

    def __init__(self) -> None:
        super().__init__()
        self.ended = False

    def handle_key(self, key: Key, context: MenuContext) -> GameState:
        if key is Key.ESCAPE:
            return _existing(context, StateId.MAIN_MENU)
        if key is Key.W:
            return _install(context, StateId.WIN, WinState())
        if key is Key.L:
            return _install(context, StateId.LOSE, LoseState())
        return self


class PauseState(GameState):
    """Pause screen; R resumes play."""

    background = "pause.png"

    def __init__(self) -> None:
        super().__init__()
        self.ended = False

    def handle_key(self, key: Key, context: MenuContext) -> GameState:
        if key is Key.R:
            return _install(context, StateId.PLAY, PlayState())
        return self


class _ResultState(GameState):
    """End screen showing the collected gems and stars."""

    COLOR: Color = BLACK

    def __init__(self) -> None:
        super().__init__()
        self.labels = [Label("", self.COLOR, (1050, 290 + 100 * row)) for row in range(2)]

    def handle_key(self, key: Key, context: MenuContext) -> GameState:
        if key is Key.ESCAPE:
            return _existing(context, StateId.MAIN_MENU)
        if key is Key.ENTER:
            context.close()
        return self

    def update(self, context: MenuContext) -> GameState:
        self.labels[0].text = f"GEM : {self.gems}"
        self.labels[1].text = f"Star : {self.stars}"
        return self


class WinState(_ResultState):
    """Shown after all turtles are saved."""

    background = "win.jpg"
    COLOR = GREEN


class LoseState(_ResultState):
    """Shown after the player runs out of lives."""

    background = "lose.jpg"
    COLOR = RED