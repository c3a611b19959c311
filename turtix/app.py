"""Window, menus and the main game loop drawn with pygame."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path

import pygame

from turtix import config
from turtix.entities import Actor, GameObject
from turtix.mapfile import load_map
from turtix.states import (
    Key,
    LoseState,
    MainMenuState,
    MenuContext,
    PauseState,
    StateId,
    WinState,
    GameState,
)
from turtix.world import World

_BLACK = (0, 0, 0)
_VIEW_Y_OFFSET = 100
_HUD_ICON_X = 1500
_HUD_TEXT_X = 1420
_HUD_HEART_Y = 50
_HUD_GEM_Y = 140
_HUD_GEM_TEXT_Y = 130
_HUD_STAR_Y = 220
_HUD_HEART_SPACING = 100

_KEYS = {
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_RETURN: Key.ENTER,
    pygame.K_KP_ENTER: Key.ENTER,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_w: Key.W,
    pygame.K_l: Key.L,
    pygame.K_r: Key.R,
    pygame.K_p: Key.P,
}


class Assets:
    """Loads pictures relative to a game directory and keeps them cached."""

    def __init__(self, root: str | Path = ".") -> None:
        self.root = Path(root)
        self._images: dict[str, pygame.Surface] = {}

    def image(self, name: str) -> pygame.Surface:
        """The picture stored under the given relative path."""
        cached = self._images.get(name)
        if cached is None:
            path = self.root / name
            if not path.is_file():
                raise FileNotFoundError(f"missing picture: {path}")
            cached = pygame.image.load(str(path))
            self._images[name] = cached
        return cached

    def size(self, name: str) -> tuple[int, int]:
        """Width and height of a picture."""
        return self.image(name).get_size()


@dataclass(frozen=True)
class HudLayout:
    """Where the score panel goes for one frame, in world coordinates."""

    background: tuple[int, int]
    gem_icon: tuple[int, int]
    gem_text_position: tuple[int, int]
    gem_text: str
    star_icon: tuple[int, int]
    star_text_position: tuple[int, int]
    star_text: str
    hearts: list[tuple[str, tuple[int, int]]]


def hud_layout(
    view_center: tuple[float, float], lives: int, gems: int, stars: int
) -> HudLayout:
    """Lay out the background, counters and hearts around the view."""
    bg_x = int(view_center[0] - config.WINDOW_WIDTH / 2)
    bg_y = int(view_center[1] - config.WINDOW_HEIGHT / 2)
    heart_x = bg_x + _HUD_ICON_X
    heart_y = bg_y + _HUD_HEART_Y
    slots = [
        (heart_x - slot * _HUD_HEART_SPACING, heart_y)
        for slot in range(config.NUMBER_OF_HEARTS)
    ]
    alive = max(0, min(lives, config.NUMBER_OF_HEARTS))
    hearts = [(config.DEAD_HEART_IMAGE, slot) for slot in slots]
    hearts.extend((config.HEART_IMAGE, slot) for slot in slots[:alive])
    return HudLayout(
        background=(bg_x, bg_y),
        gem_icon=(bg_x + _HUD_ICON_X, bg_y + _HUD_GEM_Y),
        gem_text_position=(bg_x + _HUD_TEXT_X, bg_y + _HUD_GEM_TEXT_Y),
        gem_text=str(gems),
        star_icon=(bg_x + _HUD_ICON_X, bg_y + _HUD_STAR_Y),
        star_text_position=(bg_x + _HUD_TEXT_X, bg_y + _HUD_STAR_Y),
        star_text=str(stars),
        hearts=hearts,
    )


def _actor_picture(name: str) -> str:
    return config.PICTURES_DIR + name + ".png"


class TurtixApp:
    """One game session: the menus, a level and the loop that plays it."""

    def __init__(self, root: str | Path = ".", map_path: str = config.MAP_PATH) -> None:
        self.assets = Assets(root)
        self.world = World(self.assets.size)
        self.world.load(load_map(self.assets.root / map_path))
        self.context = MenuContext()
        self.current: GameState | None = None
        self._screen: pygame.Surface | None = None
        self._menu_font: pygame.font.Font | None = None
        self._score_font: pygame.font.Font | None = None
        self._view_center: tuple[float, float] = (
            config.WINDOW_WIDTH / 2, config.WINDOW_HEIGHT / 2,
        )

    # ------------------------------------------------------------------ fonts

    def _load_font(self, name: str, size: int, complain: bool) -> pygame.font.Font:
        try:
            return pygame.font.Font(str(self.assets.root / name), size)
        except (FileNotFoundError, OSError):
            if complain:
                print("No font is here!", file=sys.stderr)
            return pygame.font.Font(None, size)

    def _init_fonts(self) -> None:
        pygame.font.init()
        if self._menu_font is None:
            self._menu_font = self._load_font(config.MENU_FONT_PATH, 40, True)
        if self._score_font is None:
            self._score_font = self._load_font(
                config.SCORE_FONT_PATH, config.SCORE_FONT_SIZE, False
            )

    # ------------------------------------------------------------------ menus

    def _render_state(self, state: GameState) -> None:
        screen = self._screen
        screen.fill(_BLACK)
        if state.background_path is not None:
            try:
                screen.blit(self.assets.image(state.background_path), (0, 0))
            except (FileNotFoundError, pygame.error):
                pass
        fonts: dict[int, pygame.font.Font] = {}
        for label in state.labels:
            if not label.text:
                continue
            font = fonts.get(label.size)
            if font is None:
                font = self._load_font(config.MENU_FONT_PATH, label.size, False)
                fonts[label.size] = font
            screen.blit(font.render(label.text, True, label.color), label.position)

    def menu(self) -> None:
        """Run the menu screens until a game is started or the window closes."""
        pygame.mouse.set_visible(False)
        clock = pygame.time.Clock()
        while self.context.open:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.context.close()
                elif event.type == pygame.KEYDOWN:
                    key = _KEYS.get(event.key)
                    if key is not None:
                        self.current = self.current.handle_key(key, self.context)
                if StateId.PLAY in self.context.states:
                    return
            self.current.gems = self.world.player.gems
            self.current.stars = self.world.player.stars
            self.current = self.current.update(self.context)
            self._render_state(self.current)
            pygame.display.flip()
            clock.tick(config.FRAME_RATE)

    # ------------------------------------------------------------------- game

    def _finish(self, state_id: StateId, state: GameState, title: str) -> bool:
        self.context.states[state_id] = state
        self.current = state
        self.context.states.pop(StateId.PLAY, None)
        self.context.open = True
        pygame.display.set_caption(title)
        self.menu()
        return False

    def _pause(self) -> None:
        self.context.states.pop(StateId.PLAY, None)
        pause = PauseState()
        self.context.states[StateId.PAUSE] = pause
        self.current = pause
        self.menu()

    def _handle_events(self) -> None:
        pressed = pygame.key.get_pressed()
        self.world.step_input(
            bool(pressed[pygame.K_LEFT]),
            bool(pressed[pygame.K_RIGHT]),
            bool(pressed[pygame.K_UP]),
        )
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.context.close()
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.context.close()
                elif event.key == pygame.K_p:
                    self._pause()

    def _blit(self, name: str, position: tuple[int, int], origin: tuple[int, int]) -> None:
        self._screen.blit(
            self.assets.image(name),
            (position[0] - origin[0], position[1] - origin[1]),
        )

    def _draw_objects(self, objects: list[GameObject], origin: tuple[int, int]) -> None:
        for item in objects:
            if item.drawn:
                self._blit(item.image, item.position, origin)

    def _draw_actors(self, actors: list[Actor], origin: tuple[int, int]) -> None:
        for actor in actors:
            frame = actor.render_frame()
            if frame is not None:
                name, position = frame
                self._blit(_actor_picture(name), position, origin)

    def _draw_text(self, text: str, position: tuple[int, int], origin: tuple[int, int]) -> None:
        surface = self._score_font.render(text, True, _BLACK)
        self._screen.blit(surface, (position[0] - origin[0], position[1] - origin[1]))

    def _draw(self) -> None:
        world = self.world
        player = world.player
        layout = hud_layout(self._view_center, player.lives, player.gems, player.stars)
        if world.gems:
            world.gems[0].set_position(*layout.gem_icon)
        if world.stars:
            world.stars[0].set_position(*layout.star_icon)
        origin = layout.background
        self._screen.fill(_BLACK)
        self._blit(config.BACKGROUND_IMAGE, origin, origin)
        self._draw_objects(world.blocks, origin)
        self._draw_actors(world.baby_turtles, origin)
        self._draw_actors(world.blue_enemies, origin)
        self._draw_objects(world.gates, origin)
        self._draw_objects(world.gems, origin)
        for name, position in layout.hearts:
            self._blit(name, position, origin)
        self._draw_actors(world.orange_enemies, origin)
        self._draw_objects(world.stars, origin)
        self._draw_objects(world.thorns, origin)
        self._draw_text(layout.star_text, layout.star_text_position, origin)
        self._draw_text(layout.gem_text, layout.gem_text_position, origin)
        self._draw_actors([player], origin)
        self._view_center = (player.x, player.y + _VIEW_Y_OFFSET)

    def run(self) -> bool:
        """Show the menu and play the level; True when the player chose to exit."""
        pygame.init()
        self._screen = pygame.display.set_mode((config.WINDOW_WIDTH, config.WINDOW_HEIGHT))
        pygame.display.set_caption(config.WINDOW_TITLE)
        self._init_fonts()
        self.context = MenuContext()
        main_menu = MainMenuState()
        self.context.states[StateId.MAIN_MENU] = main_menu
        self.current = main_menu
        self.menu()
        if StateId.EXIT in self.context.states:
            return True

        self._view_center = (config.WINDOW_WIDTH / 2, config.WINDOW_HEIGHT / 2)
        clock = pygame.time.Clock()
        ghost_since = frame_since = pygame.time.get_ticks()
        while self.context.open:
            now = pygame.time.get_ticks()
            if self.world.has_lost():
                return self._finish(StateId.LOSE, LoseState(), "LOSE")
            if self.world.has_won():
                return self._finish(StateId.WIN, WinState(), "WIN")
            if now - ghost_since >= config.ENEMY_BECOME_GHOST_TIME * 1000:
                self.world.change_blue_enemy_mode()
                ghost_since = now
            if now - frame_since >= config.CHANGE_FRAME_TIME:
                self.world.change_step()
                frame_since = now
            self._handle_events()
            self.world.move_baby_turtles()
            self.world.turtles_get_home()
            self.world.increase_score()
            self.world.handle_enemies()
            self._draw()
            pygame.display.flip()
            clock.tick(config.FRAME_RATE)
        return False


def main(argv: list[str] | None = None) -> int:
    """Play sessions until the player picks exit from the main menu."""
    parser = argparse.ArgumentParser(prog="turtix", description="Rescue the baby turtles.")
    parser.add_argument("--root", default=".", help="game directory holding the pictures")
    parser.add_argument("--map", default=config.MAP_PATH, help="map file, relative to the root")
    args = parser.parse_args(argv)
    try:
        while True:
            app = TurtixApp(args.root, args.map)
            if app.run():
                break
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())