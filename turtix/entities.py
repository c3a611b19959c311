"""Static objects and moving actors of the game world, free of any rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from turtix import config


class Direction(IntEnum):
    """Movement direction; the values double as animation frame offsets."""

    LEFT = 0
    RIGHT = 1
    UP = 2
    NO_WHERE = 3


_DELTA_X = {Direction.LEFT: -1, Direction.RIGHT: 1, Direction.UP: 0}


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its top-left corner and size."""

    left: float
    top: float
    width: float
    height: float

    def intersects(self, other: Rect) -> bool:
        """True when the two rectangles overlap with a non-empty area."""
        min_x1, max_x1 = sorted((self.left, self.left + self.width))
        min_y1, max_y1 = sorted((self.top, self.top + self.height))
        min_x2, max_x2 = sorted((other.left, other.left + other.width))
        min_y2, max_y2 = sorted((other.top, other.top + other.height))
        inter_left = max(min_x1, min_x2)
        inter_top = max(min_y1, min_y2)
        inter_right = min(max_x1, max_x2)
        inter_bottom = min(max_y1, max_y2)
        return inter_left < inter_right and inter_top < inter_bottom


@dataclass
class GameObject:
    """A static picture in the world: block, thorn, gate, gem, star or heart."""

    x: int
    y: int
    image: str
    size: tuple[int, int]
    drawn: bool = True

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    def set_position(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def bounds(self) -> Rect:
        width, height = self.size
        return Rect(self.x, self.y, width, height)


@dataclass
class Actor:
    """A moving character: the player, a baby turtle or an enemy."""

    x: int
    y: int
    speed: int
    images: tuple[str, ...]
    animated: bool
    size: tuple[int, int]
    direction: Direction = field(default=Direction.LEFT, init=False)
    lives: int = field(default=config.INITIAL_LIVES, init=False)
    stars: int = field(default=0, init=False)
    gems: int = field(default=0, init=False)
    step: int = field(default=1, init=False)
    dy: float = field(default=0.0, init=False)
    visible: bool = field(default=True, init=False)
    free: bool = field(default=False, init=False)
    frame: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.images = tuple(self.images)
        if not self.images:
            raise ValueError("an actor needs at least one image")

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    @property
    def image(self) -> str:
        """Name of the picture currently shown."""
        return self.images[self.frame]

    def bounds(self) -> Rect:
        width, height = self.size
        return Rect(self.x, self.y, width, height)

    def move(self, direction: Direction) -> None:
        """Step once in the given direction, updating the animation frame."""
        if direction not in _DELTA_X:
            raise ValueError(f"cannot move towards {direction!r}")
        half = (len(self.images) - 1) // 2
        if self.animated:
            if self.step > half:
                self.step = 1
            if direction != Direction.UP:
                self.frame = direction * (len(self.images) - 1) // 2 + self.step
        else:
            index = 3 if self.lives == 1 else 1
            if direction != Direction.UP:
                self.frame = direction + index
        self.x += _DELTA_X[direction] * self.speed
        if direction == Direction.UP:
            self.y = int(self.y + self.dy)

    def is_drawn(self) -> bool:
        """Whether the actor is still shown; an actor without lives is hidden for good."""
        if self.lives <= 0:
            self.visible = False
        return self.visible

    def teleport(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def increase_step(self) -> None:
        """Advance the walking animation, but only while standing on ground."""
        if self.dy == 0:
            self.step += 1

    def apply_gravity(self, amount: float) -> None:
        self.dy += amount

    def set_vertical_speed(self, value: float) -> None:
        self.dy = value

    def reset_scores(self) -> None:
        self.gems = 0
        self.stars = 0

    def render_frame(self) -> tuple[str, tuple[int, int]] | None:
        """Picture name and position to draw, or None when nothing is shown."""
        if self.visible:
            return (self.image, self.position)
        if self.lives <= 0:
            self.frame = config.DEAD_FRAME_BASE + self.direction
            return (self.image, (self.x, self.y + config.DEAD_SPRITE_OFFSET))
        return None