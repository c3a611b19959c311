"""Game rules: collisions, movement, scoring and the win and lose conditions."""

from __future__ import annotations

import copy
from collections.abc import Callable, Iterable

from turtix import config
from turtix.entities import Actor, Direction, GameObject
from turtix.mapfile import MapEntry

SizeLookup = Callable[[str], "tuple[int, int]"]

_FREE_MARGIN = 5
_THORN_TOP_MARGIN = 25
_THORN_SIDE_MARGIN = 20
_ENEMY_SIDE_MARGIN = 30
_ENEMY_HIT_MARGIN = 11


class World:
    """Everything placed on a level and the rules that move it each frame."""

    def __init__(self, size_of: SizeLookup) -> None:
        self._size_of = size_of
        self.player = self._make_actor(
            config.PORTAL_X, config.PORTAL_Y, config.PLAYER_SPEED,
            config.PLAYER_IMAGES, animated=True,
        )
        self.started = False
        self.blocks: list[GameObject] = []
        self.thorns: list[GameObject] = []
        self.gates: list[GameObject] = []
        self.gems: list[GameObject] = []
        self.stars: list[GameObject] = []
        self.hearts: list[GameObject] = []
        self.baby_turtles: list[Actor] = []
        self.orange_enemies: list[Actor] = []
        self.blue_enemies: list[Actor] = []

    # ------------------------------------------------------------------ setup

    def _make_object(self, x: int, y: int, image: str) -> GameObject:
        return GameObject(x, y, image, self._size_of(image))

    def _make_actor(
        self, x: int, y: int, speed: int, images: tuple[str, ...], animated: bool
    ) -> Actor:
        size = self._size_of(config.PICTURES_DIR + images[0] + ".png")
        return Actor(x, y, speed, images, animated, size)

    def reset(self) -> None:
        """Put the player back at the portal and empty the level."""
        self.player.teleport(config.PORTAL_X, config.PORTAL_Y)
        self.player.reset_scores()
        self.player.lives = config.NUMBER_OF_HEARTS
        self.started = True
        for group in (
            self.blocks, self.thorns, self.baby_turtles, self.gates,
            self.orange_enemies, self.blue_enemies, self.gems, self.stars,
            self.hearts,
        ):
            group.clear()
        self.hearts.extend(
            self._make_object(0, 0, config.DEAD_HEART_IMAGE)
            for _ in range(config.NUMBER_OF_HEARTS)
        )
        self.hearts.extend(
            self._make_object(0, 0, config.HEART_IMAGE)
            for _ in range(config.NUMBER_OF_HEARTS)
        )

    def _picture(self, entry: MapEntry) -> str:
        return config.PICTURES_DIR + (entry.value or "") + ".png"

    def _place(self, entry: MapEntry) -> None:
        kind = entry.kind
        if kind == "blocks":
            self.blocks.append(self._make_object(entry.x, entry.y, self._picture(entry)))
        elif kind == "thorns":
            self.thorns.append(self._make_object(entry.x, entry.y, self._picture(entry)))
        elif kind == "gates":
            self.gates.append(self._make_object(entry.x, entry.y, self._picture(entry)))
        elif kind == "turtles":
            self.baby_turtles.append(self._make_actor(
                entry.x, entry.y, config.TURTLE_SPEED,
                config.BABY_TURTLE_IMAGES, animated=True,
            ))
        elif kind == "weak_enemies":
            self.orange_enemies.append(self._make_actor(
                entry.x, entry.y, config.BASE_ENEMY_SPEED + entry.speed_bonus,
                config.WEAK_ENEMY_IMAGES, animated=False,
            ))
        elif kind == "strong_enemies":
            self.blue_enemies.append(self._make_actor(
                entry.x, entry.y, config.BASE_ENEMY_SPEED + entry.speed_bonus,
                config.STRONG_ENEMY_IMAGES, animated=False,
            ))
        elif kind == "gems":
            self.gems.append(self._make_object(entry.x, entry.y, config.GEM_IMAGE))
        elif kind == "stars":
            self.stars.append(self._make_object(entry.x, entry.y, config.STAR_IMAGE))

    def load(self, entries: Iterable[MapEntry]) -> None:
        """Reset the level and place every map entry on it."""
        self.reset()
        for entry in entries:
            self._place(entry)

    # --------------------------------------------------------------- movement

    def able_to_do_next_move(self, direction: Direction) -> bool:
        """Whether no block stops the player stepping sideways."""
        player = self.player
        pw, _ = player.size
        for index, wall in enumerate(self.blocks):
            if (index == config.BOUND_RIGHT_WALL1 and direction == Direction.RIGHT
                    and player.y <= wall.y):
                continue
            if (index in (config.BOUND_LEFT_WALL1, config.BOUND_LEFT_WALL2)
                    and direction == Direction.LEFT):
                continue
            touching = wall.bounds().intersects(player.bounds())
            if (touching and player.x + pw - config.STEP_SIZE <= wall.x
                    and direction == Direction.RIGHT):
                return False
            if (touching and player.x >= wall.x + wall.size[0] - config.STEP_SIZE
                    and direction == Direction.LEFT):
                return False
        return True

    def _enemy_on_left(self, enemy: Actor) -> bool:
        return (enemy.bounds().intersects(self.player.bounds())
                and self.player.x >= enemy.x + enemy.size[0]
                - config.STEP_SIZE - enemy.speed)

    def _enemy_on_right(self, enemy: Actor) -> bool:
        return (enemy.bounds().intersects(self.player.bounds())
                and self.player.x + self.player.size[0] - config.STEP_SIZE
                - enemy.speed <= enemy.x)

    def _is_enemy_annoying(self, enemies: list[Actor], direction: Direction) -> bool:
        for enemy in enemies:
            if not enemy.is_drawn():
                continue
            if ((direction == Direction.LEFT and self._enemy_on_left(enemy))
                    or (direction == Direction.RIGHT and self._enemy_on_right(enemy))):
                self._lose_life()
                return True
        return False

    def _turtle_blocks(self, turtle: Actor, direction: Direction) -> bool:
        if turtle.free or not turtle.bounds().intersects(self.player.bounds()):
            return False
        if direction == Direction.LEFT:
            return self.player.x >= turtle.x
        if direction == Direction.RIGHT:
            return self.player.x <= turtle.x
        return False

    def move_player(self, direction: Direction) -> None:
        """Move the player unless a wall, an enemy or a caged turtle is in the way."""
        if not self.started:
            return
        if not self.able_to_do_next_move(direction):
            return
        if self._is_enemy_annoying(self.orange_enemies, direction):
            return
        if self._is_enemy_annoying(self.blue_enemies, direction):
            return
        if any(self._turtle_blocks(turtle, direction) for turtle in self.baby_turtles):
            return
        self.player.move(direction)

    def step_input(self, left: bool, right: bool, up: bool) -> None:
        """Apply one frame of held arrow keys to the player."""
        if left:
            self.move_player(Direction.LEFT)
        elif right:
            self.move_player(Direction.RIGHT)
        self.jump(self.player, True, up)

    # ---------------------------------------------------------------- jumping

    def _stands_on(self, block: GameObject, actor: Actor) -> bool:
        return (block.bounds().intersects(actor.bounds())
                and actor.y <= block.y
                and actor.x + actor.size[0] - config.GAP >= block.x
                and actor.x <= block.x + block.size[0] - config.GAP)

    def can_jump(self, actor: Actor) -> bool:
        """Whether the actor stands on some block."""
        return any(self._stands_on(block, actor) for block in self.blocks)

    def _hits_ceiling(self, block: GameObject, actor: Actor) -> bool:
        return (block.bounds().intersects(actor.bounds())
                and actor.y >= block.y + block.size[1] // 2
                and actor.x + actor.size[0] >= block.x + config.PLAYER_SPEED + 1
                and actor.x + config.PLAYER_SPEED + 1 <= block.x + block.size[0])

    def jump(self, actor: Actor, controlled: bool, up_pressed: bool = False) -> None:
        """Apply gravity, a jump or a ceiling bounce, then move vertically."""
        if not self.started:
            return
        if not self.can_jump(actor):
            actor.apply_gravity(config.GRAVITY)
        elif up_pressed and controlled:
            actor.set_vertical_speed(config.JUMP_FIRST_AMOUNT)
        else:
            actor.set_vertical_speed(0)
        for index, block in enumerate(self.blocks):
            if index in (config.BLOCK_BOUND1, config.BLOCK_BOUND2):
                continue
            if self._hits_ceiling(block, actor):
                actor.set_vertical_speed(config.TOUCH_CEILING_FALL)
        if controlled:
            self.move_player(Direction.UP)
        else:
            actor.move(Direction.UP)

    # ----------------------------------------------------------------- turtles

    def _can_turtle_be_free(self, turtle: Actor) -> bool:
        player = self.player
        return (turtle.bounds().intersects(player.bounds())
                and player.y <= turtle.y
                and player.x + player.size[0] - _FREE_MARGIN >= turtle.x
                and player.x <= turtle.x + turtle.size[0] - _FREE_MARGIN)

    def make_turtles_free(self) -> None:
        """Release every caged turtle the player lands on, bouncing the player."""
        for turtle in self.baby_turtles:
            if turtle.free:
                continue
            if self._can_turtle_be_free(turtle):
                turtle.free = True
                self.player.set_vertical_speed(config.HIT_JUMP)
                self.move_player(Direction.UP)

    def _skips_block(self, index: int, direction: Direction,
                     snapshot: Actor, block: GameObject) -> bool:
        if direction == Direction.LEFT and index in (
                config.BOUND_LEFT_WALL1, config.BOUND_LEFT_WALL2):
            return True
        return (direction == Direction.RIGHT and index == config.BOUND_RIGHT_WALL1
                and snapshot.y <= block.y)

    def move_baby_turtles(self) -> None:
        """Free turtles, then walk every free turtle, turning round at walls."""
        self.make_turtles_free()
        for turtle in self.baby_turtles:
            snapshot = copy.copy(turtle)
            direction = snapshot.direction
            if not turtle.free or not turtle.is_drawn():
                continue
            self.jump(turtle, False)
            for index, block in enumerate(self.blocks):
                if self._skips_block(index, direction, snapshot, block):
                    continue
                touching = block.bounds().intersects(snapshot.bounds())
                if (direction == Direction.LEFT and touching
                        and snapshot.x >= block.x + block.size[0] - config.STEP_SIZE):
                    direction = Direction.RIGHT
                    break
                if (direction == Direction.RIGHT and touching
                        and snapshot.x + snapshot.size[0] - config.STEP_SIZE <= block.x):
                    direction = Direction.LEFT
                    break
            turtle.direction = direction
            turtle.move(direction)

    def turtles_get_home(self) -> None:
        """Hide every turtle that has reached the home gate."""
        if not self.gates:
            return
        gate = self.gates[0].bounds()
        for turtle in self.baby_turtles:
            if gate.intersects(turtle.bounds()):
                turtle.visible = False

    # ---------------------------------------------------------------- dangers

    def _lose_life(self) -> None:
        self.player.teleport(config.PORTAL_X, config.PORTAL_Y)
        self.player.lives -= 1

    def _touches_thorn(self, thorn: GameObject) -> bool:
        player = self.player
        pw, ph = player.size
        return (thorn.bounds().intersects(player.bounds())
                and player.y + ph >= thorn.y + _THORN_TOP_MARGIN
                and player.x + pw >= thorn.x + _THORN_SIDE_MARGIN
                and player.x + _THORN_SIDE_MARGIN <= thorn.x + thorn.size[0])

    def touch_thorns(self) -> None:
        """Cost the player a life for each thorn stepped on."""
        for thorn in self.thorns:
            if self._touches_thorn(thorn):
                self._lose_life()

    def _touches_enemy(self, enemy: Actor) -> bool:
        player = self.player
        ew, eh = enemy.size
        return (enemy.bounds().intersects(player.bounds())
                and player.y <= enemy.y + 3 * eh // 4
                and player.x + player.size[0] >= enemy.x + _ENEMY_SIDE_MARGIN
                and player.x + _ENEMY_SIDE_MARGIN <= enemy.x + ew)

    def _touch_and_die(self, enemies: list[Actor]) -> None:
        for enemy in enemies:
            if not enemy.is_drawn():
                continue
            if self._touches_enemy(enemy):
                self._lose_life()
                return

    def _touch_and_hit(self, enemies: list[Actor]) -> None:
        for enemy in enemies:
            if not enemy.is_drawn():
                continue
            if enemy.bounds().intersects(self.player.bounds()):
                self.player.set_vertical_speed(config.HIT_JUMP / 2)
                self.move_player(Direction.UP)

    def touch_enemies(self, enemies: list[Actor]) -> None:
        """Cost a life for running into an enemy, and bounce off any touched."""
        self._touch_and_die(enemies)
        self._touch_and_hit(enemies)

    def _is_enemy_hit(self, enemy: Actor) -> bool:
        player = self.player
        pw, ph = player.size
        return (enemy.bounds().intersects(player.bounds())
                and player.y + 3 * ph // 4 <= enemy.y
                and player.x + pw >= enemy.x + _ENEMY_HIT_MARGIN
                and player.x + _ENEMY_HIT_MARGIN <= enemy.x + enemy.size[0])

    def kill_enemies(self, enemies: list[Actor]) -> None:
        """Take a life from every enemy the player lands on, bouncing the player."""
        for enemy in enemies:
            if not enemy.is_drawn() or not self.started:
                continue
            if self._is_enemy_hit(enemy):
                enemy.lives -= 1
                if enemy.lives >= 0:
                    self.player.set_vertical_speed(config.HIT_JUMP)
                self.move_player(Direction.UP)

    def _enemy_blocked_left(self, block: GameObject, snapshot: Actor) -> bool:
        return (block.bounds().intersects(snapshot.bounds())
                and (snapshot.x >= block.x + block.size[0] - config.STEP_SIZE
                     or snapshot.x <= block.x))

    def _enemy_blocked_right(self, block: GameObject, snapshot: Actor) -> bool:
        right = snapshot.x + snapshot.size[0]
        return (block.bounds().intersects(snapshot.bounds())
                and (right - config.STEP_SIZE <= block.x
                     or right >= block.x + block.size[0]))

    def move_enemies(self, enemies: list[Actor]) -> None:
        """Walk every living enemy, turning round at walls and block edges."""
        if not self.started:
            return
        for enemy in enemies:
            snapshot = copy.copy(enemy)
            direction = snapshot.direction
            if not enemy.is_drawn():
                continue
            self.jump(enemy, False)
            for index, block in enumerate(self.blocks):
                if self._skips_block(index, direction, snapshot, block):
                    continue
                if direction == Direction.LEFT and self._enemy_blocked_left(block, snapshot):
                    direction = Direction.RIGHT
                    break
                if direction == Direction.RIGHT and self._enemy_blocked_right(block, snapshot):
                    direction = Direction.LEFT
                    break
            enemy.direction = direction
            enemy.move(direction)

    def change_blue_enemy_mode(self) -> None:
        """Raise or drop the shield of every blue enemy."""
        for enemy in self.blue_enemies:
            if enemy.lives == config.BLUE_ENEMY_LIVE_WITHOUT_SHIELD:
                enemy.lives = config.BLUE_ENEMY_LIVES
            elif enemy.lives == config.BLUE_ENEMY_LIVES:
                enemy.lives = config.BLUE_ENEMY_LIVE_WITHOUT_SHIELD

    def handle_enemies(self) -> None:
        """Run one frame of thorns and enemies; shielded blue enemies cannot be hit."""
        self.touch_thorns()
        self.move_enemies(self.orange_enemies)
        self.kill_enemies(self.orange_enemies)
        self.touch_enemies(self.orange_enemies)
        self.move_enemies(self.blue_enemies)
        shielded = any(enemy.lives == config.BLUE_ENEMY_LIVES for enemy in self.blue_enemies)
        if not shielded:
            self.kill_enemies(self.blue_enemies)
        self.touch_enemies(self.blue_enemies)

    # ------------------------------------------------------------ bookkeeping

    def increase_score(self) -> None:
        """Collect every star and gem the player touches."""
        for star in self.stars:
            if star.bounds().intersects(self.player.bounds()) and star.drawn:
                star.drawn = False
                self.player.stars += 1
        for gem in self.gems:
            if gem.bounds().intersects(self.player.bounds()) and gem.drawn:
                gem.drawn = False
                self.player.gems += 1

    def change_step(self) -> None:
        """Advance the walking animation of the player and the turtles."""
        self.player.increase_step()
        for turtle in self.baby_turtles:
            turtle.increase_step()

    def has_lost(self) -> bool:
        return self.player.lives <= 0

    def has_won(self) -> bool:
        """True when every turtle is home and the player stands at the gate."""
        if not self.gates:
            return False
        saved = sum(1 for turtle in self.baby_turtles if not turtle.is_drawn())
        return (self.gates[0].bounds().intersects(self.player.bounds())
                and saved == len(self.baby_turtles))