import pytest

from turtix import config
from turtix.entities import Actor, Direction, GameObject, Rect


def make_player(x=100, y=200):
    return Actor(x, y, config.PLAYER_SPEED, config.PLAYER_IMAGES, True, (40, 60))


def make_enemy(x=100, y=200):
    return Actor(x, y, config.BASE_ENEMY_SPEED, config.WEAK_ENEMY_IMAGES, False, (50, 50))


def test_rect_overlap():
    assert Rect(0, 0, 10, 10).intersects(Rect(5, 5, 10, 10))


def test_rect_touching_edges_do_not_intersect():
    assert not Rect(0, 0, 10, 10).intersects(Rect(10, 0, 10, 10))


def test_rect_disjoint():
    a = Rect(0, 0, 10, 10)
    b = Rect(50, 50, 5, 5)
    assert not a.intersects(b)
    assert a.intersects(b) == b.intersects(a)


def test_game_object_bounds_follow_position():
    obj = GameObject(3, 4, "block", (30, 20))
    obj.set_position(11, 12)
    assert obj.bounds() == Rect(11, 12, 30, 20)
    assert obj.drawn


def test_actor_initial_state():
    actor = make_player()
    assert actor.lives == config.INITIAL_LIVES
    assert actor.direction == Direction.LEFT
    assert actor.image == config.PLAYER_IMAGES[0]
    assert actor.bounds() == Rect(100, 200, 40, 60)


def test_actor_needs_images():
    with pytest.raises(ValueError):
        Actor(0, 0, 1, (), True, (1, 1))


def test_move_left_and_right_change_x_by_speed():
    actor = make_player()
    actor.move(Direction.LEFT)
    assert actor.x == 100 - config.PLAYER_SPEED
    actor.move(Direction.RIGHT)
    assert actor.x == 100
    assert actor.y == 200


def test_animated_frames():
    actor = make_player()
    actor.move(Direction.LEFT)
    assert actor.image == "player1"
    actor.move(Direction.RIGHT)
    assert actor.image == "player10"


def test_animated_step_wraps():
    actor = make_player()
    for _ in range(20):
        actor.increase_step()
    actor.move(Direction.RIGHT)
    assert actor.step == 1
    assert actor.image == "player10"


def test_unanimated_frames_depend_on_lives():
    enemy = make_enemy()
    enemy.move(Direction.LEFT)
    assert enemy.image == "weak_enemy1"
    enemy.move(Direction.RIGHT)
    assert enemy.image == "weak_enemy2"
    enemy.lives = 1
    enemy.move(Direction.LEFT)
    assert enemy.image == "weak_enemy3"
    enemy.move(Direction.RIGHT)
    assert enemy.image == "weak_enemy4"


def test_move_up_keeps_frame_and_uses_dy():
    actor = make_player()
    actor.move(Direction.RIGHT)
    frame = actor.image
    actor.set_vertical_speed(config.JUMP_FIRST_AMOUNT)
    actor.move(Direction.UP)
    assert actor.y == 200 + int(config.JUMP_FIRST_AMOUNT)
    assert actor.image == frame
    assert actor.x == 100 + config.PLAYER_SPEED


def test_move_up_truncates_towards_zero():
    actor = make_player(y=10)
    actor.set_vertical_speed(-0.5)
    actor.move(Direction.UP)
    assert actor.y == 9


def test_small_gravity_does_not_move():
    actor = make_player()
    actor.apply_gravity(config.GRAVITY)
    actor.apply_gravity(config.GRAVITY)
    actor.move(Direction.UP)
    assert actor.y == 200
    assert actor.dy == pytest.approx(2 * config.GRAVITY)


def test_move_no_where_raises():
    with pytest.raises(ValueError):
        make_player().move(Direction.NO_WHERE)


def test_increase_step_only_on_ground():
    actor = make_player()
    actor.increase_step()
    assert actor.step == 2
    actor.set_vertical_speed(1.5)
    actor.increase_step()
    assert actor.step == 2


def test_is_drawn_hides_for_good_without_lives():
    actor = make_enemy()
    assert actor.is_drawn()
    actor.lives = 0
    assert not actor.is_drawn()
    actor.lives = 2
    assert not actor.is_drawn()


def test_teleport_and_reset_scores():
    actor = make_player()
    actor.stars = 4
    actor.gems = 2
    actor.teleport(config.PORTAL_X, config.PORTAL_Y)
    actor.reset_scores()
    assert actor.position == (config.PORTAL_X, config.PORTAL_Y)
    assert (actor.stars, actor.gems) == (0, 0)


def test_render_frame_visible():
    actor = make_player()
    assert actor.render_frame() == (config.PLAYER_IMAGES[0], (100, 200))


def test_render_frame_dead_enemy():
    enemy = make_enemy()
    enemy.lives = 0
    enemy.is_drawn()
    assert enemy.render_frame() == ("weak_enemy5", (100, 200 + config.DEAD_SPRITE_OFFSET))
    enemy.direction = Direction.RIGHT
    assert enemy.render_frame()[0] == "weak_enemy6"


def test_render_frame_hidden_alive():
    turtle = Actor(0, 0, config.TURTLE_SPEED, config.BABY_TURTLE_IMAGES, True, (30, 30))
    turtle.visible = False
    assert turtle.render_frame() is None