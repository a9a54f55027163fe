import random

import pytest

from tinyarcade import flappy
from tinyarcade.flappy import Bird, FlappyGame, GameState, Pipe


@pytest.fixture
def game():
    return FlappyGame(random.Random(1234))


def test_random_pipe_height_range(game):
    heights = [game.random_pipe_height() for _ in range(2000)]
    assert min(heights) >= 60
    assert max(heights) < 60 + (flappy.H - flappy.GROUND - flappy.GAP - 120)


def test_initial_state(game):
    assert game.state is GameState.READY
    assert game.bird.y == (flappy.H - flappy.GROUND) // 2
    assert game.bird.vel == 0
    assert [p.x for p in game.pipes] == [flappy.W, flappy.W]
    assert game.best == 0


def test_press_needs_idle_time_to_start(game):
    game.idle_time = flappy.IDLE_BEFORE_RESTART
    game.press()
    assert game.state is GameState.READY
    game.idle_time += 1
    game.press()
    assert game.state is GameState.ALIVE
    assert game.bird.vel == flappy.FLAP_VELOCITY
    assert game.score == 0
    assert [p.x for p in game.pipes] == [
        flappy.PHYS_W + flappy.PHYS_W // 2 - flappy.PIPE_W,
        flappy.PHYS_W - flappy.PIPE_W,
    ]


def test_press_while_alive_flaps(game):
    game.new_game()
    game.bird.vel = 5.0
    game.frame = 2.0
    game.press()
    assert game.bird.vel == flappy.FLAP_VELOCITY
    assert game.frame == 3.0


def test_update_does_nothing_when_not_alive(game):
    before = (game.bird.y, game.bird.vel, [p.x for p in game.pipes])
    game.update()
    assert (game.bird.y, game.bird.vel, [p.x for p in game.pipes]) == before


def test_gravity_step(game):
    game.new_game()
    start = game.bird.y
    game.update()
    assert game.bird.y == pytest.approx(start + flappy.FLAP_VELOCITY)
    assert game.bird.vel == pytest.approx(flappy.FLAP_VELOCITY + flappy.GRAVITY)
    assert all(p.x < flappy.PHYS_W for p in game.pipes)


def test_falling_to_ground_ends_game(game):
    game.new_game()
    game.score = 3
    for _ in range(200):
        game.update()
    assert game.state is GameState.GAMEOVER
    assert game.bird.y == flappy.FLOOR_Y
    assert game.idle_time == 0
    assert game.best == 3


def test_no_collision_keeps_bird_on_floor(game):
    game.new_game()
    game.has_collision = False
    for _ in range(100):
        game.update()
    assert game.state is GameState.ALIVE
    assert game.bird.y == flappy.FLOOR_Y


def test_collision_keeps_best(game):
    game.best = 10
    game.score = 4
    game.collision()
    assert game.state is GameState.GAMEOVER
    assert game.best == 10


def test_passing_pipe_scores(game):
    game.new_game()
    game.has_collision = False
    game.pipes = [Pipe(-3, 100.0), Pipe(400, 100.0)]
    game.update()
    assert game.score == 1


def test_hitting_pipe_ends_game(game):
    game.new_game()
    game.bird = Bird(260.0, 0.0)
    game.pipes = [Pipe(flappy.PLYR_X, 400.0)]
    game.update()
    assert game.state is GameState.GAMEOVER


def test_flying_through_gap_survives(game):
    game.new_game()
    game.bird = Bird(260.0, 0.0)
    game.pipes = [Pipe(flappy.PLYR_X, 200.0)]
    game.update()
    assert game.state is GameState.ALIVE


def test_respawn_of_first_pipe_moves_new_pipe(game):
    game.new_game()
    game.has_collision = False
    kept = Pipe(300, 100.0)
    game.pipes = [Pipe(-81, 100.0), kept]
    game.update()
    assert len(game.pipes) == 2
    assert game.pipes[0] is kept
    assert kept.x == 300 - flappy.PIPE_SPEED
    assert game.pipes[1].x == flappy.PHYS_W - flappy.PIPE_W - flappy.PIPE_SPEED


def test_respawn_of_last_pipe_leaves_new_pipe(game):
    game.new_game()
    game.has_collision = False
    kept = Pipe(300, 100.0)
    game.pipes = [kept, Pipe(-81, 100.0)]
    game.update()
    assert len(game.pipes) == 2
    assert game.pipes[0] is kept
    assert game.pipes[1].x == flappy.PHYS_W - flappy.PIPE_W


def test_fast_fall_resets_animation(game):
    game.new_game()
    game.frame = 3.5
    game.bird.vel = 11.0
    game.update()
    assert game.frame == 0.0
    assert game.animation_frame == 0


def test_same_seed_same_game():
    a = FlappyGame(random.Random(7))
    b = FlappyGame(random.Random(7))
    a.new_game()
    b.new_game()
    for _ in range(120):
        a.update()
        b.update()
    assert [(p.x, p.y) for p in a.pipes] == [(p.x, p.y) for p in b.pipes]
    assert a.state == b.state
    assert a.score == b.score