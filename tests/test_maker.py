import random

import pytest

from tinyarcade.maker import (
    BLOK,
    BS,
    GRAV_JUMP,
    GRAV_ZERO,
    NR_ENEMIES,
    OPEN,
    PLYR_H,
    PLYR_W,
    SAND,
    STARTPX,
    STARTPY,
    START_HP,
    TILESH,
    TILESW,
    Control,
    Direction,
    Enemy,
    EnemyType,
    MakerGame,
    PlayerState,
    Rect,
    collide,
    legit_tile,
)


def _empty_game(seed=1):
    game = MakerGame(random.Random(seed))
    game.tiles = [[OPEN] * TILESW for _ in range(TILESH)]
    game.enemies = [Enemy() for _ in range(NR_ENEMIES)]
    return game


def _floor_game():
    game = _empty_game()
    game.tiles[10] = [BLOK] * TILESW
    return game


def test_collide_overlap_and_touching_edge():
    a = Rect(0, 0, 10, 10)
    assert collide(a, Rect(5, 5, 10, 10))
    assert collide(a, Rect(-10, 0, 10, 10))
    assert not collide(a, Rect(10, 0, 10, 10))
    assert not collide(a, Rect(0, 20, 10, 10))


def test_legit_tile_bounds():
    assert legit_tile(0, 0)
    assert legit_tile(TILESW - 1, TILESH - 1)
    assert not legit_tile(-1, 0)
    assert not legit_tile(TILESW, 0)
    assert not legit_tile(0, TILESH)


def test_new_game_player_defaults():
    game = MakerGame(random.Random(3))
    p = game.player
    assert p.alive
    assert (p.pos.x, p.pos.y, p.pos.w, p.pos.h) == (STARTPX, STARTPY, PLYR_W, PLYR_H)
    assert p.hp == START_HP
    assert p.grav == GRAV_ZERO
    assert p.dir == Direction.NORTH
    assert p.state == PlayerState.NORMAL


def test_load_level_tiles_and_enemies():
    game = MakerGame(random.Random(7))
    assert all(t in (SAND, BLOK) for row in game.tiles for t in row)
    alive = [e for e in game.enemies if e.alive]
    assert len(alive) == 3
    for e in alive:
        assert e.kind in (EnemyType.PIG, EnemyType.SCREW)
        assert 20 <= e.freeze < 50
        assert e.hp == 3
        assert e.pos.w == BS and e.pos.h == BS // 2
        assert e.pos.x % BS == 0


def test_load_level_is_deterministic_for_seed():
    a = MakerGame(random.Random(42))
    b = MakerGame(random.Random(42))
    assert a.tiles == b.tiles
    assert [e.pos for e in a.enemies] == [e.pos for e in b.enemies]


def test_find_free_slot():
    game = MakerGame(random.Random(2))
    assert game.find_free_slot() == 3
    for e in game.enemies:
        e.alive = True
    assert game.find_free_slot() is None


def test_key_left_right_direction():
    game = _empty_game()
    game.key(Control.LEFT, True)
    assert game.player.goingl and game.player.dir == Direction.WEST
    game.key(Control.RIGHT, True)
    assert game.player.goingr and game.player.dir == Direction.EAST
    game.key(Control.LEFT, False)
    assert not game.player.goingl


def test_jump_requires_ground():
    game = _empty_game()
    game.player.ground = False
    game.key(Control.JUMP, True)
    assert not game.player.jumping
    game.player.ground = True
    game.key(Control.JUMP, True)
    assert game.player.jumping and game.player.grav == GRAV_JUMP
    game.key(Control.JUMP, False)
    assert not game.player.jumping


def test_quit_control():
    game = _empty_game()
    game.key(Control.QUIT, True)
    assert game.running is False


def test_mouse_move_tracks_block():
    game = _empty_game()
    game.mouse_move(BS * 2 + 5, BS * 4 + 1)
    assert (game.cblockx, game.cblocky) == (2, 4)
    assert (game.cursorx, game.cursory) == (BS * 2 + 5, BS * 4 + 1)


def test_block_and_world_collide():
    game = _empty_game()
    game.tiles[3][4] = BLOK
    inside = Rect(BS * 4 + 5, BS * 3 + 5, 10, 10)
    assert game.block_collide(4, 3, inside)
    assert not game.block_collide(-1, 3, inside)
    assert game.world_collide(inside)
    game.tiles[3][4] = SAND
    assert not game.world_collide(inside)


def test_move_player_stops_at_wall():
    game = _empty_game()
    game.tiles[8][5] = BLOK
    assert game.move_player(100, 0)
    assert game.player.pos.x + PLYR_W == 5 * BS
    assert game.move_player(10, 0) is False
    assert game.player.pos.x + PLYR_W == 5 * BS


def test_move_player_zero_velocity_counts_as_moved():
    game = _empty_game()
    before = Rect(**vars(game.player.pos))
    assert game.move_player(0, 0)
    assert game.player.pos == before


def test_player_falls_onto_floor_and_jumps():
    game = _floor_game()
    for _ in range(200):
        game.update_player()
    p = game.player
    assert p.ground
    assert p.pos.y + PLYR_H == 10 * BS
    resting = p.pos.y
    game.key(Control.JUMP, True)
    game.update_player()
    assert p.pos.y < resting


def test_walking_right_moves_player():
    game = _floor_game()
    start = game.player.pos.x
    game.key(Control.RIGHT, True)
    for _ in range(10):
        game.update_player()
    assert game.player.pos.x > start
    assert game.player.vel_x <= 2 * 3


def test_enemy_hit_hurts_player():
    game = _empty_game()
    p = game.player
    game.enemies[0] = Enemy(pos=Rect(p.pos.x, p.pos.y, BS, BS // 2), kind=EnemyType.PIG, alive=True, hp=3)
    game.update_player()
    assert p.hp == START_HP - 1
    assert p.stun == 50
    assert p.reeldir == Direction.WEST


def test_puff_does_not_hurt():
    game = _empty_game()
    p = game.player
    game.enemies[0] = Enemy(pos=Rect(p.pos.x, p.pos.y, BS, BS // 2), kind=EnemyType.PUFF, alive=True)
    game.update_player()
    assert p.hp == START_HP


def test_death_cycle_restarts_game():
    game = _empty_game()
    p = game.player
    p.hp = 1
    game.enemies[0] = Enemy(pos=Rect(p.pos.x, p.pos.y, BS, BS // 2), kind=EnemyType.PIG, alive=True)
    game.update_player()
    assert p.state == PlayerState.DYING and p.stun == 100
    for _ in range(100):
        game.update_player()
    assert p.state == PlayerState.DEAD
    assert not p.alive
    for _ in range(100):
        game.update_player()
    assert game.player.alive
    assert game.player.hp == START_HP
    assert game.player.state == PlayerState.NORMAL


def test_frozen_enemy_does_not_move():
    game = _empty_game()
    game.enemies[0] = Enemy(pos=Rect(BS, BS, BS, BS // 2), kind=EnemyType.PIG, alive=True, freeze=5, vel_x=2)
    game.update_enemies()
    assert game.enemies[0].freeze == 4
    assert game.enemies[0].pos == Rect(BS, BS, BS, BS // 2)


def test_enemy_moves_and_stops_at_wall():
    game = _empty_game()
    game.enemies[0] = Enemy(pos=Rect(BS, BS, BS, BS // 2), kind=EnemyType.PIG, alive=True, vel_x=2)
    game.update_enemies()
    assert game.enemies[0].pos.x == BS + 2
    game.tiles[1][3] = BLOK
    game.enemies[0].pos = Rect(2 * BS - 1, BS, BS, BS // 2)
    game.enemies[0].vel_x = 2
    game.update_enemies()
    assert game.enemies[0].vel_x == 0 and game.enemies[0].vel_y == 0
    assert game.enemies[0].pos.x == 2 * BS - 1


def test_tick_advances_frame():
    game = _floor_game()
    game.tick()
    game.tick()
    assert game.frame == 2


@pytest.mark.parametrize("seed", [0, 5, 9])
def test_enemy_velocities_stay_in_range(seed):
    game = MakerGame(random.Random(seed))
    for _ in range(120):
        game.tick()
    for e in game.enemies:
        assert e.vel_x in (-2, 0, 2)
        assert e.vel_y in (-2, 0, 2)