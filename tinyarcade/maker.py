"""Maker: a small tile-based platformer with walking, jumping and roaming enemies."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass, field, replace
from enum import Enum, IntEnum

SCALE = 3
W = 300 * SCALE
H = 220 * SCALE
TILESW = 15
TILESH = 11
BS = 20 * SCALE
BS2 = BS // 2
PLYR_W = 16 * SCALE
PLYR_H = 16 * SCALE
PLYR_SPD = 2 * SCALE
STARTPX = 3 * BS
STARTPY = 8 * BS
NR_PLAYERS = 1
NR_ENEMIES = 8
GRAV_JUMP = 0
GRAV_ZERO = 24
GRAV_MAX = 42
START_HP = 3 * 4
FPS = 60

BLOK = 45
CLIP = 58
LASTSOLID = CLIP
SAND = 60
OPEN = 75

GRAVITY = (
    -30, -27, -24, -21, -19, -17, -15, -13, -11, -10,
    -9, -8, -7, -6, -5, -4, -4, -3, -3, -2,
    -2, -1, -1, -1, 0, 1, 2, 3, 4, 5,
    6, 7, 8, 9, 10, 11, 12, 13, 14, 16,
    18, 20, 22,
)


class EnemyType(IntEnum):
    """Kinds of enemy; the value is the sprite row."""

    PIG = 7
    SCREW = 8
    PUFF = 12


class Direction(IntEnum):
    """Facing direction."""

    NORTH = 0
    WEST = 1
    EAST = 2
    SOUTH = 3


class PlayerState(IntEnum):
    """Life cycle of the player."""

    NORMAL = 0
    HURT = 1
    DYING = 2
    DEAD = 3


class Control(Enum):
    """Logical inputs the game reacts to."""

    LEFT = "left"
    RIGHT = "right"
    JUMP = "jump"
    QUIT = "quit"


@dataclass
class Rect:
    """An axis-aligned rectangle."""

    x: float
    y: float
    w: float
    h: float


def collide(a: Rect, b: Rect) -> bool:
    """True if rectangle b touches or overlaps rectangle a."""
    xcollide = b.x + b.w >= a.x and b.x < a.x + a.w
    ycollide = b.y + b.h >= a.y and b.y < a.y + a.h
    return xcollide and ycollide


def legit_tile(x: int, y: int) -> bool:
    """True if (x, y) is inside the level grid."""
    return 0 <= x < TILESW and 0 <= y < TILESH


@dataclass
class Player:
    """The player character."""

    pos: Rect = field(default_factory=lambda: Rect(0, 0, 0, 0))
    vel_x: int = 0
    vel_y: int = 0
    goingl: bool = False
    goingr: bool = False
    jumping: bool = False
    grav: int = 0
    ground: bool = False
    reel: int = 0
    reeldir: Direction = Direction.NORTH
    dir: Direction = Direction.NORTH
    state: PlayerState = PlayerState.NORMAL
    delay: int = 0
    frame: int = 0
    alive: bool = False
    hp: int = 0
    stun: int = 0


@dataclass
class Enemy:
    """One enemy slot; unused slots are not alive."""

    pos: Rect = field(default_factory=lambda: Rect(0, 0, 0, 0))
    vel_x: int = 0
    vel_y: int = 0
    reel: int = 0
    reeldir: Direction = Direction.NORTH
    state: int = 0
    kind: EnemyType | None = None
    delay: int = 0
    frame: int = 0
    alive: bool = False
    hp: int = 0
    stun: int = 0
    freeze: int = 0


class MakerGame:
    """Level, player and enemies, advanced one frame at a time."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.frame = 0
        self.drawclip = False
        self.running = True
        self.cursorx = -1
        self.cursory = -1
        self.cblockx = -1
        self.cblocky = -1
        self.tiles: list[list[int]] = [[OPEN] * TILESW for _ in range(TILESH)]
        self.players: list[Player] = [Player() for _ in range(NR_PLAYERS)]
        self.enemies: list[Enemy] = [Enemy() for _ in range(NR_ENEMIES)]
        self.new_game()

    @property
    def player(self) -> Player:
        return self.players[0]

    def new_game(self) -> None:
        """Reset the player and generate a fresh level."""
        self.players = [Player() for _ in range(NR_PLAYERS)]
        p = self.players[0]
        p.alive = True
        p.pos = Rect(STARTPX, STARTPY, PLYR_W, PLYR_H)
        p.dir = Direction.NORTH
        p.hp = START_HP
        p.grav = GRAV_ZERO
        self.load_level()

    def load_level(self) -> None:
        """Fill the grid with random blocks and sand and spawn three enemies."""
        rand = self.rng.randrange
        for x in range(TILESW):
            for y in range(TILESH):
                if y > TILESH - 3:
                    self.tiles[y][x] = SAND if rand(8) == 1 else BLOK
                else:
                    self.tiles[y][x] = BLOK if rand(8) == 1 else SAND

        self.enemies = [Enemy() for _ in range(NR_ENEMIES)]
        for enemy in self.enemies[:3]:
            enemy.kind = EnemyType.PIG if rand(2) else EnemyType.SCREW
            enemy.alive = True
            enemy.hp = 3
            enemy.freeze = 20 + rand(30)
            x = rand(TILESW)
            y = rand(TILESH)
            enemy.pos = Rect(BS * x, BS * y + BS2, BS, BS2)

    def find_free_slot(self) -> int | None:
        """Index of the first unused enemy slot, or None if all are in use."""
        return next((i for i, e in enumerate(self.enemies) if not e.alive), None)

    def key(self, control: Control, down: bool) -> None:
        """React to a control being pressed (down) or released."""
        p = self.player
        if control is Control.LEFT:
            p.goingl = down
            if down:
                p.dir = Direction.WEST
        elif control is Control.RIGHT:
            p.goingr = down
            if down:
                p.dir = Direction.EAST
        elif control is Control.JUMP:
            if p.state == PlayerState.NORMAL and p.ground and down:
                p.grav = GRAV_JUMP
                p.jumping = True
            if not down:
                p.jumping = False
        elif control is Control.QUIT:
            self.running = False

    def mouse_move(self, x: float, y: float) -> None:
        """Track the cursor and the tile under it."""
        self.cursorx = int(x)
        self.cursory = int(y)
        self.cblockx = int(self.cursorx / BS)
        self.cblocky = int(self.cursory / BS)

    def block_collide(self, bx: int, by: int, rect: Rect) -> bool:
        """True if rect touches the tile at (bx, by) and that tile is solid."""
        if not legit_tile(bx, by):
            return False
        if self.tiles[by][bx] <= LASTSOLID:
            return collide(rect, Rect(BS * bx, BS * by, BS, BS))
        return False

    def world_collide(self, rect: Rect) -> bool:
        """True if rect touches any solid tile near its top-left corner."""
        for i in range(3):
            for j in range(2):
                bx = int(rect.x / BS + i)
                by = int(rect.y / BS + j)
                if self.block_collide(bx, by, rect):
                    return True
        return False

    def move_player(self, velx: int, vely: int) -> bool:
        """Move the player a pixel at a time; False if it could not move at all."""
        p = self.player
        if not velx and not vely:
            return True

        last_was_x = False
        moved = False
        already_stuck = self.world_collide(p.pos)

        while velx or vely:
            testpos = replace(p.pos)
            if not velx or (last_was_x and vely):
                amt = 1 if vely > 0 else -1
                testpos.y += amt
                vely -= amt
                last_was_x = False
            else:
                amt = 1 if velx > 0 else -1
                testpos.x += amt
                velx -= amt
                last_was_x = True

            would_be_stuck = self.world_collide(testpos)
            if not would_be_stuck:
                already_stuck = False

            if would_be_stuck and not already_stuck:
                if last_was_x:
                    velx = 0
                else:
                    vely = 0
                continue

            p.pos = testpos
            moved = True

        return moved

    def update_player(self) -> None:
        """Advance the player one frame: input, gravity, ground and enemy hits."""
        p = self.player

        if p.stun > 0:
            p.stun -= 1

        if p.state == PlayerState.DEAD:
            if p.stun < 1:
                self.new_game()
            return

        if p.state == PlayerState.DYING:
            if self.frame % 6 == 0:
                p.dir = Direction((p.dir + 1) % 4)
            if p.stun < 1:
                p.alive = False
                p.state = PlayerState.DEAD
                p.stun = 100
            return

        if p.goingl and not p.goingr:
            p.vel_x -= 1
        elif p.vel_x < 0:
            p.vel_x += 1

        if p.goingr and not p.goingl:
            p.vel_x += 1
        elif p.vel_x > 0:
            p.vel_x -= 1

        p.vel_x = max(-PLYR_SPD, min(PLYR_SPD, p.vel_x))

        if not self.move_player(p.vel_x, p.vel_y):
            p.vel_x = 0

        # Releasing jump early shortens the jump.
        if not p.jumping and p.grav < GRAV_ZERO:
            p.grav = min(p.grav + 4, GRAV_ZERO)

        if not p.ground or p.grav < GRAV_ZERO:
            if not self.move_player(0, GRAVITY[p.grav]):
                p.grav = GRAV_ZERO
            elif p.grav < GRAV_MAX:
                p.grav += 1

        foot = Rect(p.pos.x, p.pos.y + p.pos.h, p.pos.w, 1)
        p.ground = self.world_collide(foot)
        if p.ground:
            p.grav = GRAV_ZERO

        for enemy in self.enemies:
            if (
                p.alive
                and enemy.alive
                and p.state != PlayerState.DYING
                and p.stun < 1
                and enemy.stun < 1
                and enemy.kind != EnemyType.PUFF
                and collide(p.pos, enemy.pos)
            ):
                p.hp -= 1
                if p.hp <= 0:
                    p.state = PlayerState.DYING
                    p.stun = 100
                else:
                    p.stun = 50
                    p.reel = 10
                    p.reeldir = Direction.WEST

    def update_enemies(self) -> None:
        """Advance every live enemy one frame."""
        rand = self.rng.randrange
        for enemy in self.enemies:
            if not enemy.alive:
                continue

            if enemy.stun > 0:
                enemy.stun -= 1

            if enemy.freeze > 0:
                enemy.freeze -= 1
                continue

            if enemy.kind == EnemyType.PIG:
                if enemy.vel_x == 0 and rand(10) == 0:
                    enemy.vel_x = rand(2) * 4 - 2
                    enemy.vel_y = rand(2) * 4 - 2
            elif enemy.kind == EnemyType.SCREW:
                if self.frame % 3 == 0:
                    if rand(2) == 0:
                        enemy.vel_x = rand(2) * 4 - 2
                        enemy.vel_y = 0
                    else:
                        enemy.vel_y = rand(2) * 4 - 2
                        enemy.vel_x = 0

            newpos = replace(enemy.pos)
            if enemy.reel:
                enemy.reel -= 1
                if enemy.reeldir == Direction.NORTH:
                    newpos.y -= 10
                elif enemy.reeldir == Direction.WEST:
                    newpos.x -= 10
                elif enemy.reeldir == Direction.EAST:
                    newpos.x += 10
                else:
                    newpos.y += 10
                if not self.world_collide(newpos) and enemy.reel != 0:
                    enemy.pos = newpos
                else:
                    enemy.pos.x = (enemy.pos.x + BS2 - 1) / BS2 * BS2
                    enemy.pos.y = (enemy.pos.y + BS2 - 1) / BS2 * BS2
            else:
                newpos.x += enemy.vel_x
                newpos.y += enemy.vel_y
                if self.world_collide(newpos):
                    enemy.vel_x = 0
                    enemy.vel_y = 0
                else:
                    enemy.pos = newpos

    def _animate(self) -> None:
        rand = self.rng.randrange
        for enemy in self.enemies:
            if not enemy.alive:
                continue
            if self.frame % 10 == 0 and enemy.kind == EnemyType.PIG:
                enemy.frame = (enemy.frame + 1) % 4
                if enemy.frame == 0 and rand(10) == 0:
                    enemy.frame = 4
            if not enemy.freeze and enemy.kind == EnemyType.PUFF:
                if self.frame % 8 == 0:
                    enemy.frame += 1
                    if enemy.frame > 4:
                        enemy.alive = False

        for p in self.players:
            if p.alive and self.frame % 5 == 0:
                p.frame = (p.frame + 1) % 4
                if p.frame == 0 and rand(10) == 0:
                    p.frame = 4

    def tick(self) -> None:
        """Advance the whole game by one frame."""
        self.update_player()
        self.update_enemies()
        self._animate()
        self.frame += 1


_ENEMY_COLOURS = {
    EnemyType.PIG: (230, 140, 160),
    EnemyType.SCREW: (150, 150, 170),
    EnemyType.PUFF: (230, 230, 230),
}


def _draw(game: MakerGame, screen) -> None:
    import pygame

    screen.fill((40, 40, 60))
    for y, row in enumerate(game.tiles):
        for x, t in enumerate(row):
            if t in (OPEN, CLIP):
                continue
            colour = (120, 90, 60) if t <= LASTSOLID else (200, 180, 120)
            pygame.draw.rect(screen, colour, pygame.Rect(BS * x, BS * y, BS, BS))
            if t == BLOK:
                pygame.draw.rect(screen, (160, 120, 80), pygame.Rect(BS * x, BS * y, BS, BS), SCALE)

    for enemy in game.enemies:
        if not enemy.alive:
            continue
        dest = pygame.Rect(int(enemy.pos.x), int(enemy.pos.y - BS2), int(enemy.pos.w), int(enemy.pos.h + BS2))
        colour = _ENEMY_COLOURS.get(enemy.kind, (255, 255, 255))
        if enemy.freeze:
            colour = (255, 255, 255)
        elif enemy.stun > 0:
            if (game.frame // 2) % 2:
                continue
            dest.x += (game.rng.randrange(3) - 1) * SCALE
            dest.y += (game.rng.randrange(3) - 1) * SCALE
        pygame.draw.rect(screen, colour, dest)

    for p in game.players:
        if not p.alive:
            continue
        dest = pygame.Rect(
            int(p.pos.x - (BS - PLYR_W) // 2),
            int(p.pos.y - (BS - PLYR_H)),
            int(p.pos.w + (BS - PLYR_W) // 2),
            BS,
        )
        if not p.stun or (game.frame // 2) % 2:
            pygame.draw.rect(screen, (80, 160, 240), dest)

    hp = game.player.hp
    heart = pygame.Rect(10, 10, SCALE * 10, SCALE * 10)
    for _ in range(5):
        fill = max(0, min(4, hp))
        pygame.draw.rect(screen, (90, 20, 20), heart)
        if fill:
            part = heart.copy()
            part.w = heart.w * fill // 4
            pygame.draw.rect(screen, (230, 40, 40), part)
        hp -= 4
        heart.x += SCALE * 10

    if game.drawclip:
        for y, row in enumerate(game.tiles):
            for x, t in enumerate(row):
                if t <= LASTSOLID:
                    pygame.draw.rect(screen, (255, 0, 0), pygame.Rect(BS * x + 1, BS * y + 1, BS - 1, BS - 1))

    pos = game.player.pos
    if game.player.ground:
        pygame.draw.rect(screen, (255, 255, 255), pygame.Rect(int(pos.x), int(pos.y + PLYR_H), PLYR_W, 16))

    overlay = pygame.Surface((BS - 1, BS - 1), pygame.SRCALPHA)
    overlay.fill((255, 127, 0, 127))
    screen.blit(overlay, (BS * game.cblockx + 1, BS * game.cblocky + 1))
    pygame.display.flip()


def main(argv: list[str] | None = None) -> int:
    """Open a window and play."""
    parser = argparse.ArgumentParser(prog="maker", description="Play Maker.")
    parser.add_argument("--seed", type=int, default=None, help="seed for level generation")
    args = parser.parse_args(argv)

    import pygame

    print(f"grav zero: {GRAVITY[GRAV_ZERO]}\ngrav max: {GRAVITY[GRAV_MAX]}")
    keymap = {
        pygame.K_LEFT: Control.LEFT,
        pygame.K_a: Control.LEFT,
        pygame.K_RIGHT: Control.RIGHT,
        pygame.K_d: Control.RIGHT,
        pygame.K_SPACE: Control.JUMP,
        pygame.K_z: Control.JUMP,
        pygame.K_j: Control.JUMP,
        pygame.K_k: Control.JUMP,
        pygame.K_ESCAPE: Control.QUIT,
    }

    pygame.init()
    try:
        screen = pygame.display.set_mode((W, H))
        pygame.display.set_caption("Maker")
        clock = pygame.time.Clock()
        game = MakerGame(random.Random(args.seed))

        while game.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type in (pygame.KEYDOWN, pygame.KEYUP):
                    control = keymap.get(event.key)
                    if control is not None:
                        game.key(control, event.type == pygame.KEYDOWN)
                elif event.type == pygame.MOUSEMOTION:
                    game.mouse_move(*event.pos)
            game.tick()
            _draw(game, screen)
            clock.tick(FPS)
        return 0
    finally:
        pygame.quit()