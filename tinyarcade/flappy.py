"""Flappy: steer a bird through gaps between scrolling pillars."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass, field
from enum import Enum

W = 480
H = 600
GROUND = 80
PIPE_W = 86
PHYS_W = W + PIPE_W + 80
GAP = 220
GRACE = 4
PLYR_X = 80
PLYR_SZ = 60

FLAP_VELOCITY = -11.7
GRAVITY = 0.61
PIPE_SPEED = 5
IDLE_BEFORE_RESTART = 30
FLOOR_Y = H - GROUND - PLYR_SZ
START_Y = (H - GROUND) // 2
FPS = 60


class GameState(Enum):
    """Phase of the game."""

    READY = "ready"
    ALIVE = "alive"
    GAMEOVER = "gameover"


@dataclass
class Bird:
    """The player: vertical position and velocity."""

    y: float = START_Y
    vel: float = 0.0


@dataclass(eq=False)
class Pipe:
    """A pillar pair; y is the top edge of the gap."""

    x: int
    y: float


@dataclass
class FlappyGame:
    """All game state and the rules that advance it one frame at a time."""

    rng: random.Random = field(default_factory=random.Random)
    state: GameState = GameState.READY
    bird: Bird = field(default_factory=Bird)
    pipes: list[Pipe] = field(default_factory=list)
    score: int = 0
    best: int = 0
    idle_time: int = IDLE_BEFORE_RESTART
    frame: float = 0.0
    has_collision: bool = True

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.state = GameState.READY
        self.bird = Bird(START_Y, 0.0)
        self.score = 0
        self.best = 0
        self.idle_time = IDLE_BEFORE_RESTART
        self.frame = 0.0
        self.has_collision = True
        self.pipes = [self._create_pipe(W), self._create_pipe(W)]

    def random_pipe_height(self) -> int:
        """Top of a fresh gap, between 60 and 239 inclusive."""
        return self.rng.randrange(H - GROUND - GAP - 120) + 60

    def _create_pipe(self, x: int) -> Pipe:
        return Pipe(x, self.random_pipe_height())

    @property
    def animation_frame(self) -> int:
        """Index of the bird sprite to show, 0..3."""
        return int(self.frame) % 4

    def new_game(self) -> None:
        """Start a fresh round."""
        self.state = GameState.ALIVE
        self.bird.y = START_Y
        self.bird.vel = FLAP_VELOCITY
        self.score = 0
        self.pipes = [
            self._create_pipe(PHYS_W + PHYS_W // 2 - PIPE_W),
            self._create_pipe(PHYS_W - PIPE_W),
        ]

    def press(self) -> None:
        """A key or mouse press: flap while alive, otherwise maybe restart."""
        if self.state is GameState.ALIVE:
            self.bird.vel = FLAP_VELOCITY
            self.frame += 1.0
        elif self.idle_time > IDLE_BEFORE_RESTART:
            self.new_game()

    def collision(self) -> None:
        """End the round, unless collisions are switched off."""
        if self.has_collision:
            self.state = GameState.GAMEOVER
            self.idle_time = 0
            self.best = max(self.best, self.score)

    def update(self) -> None:
        """Advance one frame of physics while the bird is alive."""
        if self.state is not GameState.ALIVE:
            return

        bird = self.bird
        bird.y += bird.vel
        bird.vel += GRAVITY

        if bird.vel > 10.0:
            self.frame = 0.0
        else:
            self.frame -= (bird.vel - 10.0) * 0.03

        if bird.y > FLOOR_Y:
            self.collision()
            bird.y = FLOOR_Y

        # Each pipe's successor is fixed before the pipe is updated, so a
        # respawned pipe is only moved this frame if it lands behind one still
        # waiting its turn.
        pipe = self.pipes[0] if self.pipes else None
        while pipe is not None:
            position = next(i for i, p in enumerate(self.pipes) if p is pipe)
            following = self.pipes[position + 1] if position + 1 < len(self.pipes) else None
            self._update_pipe(pipe)
            pipe = following

    def _update_pipe(self, pipe: Pipe) -> None:
        bird = self.bird
        if (
            PLYR_X + PLYR_SZ >= pipe.x + GRACE
            and PLYR_X <= pipe.x + PIPE_W - GRACE
            and (bird.y <= pipe.y - GRACE or bird.y + PLYR_SZ >= pipe.y + GAP + GRACE)
        ):
            self.collision()

        pipe.x -= PIPE_SPEED
        if PLYR_X - PIPE_SPEED < pipe.x + PIPE_W < PLYR_X:
            self.score += 1

        if pipe.x <= -PIPE_W:
            self.pipes = [p for p in self.pipes if p is not pipe]
            self.pipes.append(self._create_pipe(PHYS_W - PIPE_W))

    def _messages(self) -> list[tuple[str, int]]:
        lines = []
        if self.state is not GameState.READY:
            lines.append((str(self.score), 10))
        if self.state is GameState.GAMEOVER:
            lines.append((f"High score: {self.best}", 170))
        if self.state in (GameState.READY, GameState.GAMEOVER):
            lines.append(("Press any key", 240))
        return lines


def _draw(game: FlappyGame, screen, font) -> None:
    import pygame

    screen.fill((112, 197, 206))
    pillar = (84, 184, 64)
    for pipe in game.pipes:
        lower = int(pipe.y + GAP)
        pygame.draw.rect(screen, pillar, pygame.Rect(pipe.x, int(pipe.y) - H, PIPE_W, H))
        pygame.draw.rect(screen, pillar, pygame.Rect(pipe.x, lower, PIPE_W, H - lower - GROUND))
    pygame.draw.rect(screen, (222, 216, 149), pygame.Rect(0, H - GROUND, W, GROUND))

    wing = (0, -8, 0, 8)[game.animation_frame]
    body = pygame.Rect(PLYR_X, int(game.bird.y), PLYR_SZ, PLYR_SZ)
    pygame.draw.ellipse(screen, (250, 212, 50), body)
    pygame.draw.ellipse(
        screen, (240, 240, 240),
        pygame.Rect(PLYR_X + 4, int(game.bird.y) + 24 + wing, 24, 14),
    )

    if font is not None:
        for message, height in game._messages():
            surface = font.render(message, True, (255, 255, 255))
            screen.blit(surface, ((W - surface.get_width()) // 2, height))
    pygame.display.flip()


def main(argv: list[str] | None = None) -> int:
    """Open a window and play."""
    parser = argparse.ArgumentParser(prog="flappy", description="Play Flappy.")
    parser.add_argument("--seed", type=int, default=None, help="seed for pipe heights")
    args = parser.parse_args(argv)

    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((W, H))
        pygame.display.set_caption("Flappy")
        try:
            font = pygame.font.Font(None, 56)
        except (pygame.error, OSError):
            font = None
        clock = pygame.time.Clock()
        game = FlappyGame(random.Random(args.seed))

        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type in (pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN):
                    game.press()
            game.update()
            _draw(game, screen, font)
            clock.tick(FPS)
            game.idle_time += 1
    finally:
        pygame.quit()