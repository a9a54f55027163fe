# tinyarcade

Two small arcade games and some pieces that go with them:

- **Flappy** (`tinyarcade.flappy`): tap to keep the bird in the air and fly through the gaps between pipes.
- **Maker** (`tinyarcade.maker`): a tile-based 2D platformer on a randomly generated level, with wandering enemies and a marker on the tile under the mouse.
- `tinyarcade.simplex`, `tinyarcade.simplex3` and `tinyarcade.simplex4`: seeded OpenSimplex noise in 2, 3 and 4 dimensions.
- `tinyarcade.timer`: a section timer that adds up the time spent in named parts of a loop.

## Installing

```
pip install .
```

The games need `pygame`, which is installed as a dependency. Install the `test` extra to run the tests with pytest.

## Playing

```
tinyarcade-flappy
tinyarcade-maker
```

Both commands take `--seed N` to make the random pipe heights or level layout repeatable.

In Flappy, press any key or a mouse button to start and to flap. Touching a pipe or the ground ends the round; after a short pause, a press starts a new one. The screen shows the score, and the high score after a round ends.

In Maker, move with the arrow keys or A/D and jump with Space, Z, J or K; releasing the jump key early gives a shorter jump. Escape quits. Running into an enemy costs health; when it runs out, a new level is generated.

The game rules can also be driven without a window: `FlappyGame` has `press()` and `update()`, and `MakerGame` has `key(control, down)` with a `Control` value, `mouse_move(x, y)` and `tick()`. Both take a `random.Random` for repeatable runs.

## Noise

```python
from tinyarcade.simplex import OpenSimplex
from tinyarcade.simplex3 import noise3
from tinyarcade.simplex4 import noise4

gen = OpenSimplex(seed=0)
gen.noise2(0.5, 1.25)
noise3(gen, 0.1, 0.2, 0.3)
noise4(gen, 0.1, 0.2, 0.3, 0.4)
```

The same seed always gives the same values. `OpenSimplex.from_permutation(perm)` builds a generator from a permutation table you supply; it raises `ValueError` if the table has fewer than 256 entries.

## Timing sections

```python
from tinyarcade.timer import SectionTimer

timer = SectionTimer(["update", "draw"])
timer.switch("update")
timer.time_call("draw", print, "frame")
print(timer.report(show_all=False))
```

`switch(name)` charges the time since the last mark to the current section and starts timing `name`; `time_call` charges the run time of one call to `name` and returns the call's result. Time outside any named section goes to `uncounted`. Unknown section names raise `KeyError`. The clock and its ticks per second can be passed in; the default is `time.perf_counter_ns`.

## What is not included

The games have no sound or music; there is no audio module in this package. They draw with plain shapes and colours rather than sprite images, and Maker has no way to edit or save levels: the level is generated at random each time.