# tankbot

A small top-down tank game. You drive one tank with the keyboard. A bot
drives a second tank and picks a random move every fifth of a second. Each
game has a randomly generated battlefield of grass and sand, with roads
running across it. Tanks leave tracks behind them, and the tracks fade over
time.

## Installing

```
pip install .
```

The game draws with pygame.

## Assets

The package does not ship any image or font files. It reads textures from
`tankbot/res/PNG/Default size/`, inside the package directory (see
`tankbot.textures.default_size_path()`). It needs the tank, tile, shot,
track and bullet images named in `tankbot.tank_factory`, `tankbot.board`
and `tankbot.texture_names`. If an image is missing, `TextureStore.get_texture`
raises `FileNotFoundError`.

The speed display uses `tankbot/res/DejaVuSans.ttf` when that file exists.
Otherwise it uses pygame's default font.

## Playing

```
tankbot
```

| Key            | Action                   |
|----------------|--------------------------|
| `W`            | drive forward            |
| `S`            | reverse                  |
| `A` / `D`      | turn the hull            |
| `Left`/`Right` | turn the turret          |
| `Space`        | fire (500 ms cooldown)   |
| `Escape`       | quit                     |

When you let go of `W` or `S`, the tank shifts into neutral and coasts to a
stop. If you shift against the direction you are moving, the tank brakes
before it starts to move the other way. The top-left corner of the window
shows your tank's speed. Missiles disappear once they leave the board. The
game runs at 30 frames per second.

## Using the pieces

You can use the game's building blocks on their own. For example, the
engine model:

```python
from tankbot.engine import Gear, SquareRootEngine, SquareRootEngineConfig

engine = SquareRootEngine(SquareRootEngineConfig(step_count=5, max_speed=3.0))
engine.set_gear(Gear.DRIVE)
engine.update()
print(engine.current_speed)  # about 1.3416
print(engine.position_delta(0.0))  # movement for one frame, heading up
```

Choosing tile names for a layout:

```python
from tankbot.terrain import GroundType, SurfaceType
from tankbot.texture_names import background_texture_name

grass = GroundType(SurfaceType.GRASS, False)
road = GroundType(SurfaceType.GRASS, True)
grid = [[grass, road, grass]] * 3
print(background_texture_name(grid, 1, 1))  # tileGrass_roadNorth.png
```

Modules:

- `tankbot.geometry`: board size, `Vector2`, `Sprite`, angle helpers such as
  `get_angle` and `get_opposite_angle`, and board bounds checks
- `tankbot.rand`: `random_range` and `one_of`
- `tankbot.fill`: `fill_grid` sets a rectangular block of a grid and raises
  `ValueError` for an inverted range
- `tankbot.terrain`: `generate_surface` and `generate_roads` make random layouts
- `tankbot.texture_names`: `background_texture_name` picks the tile image for a field
- `tankbot.engine`: the `Engine` interface and `SquareRootEngine`
- `tankbot.traces`: `Trace` and `TracesHandler`, the track marks behind a tank
- `tankbot.textures`: `TextureStore`, which loads each image once, and asset paths
- `tankbot.tank` and `tankbot.tank_factory`: `Tank` and `random_tank`
- `tankbot.missile`: `Missile`
- `tankbot.background`: `Background` and `Ground` tiles
- `tankbot.obstacle`: `Obstacle`, a scaled image placed on the board (the
  game loop does not place any)
- `tankbot.controllers`: `DummyController` and `KeyboardController`
- `tankbot.board`: `Board`, the game window and main loop, and `main`

## Running the tests

```
pip install .[test]
pytest
```