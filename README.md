# beanchase

A maze-chasing arcade game built on pygame. Guide the bean-eater through the
maze and clear every bean while keeping away from four ghosts. Grab a power
bean to make the ghosts flee for a while.

## Installing

```
pip install .
```

## Assets

The package contains no images, fonts, sounds or maps. The game reads them
from an assets directory, `Assets` in the current directory by default. The
directory must hold:

- maps: `test.txt`, `AMOGUS.txt`, `map_nthu.txt`
- fonts: `Minecraft.ttf`, `Cubic.ttf`
- images: `title.png`, `settings.png`, `settings2.png`, `checked.png`,
  `unchecked.png`, `pacman_move.png`, `pacman_die.png`, `ghost_flee.png`,
  `ghost_dead.png`, `ghost_move_red.png`, `ghost_move_pink.png`,
  `ghost_move_blue.png`, `ghost_move_orange.png`
- sounds, in a `Music` subdirectory: `original_theme.ogg`, `amogus.ogg`,
  `pacman-chomp.ogg`, `pacman_death.ogg`, `pacman_eatghost.ogg`,
  `SuccessBGM.ogg`

If a font or sound cannot be loaded at start, `beanchase` prints an error and
exits with status 1.

## Playing

```
beanchase [--assets DIR] [--map {0,1,2}] [-v] [--log-file FILE]
```

- `--assets DIR` — the assets directory (default `Assets`).
- `--map N` — the map selected at start: 0 TEST, 1 SUS, 2 NTHU (default 0).
- `-v`, `--verbose` — log to the console.
- `--log-file FILE` — also write the log to this file.

On the menu:

- Click one of the three map boxes (TEST, SUS, NTHU) to choose a map.
- Press **Enter** to start.
- Click the gear in the top-right corner to open the settings.
- Press **Esc** to quit.

In a game:

- **W / A / S / D** move up, left, down and right (rebindable).
- **G** toggles the hitbox overlay.
- **Esc** returns to the menu.

Small beans are worth 10 points, power beans 50. A power bean makes the
ghosts that are roaming free flee for ten seconds; catch one then and it
heads back to its cage while play freezes for a moment. Touching any other
ghost ends the round and returns to the menu after the death animation.
Clear every bean to see the win screen, which returns to the menu by itself.

### The ghosts

- **Blinky** (red) takes the shortest path straight to you.
- **Pinky** (pink) aims up to four squares behind you.
- **Inky** (blue) aims up to four squares ahead of you.
- **Clyde** (orange) wanders at random and does not turn back unless he must.

All four start in the cage and come out after 256 game ticks.

## Settings

The settings screen lets you:

- turn cheat mode on or off (ghosts no longer collide with you at all),
- drag the sliders for background music and effect volume,
- click one of the UP / LEFT / DOWN / RIGHT boxes and press a letter or arrow
  key to rebind that direction; a key already bound to another direction is
  swapped with it.

Press **Esc** to go back to the menu. Settings last only while the game is
running; nothing is saved to disk.

## Maps

A map file starts with a line holding the number of rows and columns,
followed by the rows themselves. Short rows are padded with spaces.

| Character | Meaning                                 |
|-----------|-----------------------------------------|
| `#`       | wall                                    |
| `.`       | bean                                    |
| `P`       | power bean                              |
| `B`       | ghost cage                              |
| `R`       | ghost room (only ghosts may pass)       |
| `$`       | starting square                         |
| space     | empty floor                             |

Maps can also be used from Python:

```python
from beanchase.gamemap import load_map, parse_map, default_map

game_map = parse_map("3 5\n#####\n#$.P#\n#####\n")
game_map.beans_count                              # 2
game_map.shortest_path_direction(1, 1, 3, 1)      # Direction.RIGHT
```

`GameMap` also offers `cell`, `clear_cell`, `is_wall_block`, `is_room_block`
and `wall_segments`; `default_map()` returns an empty 30 by 36 arena with a
ghost cage.

## Running the tests

```
pip install .[test]
pytest
```