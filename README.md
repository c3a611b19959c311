# turtix

A small side-scrolling platformer. You play a turtle who has to free the
baby turtles trapped in bubbles, lead them home through the gate, and reach
the gate yourself. Along the way you can collect gems and stars, while
thorns and enemies cost you a life each time they catch you.

## Installing

```
pip install .
```

This pulls in `pygame`, which draws the game and reads the keyboard.

## Playing

The game reads its pictures, fonts and level from a game directory that
holds `pictures/`, `font/`, `assets/backgrounds/`, `assets/fonts/` and the
level file `map/map1.csv`. Run it from that directory:

```
turtix
```

or point it elsewhere:

```
turtix --root path/to/game --map map/map1.csv
```

`--root` is the game directory (default: the current directory) and `--map`
is the level file, relative to that directory. A missing picture stops the
game with `FileNotFoundError`; a missing font falls back to pygame's
default font.

### Menus

- **Up / Down** move through the menu, **Enter** picks an entry.
- **Space** on the main menu starts a game straight away.
- **Escape** goes back to the main menu from the about, exit, map-choice
  and result screens.
- On the win or lose screen, **Enter** closes the screen and a new round
  begins from the main menu.
- Choosing **EXIT** on the main menu is the only way to quit the program;
  closing the window or pressing Escape during play ends the round and
  starts a new one.

### In the game

- **Left / Right** walk, **Up** jumps.
- Landing on a bubble frees the baby turtle inside; free turtles walk on
  their own and are saved when they reach the gate.
- Jump on orange enemies to defeat them. Blue enemies switch their shield
  on and off every three seconds and can only be hurt while it is down.
- Touching thorns or running into an enemy sends you back to the start and
  costs a life. You begin with five.
- **P** pauses; **R** resumes.

You win when every baby turtle is home and you stand at the gate, and lose
when your lives run out. The result screen shows how many gems and stars
you collected.

## Level files

A level is a comma-separated file. A line whose first field is an object
kind — `blocks`, `thorns`, `turtles`, `gates`, `weak_enemies`,
`strong_enemies`, `gems` or `stars` — starts a section; each following line
is `x,y,value`. The value is an image name (under `pictures/`, without
`.png`) for blocks, thorns and gates, and an extra speed for enemies; turtles,
gems and stars need only `x,y`. Lines before the first section are ignored.

`turtix.mapfile.load_map(path)` reads such a file into a list of `MapEntry`
records (`kind`, `x`, `y`, `value`, `speed_bonus`), and `parse_map(lines)`
does the same for lines already in memory. A `turtix.world.World` built with
a function that gives the size of a picture takes these entries through
`World.load` and runs the game rules without any window.

## What it does not do

The map-choice screen lists three maps, but whichever is picked, the game
plays the single level given by `--map`. The about and exit screens show
only their background pictures.

## Tests

```
pip install .[test]
pytest
```