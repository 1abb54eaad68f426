# dungeon

A small top-down dungeon action game built on pygame. You move through a
grid of rooms and fight zombies, armoured zombies, sorcerers, skeletons,
ghosts, slimes and fire spirits. You pick up potions and keys along the way,
then open the gate to the boss.

## Installing

```
pip install .
```

## Resource files

The package does not ship the game's assets. It loads them from a `res/`
directory under the directory you start the game from:

- `res/0x72_16x16DungeonTileset.v4.png`: the 16×16 sprite sheet. It is required.
- `res/World1/level<name>.ptlt`: the room layouts (`level1B.ptlt`,
  `level3A.ptlt`, and so on). They are required.
- `res/PressStart2P-vaV7.ttf`: the on-screen font. If it is missing, pygame's
  default font is used.
- `res/sfx.wav`: one WAV file that holds all sound effects. If it is missing,
  the game plays no effects.
- `res/033253562-dungeon.wav`: the looping background music. It starts once
  you reach the room above the starting room. If it is missing, the game has
  no music.

When no audio device is available, the game keeps running without sound.

### Room files

Each `.ptlt` file has six lines of comma-separated integers. A trailing comma
is allowed.

1. The grid width and height in tiles.
2. Background tile ids, where `-1` means no tile.
3. Background tile rotations, in quarter turns.
4. Foreground tile ids, where `-1` means no tile.
5. Foreground tile rotations, in quarter turns.
6. Solid flags, where `1` marks a wall.

A tile id indexes the sprite sheet row by row. `dungeon.level.parse_ptlt`
reads this format into a `LevelLayout`. It raises `ValueError` in these cases:

- the file has more than six lines;
- the size line is missing or its values are not positive;
- a value is not a number;
- a tile line is shorter than width × height.

## Playing

Start in fullscreen at 1920×1080:

```
dungeon
```

Start in a 1280×720 borderless window by giving an argument that begins
with `w`:

```
dungeon w
```

The same entry point is available as `dungeon.game.main(argv=None)`.

### Controls

- **W, A, S, D**: move. Diagonal movement is slower.
- **Mouse**: the sword circles the player towards the cursor.
- **Left click**: swing the sword, once the previous swing's cooldown is over.
- **Escape**: pause or resume.
- **Enter**: restart after a game over.
- **R**: restart from the win screen.

A help screen is shown at start. Any key or mouse click closes it. The mouse
wheel does not.

### The world

The run starts in room 3A. Its layout is:

```
F     b
E     |
D k-+-+
C +-+ +-+-k
B +-+-+-+
A   k s
  1 2 3 4 5
```

In the map, `s` is the start, `k` a key and `b` the boss. Walking off an edge
of a room takes you to the neighbouring room, and you come in on the opposite
side.

Enemies you defeat stay defeated when you come back to a room. Keys you pick
up stay taken. Enemies other than the spawned small slimes and flames
sometimes drop a healing potion. You pick a potion up only when you are below
full health.

The gate room (3E) shows your keys against the three it needs. Bring all
three keys to the gate and the door opens onto the boss room. Defeating the
boss shows the time your run took.

## What it does not do

There is a single world with a fixed set of rooms. There is no level editor,
no saving or loading of a run, no settings screen and no way to remap keys.

## Running the tests

```
pip install ".[test]"
pytest
```