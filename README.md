# doublejumper

An arcade game about a small creature that jumps ever higher from platform
to platform. Keep climbing, and watch out for platforms that give way and for
black holes.

## Features

- Green platforms that stay put and blue platforms that slide from side to side.
- Brown platforms that crumble and fall away when you land on them.
- Black holes that swallow the jumper and end the run.
- Power-ups: springs for an extra-high bounce, helicopter hats for a steady
  climb and jetpacks for a fast climb, each lasting 300 ticks.
- Platforms grow sparser and harder to reach the higher you go.
- Four themes: default, Halloween, underwater and space.
- A high-score table kept in a JSON file. While you play, markers at the
  right edge of the field show the heights at which earlier records were set.
- An options screen to turn sound and score markers on or off, pick a theme
  and reset the high scores.

## Installation

```
pip install .
```

The game is drawn with `pygame`, which is installed along with the package.

## Playing

```
doublejumper
doublejumper --records path/to/records.json
```

`--records` names the JSON file that keeps the high scores; it defaults to
`records.json` in the current directory.

In the main menu, click the buttons to play, open the options, view the high
scores or quit (the small button in the top right corner).

| Screen | Input | Action |
| --- | --- | --- |
| Game | Left arrow | Move left and face left |
| Game | Right arrow | Move right and face right |
| Lose dialog | Typing, Backspace | Enter your name |
| Lose dialog | Click the left / right button | Save the score / go back without saving |
| Options | Click | Toggle sound and markers, change theme, reset, "Menu" to go back |
| High scores | Mouse wheel | Scroll the table |
| High scores | Escape | Back to the menu |

A jumper that leaves one side of the screen comes back in on the other.
The score is a third of the height climbed. A run ends when the jumper falls
below the screen or touches a black hole; the score is then saved with the
player's name and the date and time as `MM.DD.YYYY HH:MM`. The table keeps at
most one record per score: a new record with a score already in the table is
not stored.

## Game assets

Images, sounds and the menu UFO's flight path are read from paths relative to
the current directory:

- sprites from `requirments/Sprites/Doodle Jump/`,
- sound effects from `requirments/Doodle Jump SFX/`,
- the UFO path from `requirments/ufoPoint.json`, a JSON array of `[x, y]` pairs.

No art, sounds or UFO path come with the package. Where an image is missing,
the game draws a plain coloured rectangle in its place; missing sounds are
skipped, and without a UFO path no UFO is shown.

## Using the pieces from Python

The game logic does not depend on drawing, so you can drive it yourself:

```python
import random

from doublejumper.game import Game

game = Game(sounds=None, rng=random.Random(1))
game.initialize()
for _ in range(100):
    game.update(8, False, True)
print(game.score, game.ended)
```

`doublejumper.view.GameView` runs a `Game` tick by tick and renders it onto a
`pygame.Surface`.

High scores are handled by `doublejumper.records.RecordDatabase`:

```python
from doublejumper.records import Record, RecordDatabase

database = RecordDatabase("records.json")
database.insert(Record("alice", "05.03.2025 12:00", 420))
for record in reversed(database):
    print(record.player_name, record.score)
```

`insert` returns `False` and stores nothing when a record with the same score
is already there; `reset` empties the file.

## Limitations

- Settings chosen on the options screen (sound, score markers, theme) last
  only until the game is closed; they are not saved.
- Text is drawn with pygame's built-in font.

## Running the tests

```
pip install .[test]
pytest
```