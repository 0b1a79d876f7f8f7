# invaders

A small arcade shooter drawn in pixel art. A formation of aliens marches back
and forth across the screen and creeps downwards. Clear the first wave and a
faster, zig-zagging second wave arrives. Clear that and the alien boss appears,
with a health bar at the top of the screen. Destroy the boss to win.

## Installing

```
pip install .
```

## Playing

```
invaders
```

This opens an 800×800 window running at about 30 frames per second. To get the
same star field and the same enemy fire on every run, give a random seed:

```
invaders --seed 42
```

Controls:

- `A` / `D`: move the ship left and right
- `Space`: fire while held, at most one shot every 300 ms
- `Space` on the game-over or victory screen: start again from level one

You have three lives, shown in the top-left corner. Being hit by an alien shot
costs a life, sends the ship back to the centre and spins it for 30 frames.
During the spin it cannot move or fire, and further hits cost no life. The game
is lost when your lives run out or when an alien gets to the bottom of the
screen.

## Using the game logic

The rules in `invaders.game` do not depend on any drawing, so they can be
driven directly. A `random.Random` can be passed in to make a game repeatable:

```python
import random

from invaders.game import Game, GameState

game = Game(random.Random(1))
game.move_ship_left()
game.ship_shoot()
game.update()

if game.state is GameState.PLAYING:
    print(game.lives, len(game.aliens), game.level)
```

`Game.boss_health()` gives the boss's remaining life as a fraction of its
maximum, or `None` while there is no living boss.

`invaders.render.Renderer` draws a `Game` onto a pygame surface, and
`invaders.app.Controller` turns key presses and clock ticks into game actions.
These are the same pieces the `invaders` command uses.

## Running the tests

```
pip install .[test]
pytest
```