# playdeck

A small collection of games behind a tiled menu, drawn with pygame.

The menu shows a 4×4 grid of tiles, one per game slot. Left-click a tile to
start that game. The screen fades out and the chosen game fades in. Drag a tile
with the right mouse button to move it to another position. The order of the
tiles is saved when the menu closes and is restored the next time it opens.
Pressing Escape on the menu closes the program.

## Games

- **Table games** (slot 02). Pick a game with the left and right arrow keys,
  then press Space on its title screen to start it.
  - **Blackjack**: get closer to 21 than the dealer. Cards are worth 1 to 10.
    Up arrow hits, and a hand holds at most five cards. Enter stands. The
    dealer then draws while at 18 or less, up to five cards. Once the round is
    decided, the Down arrow starts a new one.
  - **Yacht**: two players take turns. Each turn allows up to three rolls of
    five dice. Enter rolls. After a roll, `Z` `X` `C` `V` `B` hold or release
    each die. `Q` `W` `E` `R` `T` `Y` `U` `I` `O` `P` `A` `S` write the roll
    into one of the twelve categories: Aces through Sixes, Choice, Four Dice,
    Full House, Small Straight, Big Straight and Yacht. Choosing a category
    that is already filled shows a warning. Hover the mouse over the score
    rows to see what a category means. After twelve turns each, the higher
    total wins.
  - Escape goes back from a table game to the selection screen. From the
    selection screen it goes back to the menu.
- **Slot 15** shows the time of the last frame. Escape goes back to the menu.
- **The other slots** show their name. Enter goes back to the menu.

## Installing

```
pip install .
```

## Running

```
playdeck
```

The window opens full screen at 1920×1080. Options:

- `--assets DIR`: the directory holding the game assets. The default is
  `assets`.
- `--window`: run in a window instead of full screen.

Inside the assets directory:

- Game titles are read from the first line of `gameNN/title.txt`. A tile whose
  file is missing has no title.
- The menu order is read from and saved to `menu/indices.bin`, one byte per
  tile. When the file is missing, the tiles appear in slot order.
- The table games load card pictures `game02/0.png` to `game02/10.png` and die
  pictures `game02/dice1.png` to `game02/dice6.png`. A missing picture is
  simply not drawn.

## Using it as a library

The pieces work without opening a window:

- `playdeck.yacht.score_dice` scores five dice in every category.
- `playdeck.yacht.YachtGame` holds the state of a two-player game.
- `playdeck.blackjack.decide_outcome` judges a stood hand.
- `playdeck.blackjack.BlackjackGame` plays one round.
- `playdeck.menu.move_index` performs the menu's drag-and-drop reordering.

```python
from playdeck.yacht import score_dice, Category
from playdeck.blackjack import decide_outcome
from playdeck.menu import move_index

scores = score_dice([2, 3, 4, 5, 6])
print(scores[Category.BIG_STRAIGHT])        # 30

print(decide_outcome(dealer=23, player=19))  # Outcome.DEALER_BUST

print(move_index([0, 1, 2, 3], 3, 0))        # [3, 0, 1, 2]
```

Every screen is a `playdeck.scene.Scene`. It receives a `Frame` describing the
input of one tick and records its drawing into a `DrawList`. This lets a scene
be driven and inspected in tests. `playdeck.app.App.step` runs one such tick,
including the fade, and `playdeck.factory.create_scene` builds a scene from a
`GameId`.

## What it does not do

The games play no music or sound effects. Slots other than 02 and 15 hold no
game, only a screen with the slot's name.

## Tests

```
pip install .[test]
pytest
```