# clickergame

A small clicker game. Click the big square to earn points. Spend them in the
store on upgrades that raise how many points each click is worth. The store
shows up to three items picked at random, and it picks again after every
purchase. An item you cannot yet afford is drawn with its `_disabled`
texture. Each purchase makes that item more expensive.

## Installing

```
pip install .
```

Pygame is the only runtime dependency.

## Playing

```
clickergame
```

This opens a 640×480 window titled "CLICKER ALPHA". By default the game loads
textures from `assets/textures/` and fonts from `assets/`, both relative to
the working directory. Other directories can be given:

```
clickergame --textures path/to/textures --fonts path/to/fonts
```

- Textures are image files with `.png`, `.jpg`, `.jpeg` or `.bmp` extensions.
  Each file is known by its name without the extension. For example,
  `example_texture.png` becomes `example_texture`. A file that fails to load
  is logged and skipped.
- Fonts are `.ttf` or `.otf` files, loaded at size 24. Each font is known by
  its file name followed by the size, so `BitPap.ttf` becomes `BitPap24`.

Both directories must exist. The game cannot start without the font
`BitPap24`, because it uses that font for the on-screen counters. A missing
texture only leaves its object undrawn, and the error is logged.

The textures the game uses are `example_texture` for the click target,
`store` for the store panel, and `upgrade_example` and
`upgrade_example_disabled` for the store items.

Close the window to quit. The exit status is 1 if the display could not be
started.

## Using the pieces

The building blocks can be used on their own:

- `clickergame.player.Player` keeps the points and the per-click multiplier.
- `clickergame.objects.GameObject` and `clickergame.objects.ObjectManager`
  handle on-screen objects, whether they are shown and clickable, and mouse
  hit testing. Unknown or duplicate ids raise `UnknownObjectError` or
  `DuplicateObjectError`.
- `clickergame.text.Text` is an object that renders a line of text with a
  pygame font.
- `clickergame.clickthing.ClickThing` is the clickable point source.
- `clickergame.store.Store` and `clickergame.store.Item` make up the upgrade
  shop. `Store` takes an optional `random.Random` so that the items it offers
  can be reproduced.
- `clickergame.texture_manager.TextureManager` loads and draws images and
  fonts. Loading problems raise `AssetError`.
- `clickergame.config.init_display` opens the game window.
- `clickergame.game.Game` wires everything together. Use `handle_event`,
  `update` and `render` to drive it from your own loop.

```python
from clickergame.objects import ObjectManager
from clickergame.player import Player
from clickergame.clickthing import ClickThing

player = Player()
manager = ObjectManager()
ClickThing(player, manager)

manager.handle_mouse_click(150, 150)
manager.handle_mouse_release(150, 150)
print(player.points)  # 1
```

## What it does not do

The game does not save progress. Every run starts again from zero points.
`Player` has a `points_per_second` field, but nothing uses it, so points are
earned only by clicking.

## Running the tests

```
pip install .[test]
pytest
```