# lumari

Lumari is a small creature that lives on a wristwatch. It grows as you walk:
steps fill its momentum meter and complete quests, quests award XP, XP
unlocks accessories and evolves the creature, and saved-up XP can be spent
to craft a glowing aura. Story cutscenes unlock along the way.

This package holds the game state engines, a JSON-file persistence layer,
the interpretation of sensor data (step and shake detection, real-time-clock
and power-management register decoding) and a software renderer that draws
the game's screens into an RGB565 framebuffer. It uses only the standard
library.

## What is in it

| Module | Purpose |
| --- | --- |
| `lumari.config` | Screen size, UI scale, font metrics and layout constants |
| `lumari.framebuffer` | `Framebuffer`: a width × height grid of 16-bit RGB565 pixels |
| `lumari.draw` | Clipped drawing primitives: rectangles, panels, outlines, circles, rings, triangles, sprites, the 5×7 bitmap font, numbers, time, dates, buttons and the bottom navigation bar |
| `lumari.creature` | `Creature` and `Mood`: XP (capped at 9999), momentum (0–100), mood and the evolved stage at 100 XP |
| `lumari.quest` | `QuestLog`, `Quest` and `QuestType`: a cycle of three step quests (50, 100, 200 steps) that award XP |
| `lumari.inventory` | `Inventory`, `Accessory` and `AccessoryType`: four accessories unlocked by XP, equipping and cycling |
| `lumari.aura` | `Aura`: crafted once for 200 XP, drawn as a pulsing ring |
| `lumari.cutscene` | `Cutscenes` and `CutsceneId`: lore unlock bitfield and tap-to-advance slide playback |
| `lumari.storage` | `Storage` and `Settings`: persistence of creature, quest, inventory, aura, lore and display settings |
| `lumari.rtc` | `DateTime`, `OscillatorStoppedError`, BCD helpers and clock register encoding/decoding |
| `lumari.imu` | `MotionTracker`: step counting and shake detection from accelerometer samples |
| `lumari.pmic` | `ChargeState` and battery voltage, percentage, charge state, USB power and LDO mask helpers |
| `lumari.navigation` | `Navigator`, `Screen` and `SettingsPage`: which screen and settings page is showing |
| `lumari.game` | `Game`: the engines wired together, with loading, crafting, step crediting and evolution |
| `lumari.layers` | `render_layers`, `handle_menu_touch` and `LayerAction`: cutscene overlay, long-press menu and lore menu |
| `lumari.screens` | `render_home`, `render_quests`, `render_inventory`, `render_crafting`, `render_lore` |

## A short tour

```python
from lumari.creature import Creature
from lumari.quest import QuestLog, QuestType

creature = Creature()
quests = QuestLog(creature)

creature.add_steps(30)                     # momentum: 2 points per step, up to 100
quests.add_progress(QuestType.STEPS, 50)   # completes the first quest, +10 XP

print(creature.xp, creature.momentum, quests.current_id, quests.goal)
```

Crafting the aura spends XP from the creature:

```python
from lumari.aura import Aura

aura = Aura()
creature.add_xp(250)
if aura.can_craft(creature.xp) and creature.spend_xp(200):
    aura.craft()
```

Accessories unlock as XP grows and can be cycled, with 0 meaning none:

```python
from lumari.inventory import Inventory

inventory = Inventory()
inventory.check_unlocks(creature.xp)
inventory.equip(inventory.next_unlocked(0))
```

Cutscenes play slide by slide:

```python
from lumari.cutscene import Cutscenes, CutsceneId

cutscenes = Cutscenes()
cutscenes.start(CutsceneId.EVOLUTION)
print(cutscenes.current_line())
while cutscenes.advance():
    print(cutscenes.current_line())
```

## Drawing

Everything renders into a `Framebuffer`; `to_bytes()` gives the raw RGB565
pixels, two little-endian bytes each, to hand to a display or write to an
image. Drawing outside the buffer is clipped.

```python
from lumari import config, draw
from lumari.framebuffer import Framebuffer

fb = Framebuffer(config.SCREEN_WIDTH, config.SCREEN_HEIGHT)
fb.clear(0x0000)
draw.fill_circle(fb, config.SCREEN_WIDTH // 2, config.SCREEN_HEIGHT // 2, 60, 0x07E0)
draw.draw_string(fb, 10, 10, "HELLO", 0xFFFF)
creature.render(fb, 0, inventory)
pixels = fb.to_bytes()
```

The bottom bar has two buttons; `draw.bottom_nav_hit_test(x, y)` tells you
which was touched (0 for the left, 1 for the right, -1 for neither).

A whole frame is composed with `render_layers`. It draws a playing cutscene
over everything; otherwise it calls the `base_screen` you pass (any callable
taking `fb` and `time_ms`) and lays the menu over it when it is open.

```python
from functools import partial

from lumari.game import Game
from lumari.layers import render_layers, handle_menu_touch
from lumari.screens import render_home

game = Game()
render_layers(fb, game, menu_open=False, time_ms=0, lore_menu_open=False,
              base_screen=partial(render_home, game=game, now=None, battery_percent=None))

action = handle_menu_touch(game, 300, 400, config.SCREEN_WIDTH, config.SCREEN_HEIGHT, False)
```

`render_home` takes the time of day (anything with `hour` and `minute`, such
as `lumari.rtc.DateTime`) and the battery percentage from the caller; either
is left off the status bar when it is `None`.

## Saving progress

`Storage` keeps the game state as JSON in a file, or in memory when given no
path. A `Game` loads from it and writes back as quests complete, the aura is
crafted or lore unlocks:

```python
from lumari.game import Game
from lumari.storage import Storage

storage = Storage("lumari-save.json")
game = Game()
game.load(storage)
game.add_steps(12, now_ms=1_000, storage=storage)
game.check_evolution(storage)
```

On a first run the Aetheron and pixel-mode cutscenes are already unlocked.
Brightness loaded from storage never comes back below 30 %, so the screen is
never started black.

## Sensor helpers

```python
from lumari.imu import MotionTracker
from lumari.rtc import DateTime, encode_registers, decode_registers
from lumari import pmic

tracker = MotionTracker()
tracker.update(0.0, 0.0, 13.0)      # m/s^2
tracker.step_delta(now_ms=1_000)
tracker.update(0.0, 0.0, 9.5)
print(tracker.step_delta(now_ms=1_300))   # 1

regs = encode_registers(DateTime(2025, 6, 1, 12, 30, 0))
print(decode_registers(regs))

print(pmic.charge_state_from_status(0x00, 0x40), pmic.battery_mv_from_raw(3600))
```

## What it does not do

- It has no command and no main loop: nothing polls buttons, touch or the
  accelerometer, and nothing decides when to open the menu or put the screen
  to sleep. The caller feeds `MotionTracker`, calls `Game.add_steps` and
  `handle_menu_touch`, and renders frames.
- It talks to no hardware. `lumari.rtc` and `lumari.pmic` only encode and
  decode register values; reading and writing them is up to the caller, and
  pixels from `Framebuffer.to_bytes()` must be sent to a display by the caller.
- It has no renderer or touch handling for the system settings screen
  (time and date, display, Wi-Fi, Bluetooth). `Navigator` tracks the
  settings page and `Storage` saves `Settings`, but no screen edits them.

## Running the tests

```
pip install -e ".[test]"
pytest
```