import pytest

from lumari.aura import CRAFT_COST_XP
from lumari.creature import Mood
from lumari.cutscene import CutsceneId
from lumari.game import Game
from lumari.quest import QUESTS
from lumari.storage import LORE_DEFAULT_FIRST_RUN, MIN_BRIGHTNESS, Settings, Storage


@pytest.fixture
def storage():
    return Storage(None)


def test_load_empty_storage_keeps_defaults(storage):
    game = Game()
    game.load(storage)
    assert game.creature.xp == 0
    assert game.quests.current == 0
    assert game.aura.crafted is False
    assert game.cutscenes.lore_bitfield == LORE_DEFAULT_FIRST_RUN
    assert game.brightness == 80


def test_load_restores_saved_state(tmp_path):
    path = tmp_path / "state.json"
    saved = Storage(path)
    saved.save_creature(120, 40)
    saved.save_quest(2, 17)
    saved.save_inventory(1, 0)
    saved.save_aura(True)
    saved.save_lore(1)

    game = Game()
    game.load(Storage(path))
    assert (game.creature.xp, game.creature.momentum) == (120, 40)
    assert (game.quests.current, game.quests.progress) == (2, 17)
    assert game.inventory.equipped == 1
    # Unlocks re-derived from the loaded XP.
    assert game.inventory.is_unlocked(1)
    assert game.inventory.is_unlocked(2)
    assert not game.inventory.is_unlocked(3)
    assert game.aura.crafted is True
    assert game.cutscenes.lore_bitfield == 1


def test_load_brightness_never_below_minimum(storage):
    storage.save_settings(Settings(brightness=5))
    game = Game()
    game.load(storage)
    assert game.brightness == MIN_BRIGHTNESS


def test_craft_fails_without_enough_xp(storage):
    game = Game()
    game.creature.set_state(CRAFT_COST_XP - 1, 0)
    assert game.try_craft_aura(storage) is False
    assert game.aura.crafted is False
    assert game.creature.xp == CRAFT_COST_XP - 1
    assert storage.load_aura() is None


def test_craft_spends_xp_and_saves(storage):
    game = Game()
    game.creature.set_state(CRAFT_COST_XP + 50, 7)
    assert game.try_craft_aura(storage) is True
    assert game.aura.crafted is True
    assert game.creature.xp == 50
    assert storage.load_aura() is True
    assert storage.load_creature() == (50, 7)


def test_zero_steps_do_nothing(storage):
    game = Game()
    assert game.add_steps(0, 1000, storage) is False
    assert game.creature.momentum == 0
    assert game.creature.mood is Mood.IDLE


def test_partial_steps_make_happy_without_saving(storage):
    game = Game()
    assert game.add_steps(3, 1000, storage) is False
    assert game.quests.progress == 3
    assert game.creature.momentum == 6
    assert game.creature.mood is Mood.HAPPY
    assert game.creature.happy_until_ms == 3000
    assert storage.load_quest() is None


def test_completing_quest_rewards_and_saves(storage):
    game = Game()
    first = QUESTS[0]
    assert game.add_steps(first.goal, 500, storage) is True
    assert game.creature.xp == first.reward_xp
    assert storage.load_quest() == (1, 0)
    assert storage.load_creature() == (game.creature.xp, game.creature.momentum)
    assert storage.load_inventory() == (game.inventory.equipped, game.inventory.unlocked)


def test_evolution_triggers_once(storage):
    game = Game()
    game.creature.set_state(100, 0)
    assert game.check_evolution(storage) is True
    assert game.cutscenes.active is True
    assert game.cutscenes.cutscene_id is CutsceneId.EVOLUTION
    assert game.cutscenes.is_unlocked(CutsceneId.EVOLUTION)
    assert storage.load_lore() == game.cutscenes.lore_bitfield
    game.cutscenes.active = False
    assert game.check_evolution(storage) is False


def test_evolution_not_before_threshold(storage):
    game = Game()
    game.creature.set_state(99, 0)
    assert game.check_evolution(storage) is False
    assert game.cutscenes.active is False
    assert not game.cutscenes.is_unlocked(CutsceneId.EVOLUTION)


def test_evolution_waits_for_running_cutscene(storage):
    game = Game()
    game.creature.set_state(150, 0)
    game.cutscenes.start(CutsceneId.PIXEL_MODE)
    assert game.check_evolution(storage) is False
    assert game.cutscenes.cutscene_id is CutsceneId.PIXEL_MODE