"""Game state shared by the input loop and the renderer, and its persistence rules."""

from .aura import CRAFT_COST_XP, Aura
from .creature import Creature
from .cutscene import CutsceneId, Cutscenes
from .inventory import Inventory
from .navigation import Navigator
from .quest import QuestLog, QuestType
from .storage import MIN_BRIGHTNESS, Storage

HAPPY_AFTER_STEPS_MS = 2000
EVOLUTION_XP = 100


class Game:
    """All engines of one watch session, wired together."""

    def __init__(self) -> None:
        self.creature = Creature()
        self.inventory = Inventory()
        self.quests = QuestLog(self.creature)
        self.aura = Aura()
        self.cutscenes = Cutscenes()
        self.navigator = Navigator()
        self.brightness: int | None = None

    def load(self, storage: Storage) -> None:
        """Restore persisted progress; missing entries leave the defaults."""
        creature_state = storage.load_creature()
        if creature_state is not None:
            self.creature.set_state(*creature_state)

        quest_state = storage.load_quest()
        if quest_state is not None:
            self.quests.set_state(*quest_state)

        inventory_state = storage.load_inventory()
        if inventory_state is not None:
            equipped, unlocked = inventory_state
            self.inventory.unlocked = unlocked
            self.inventory.check_unlocks(self.creature.xp)
            self.inventory.set_equipped(equipped)

        settings = storage.load_settings()
        # Never start with a black screen.
        self.brightness = max(settings.brightness, MIN_BRIGHTNESS)

        crafted = storage.load_aura()
        if crafted is not None:
            self.aura.crafted = crafted

        self.cutscenes.lore_bitfield = storage.load_lore()

    def try_craft_aura(self, storage: Storage) -> bool:
        """Spend the crafting cost and craft the aura; False if XP is short."""
        if not self.creature.spend_xp(CRAFT_COST_XP):
            return False
        self.aura.craft()
        storage.save_creature(self.creature.xp, self.creature.momentum)
        storage.save_aura(True)
        return True

    def add_steps(self, step_delta: int, now_ms: int, storage: Storage) -> bool:
        """Credit new steps to the quest and creature.

        Returns True when a quest completion was seen, in which case the
        creature, quest and inventory state are saved.
        """
        if step_delta <= 0:
            return False
        completed = self.quests.just_completed
        self.quests.add_progress(QuestType.STEPS, step_delta)
        if self.quests.just_completed:
            completed = True
        self.creature.add_steps(step_delta)
        self.creature.set_happy_until(now_ms + HAPPY_AFTER_STEPS_MS)
        if completed:
            self.creature.set_happy_until(now_ms + HAPPY_AFTER_STEPS_MS)
            storage.save_creature(self.creature.xp, self.creature.momentum)
            storage.save_quest(self.quests.current, self.quests.progress)
            storage.save_inventory(self.inventory.equipped, self.inventory.unlocked)
        return completed

    def check_evolution(self, storage: Storage) -> bool:
        """Unlock and play the evolution cutscene once the creature has evolved."""
        if self.cutscenes.active:
            return False
        if self.creature.xp < EVOLUTION_XP:
            return False
        if self.cutscenes.is_unlocked(CutsceneId.EVOLUTION):
            return False
        self.cutscenes.unlock(CutsceneId.EVOLUTION)
        storage.save_lore(self.cutscenes.lore_bitfield)
        self.cutscenes.start(CutsceneId.EVOLUTION)
        return True