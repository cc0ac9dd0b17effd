"""Step quests that reward the creature with XP."""

from dataclasses import dataclass
from enum import Enum


class QuestType(Enum):
    STEPS = 0


@dataclass(frozen=True)
class Quest:
    type: QuestType
    goal: int
    reward_xp: int


QUESTS = (
    Quest(QuestType.STEPS, 50, 10),
    Quest(QuestType.STEPS, 100, 25),
    Quest(QuestType.STEPS, 200, 50),
)


class QuestLog:
    """The current quest and the progress made toward it."""

    def __init__(self, creature) -> None:
        self.creature = creature
        self.current = 0
        self.progress = 0
        self.just_completed = False

    def set_state(self, quest_index: int, progress: int) -> None:
        """Restore saved state; an unknown index restarts at the first quest."""
        if not 0 <= quest_index < len(QUESTS):
            quest_index = 0
        self.current = quest_index
        self.progress = progress
        self.just_completed = False

    def add_progress(self, quest_type: QuestType, amount: int) -> None:
        """Add progress; on reaching the goal reward XP and move to the next quest."""
        self.just_completed = False
        if self.current >= len(QUESTS):
            return
        quest = QUESTS[self.current]
        if quest.type is not quest_type:
            return
        self.progress += amount
        if self.progress >= quest.goal:
            self.creature.add_xp(quest.reward_xp)
            self.just_completed = True
            self.progress = 0
            self.current = (self.current + 1) % len(QUESTS)

    @property
    def current_id(self) -> int:
        """1-based quest number for display."""
        return self.current + 1

    @property
    def goal(self) -> int:
        if self.current >= len(QUESTS):
            return 0
        return QUESTS[self.current].goal