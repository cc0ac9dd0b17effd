"""Story cutscenes: short slide sequences, and which ones the lore menu offers."""

from enum import IntEnum

LORE_BITS = 32


class CutsceneId(IntEnum):
    EVOLUTION = 0
    AETHERON_INTRO = 1
    PIXEL_MODE = 2


SLIDES: dict[CutsceneId, tuple[str, ...]] = {
    CutsceneId.EVOLUTION: (
        "YOUR LUMARI GROWS...",
        "SOMETHING STIRS.",
        "A NEW LIGHT AWAKENS.",
        "EVOLUTION.",
    ),
    CutsceneId.AETHERON_INTRO: (
        "BEYOND THE LIGHT...",
        "THE AETHERON WAIT.",
        "ANCIENT BOND.",
        "YOU ARE NOT ALONE.",
    ),
    CutsceneId.PIXEL_MODE: (
        "IN THE GRID...",
        "OLD MAGIC AWAKES.",
        "PIXEL HEART.",
        "ANOTHER FACE.",
    ),
}


def _slides(cutscene_id: int) -> tuple[str, ...]:
    try:
        return SLIDES[CutsceneId(cutscene_id)]
    except ValueError:
        return ()


class Cutscenes:
    """Playback state of the current cutscene plus the lore unlock bitfield.

    Bit ``n`` of ``lore_bitfield`` marks cutscene ``n`` as unlocked.
    """

    def __init__(self) -> None:
        self.lore_bitfield = 0
        self.active = False
        self.cutscene_id = CutsceneId.EVOLUTION
        self.slide_index = 0

    def is_unlocked(self, cutscene_id: int) -> bool:
        cutscene_id = int(cutscene_id)
        if not 0 <= cutscene_id < LORE_BITS:
            return False
        return bool(self.lore_bitfield & (1 << cutscene_id))

    def unlock(self, cutscene_id: int) -> None:
        """Mark a cutscene as unlocked; ids outside the bitfield are ignored."""
        cutscene_id = int(cutscene_id)
        if 0 <= cutscene_id < LORE_BITS:
            self.lore_bitfield |= 1 << cutscene_id

    def start(self, cutscene_id: int) -> None:
        """Begin playing from the first slide; unknown ids are ignored."""
        if not _slides(cutscene_id):
            return
        self.active = True
        self.cutscene_id = CutsceneId(cutscene_id)
        self.slide_index = 0

    def advance(self) -> bool:
        """Move to the next slide. Returns False once the cutscene has ended."""
        if not self.active:
            return False
        if self.slide_index + 1 >= len(_slides(self.cutscene_id)):
            self.active = False
            return False
        self.slide_index += 1
        return True

    def current_line(self) -> str:
        """Text of the slide on screen, or an empty string when nothing plays."""
        if not self.active:
            return ""
        slides = _slides(self.cutscene_id)
        if self.slide_index >= len(slides):
            return ""
        return slides[self.slide_index]