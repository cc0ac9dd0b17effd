"""Which screen and settings page the UI shell is showing."""

from enum import IntEnum


class Screen(IntEnum):
    HOME = 0
    QUESTS = 1
    INVENTORY = 2
    CRAFTING = 3
    LORE = 4
    SYSTEM = 5


class SettingsPage(IntEnum):
    MAIN = 0
    TIME_DATE = 1
    DISPLAY = 2
    WIFI = 3
    BLUETOOTH = 4


class Navigator:
    """Current screen, cycling Home -> ... -> System -> Home, and settings page."""

    def __init__(self) -> None:
        self.current_screen = Screen.HOME
        self.settings_page = SettingsPage.MAIN

    def go_home(self) -> None:
        self.current_screen = Screen.HOME

    def next_screen(self) -> None:
        self.current_screen = Screen((self.current_screen + 1) % len(Screen))

    def previous_screen(self) -> None:
        self.current_screen = Screen((self.current_screen - 1) % len(Screen))

    def settings_enter(self, page: int) -> None:
        """Open a settings page; unknown pages are ignored."""
        try:
            self.settings_page = SettingsPage(int(page))
        except ValueError:
            return

    def settings_back(self) -> None:
        self.settings_page = SettingsPage.MAIN

    def in_settings_subpage(self) -> bool:
        return self.settings_page is not SettingsPage.MAIN