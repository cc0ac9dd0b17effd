import pytest

from lumari.storage import (
    DEFAULT_BRIGHTNESS,
    LORE_DEFAULT_FIRST_RUN,
    MIN_BRIGHTNESS,
    Settings,
    Storage,
)


@pytest.fixture
def path(tmp_path):
    return tmp_path / "state" / "lumari.json"


def test_empty_store_has_nothing(path):
    st = Storage(path)
    assert st.load_creature() is None
    assert st.load_quest() is None
    assert st.load_inventory() is None
    assert st.load_aura() is None


def test_round_trip_across_instances(path):
    st = Storage(path)
    st.save_creature(150, 42)
    st.save_quest(2, 37)
    st.save_inventory(3, 0b101)
    st.save_aura(True)
    st.save_lore(0b111)
    again = Storage(path)
    assert again.load_creature() == (150, 42)
    assert again.load_quest() == (2, 37)
    assert again.load_inventory() == (3, 0b101)
    assert again.load_aura() is True
    assert again.load_lore() == 0b111


def test_aura_false_round_trip(path):
    Storage(path).save_aura(False)
    assert Storage(path).load_aura() is False


def test_lore_defaults_on_first_run():
    st = Storage()
    assert st.load_lore() == LORE_DEFAULT_FIRST_RUN
    assert LORE_DEFAULT_FIRST_RUN & 1 == 0


def test_settings_defaults():
    assert Storage().load_settings() == Settings(DEFAULT_BRIGHTNESS, False, False, False)


def test_settings_round_trip(path):
    Storage(path).save_settings(Settings(brightness=75, time_24h=True, wifi_on=False, bt_on=True))
    assert Storage(path).load_settings() == Settings(75, True, False, True)


def test_low_brightness_is_raised_to_minimum():
    st = Storage()
    st.save_settings(Settings(brightness=10))
    assert st.load_settings().brightness == MIN_BRIGHTNESS


def test_corrupt_file_is_treated_as_empty(path):
    path.parent.mkdir(parents=True)
    path.write_text("{not json", encoding="utf-8")
    st = Storage(path)
    assert st.load_creature() is None
    st.save_creature(5, 6)
    assert Storage(path).load_creature() == (5, 6)


def test_out_of_range_values_rejected():
    st = Storage()
    with pytest.raises(ValueError):
        st.save_creature(-1, 0)
    with pytest.raises(ValueError):
        st.save_inventory(256, 0)
    with pytest.raises(ValueError):
        st.save_lore(1 << 32)


def test_in_memory_store_keeps_values():
    st = Storage(None)
    st.save_quest(1, 9)
    assert st.load_quest() == (1, 9)