# -*- coding: utf-8 -*-
import pytest

from duallang.config.defaults import Locale
from duallang.host.hook import LookupHook
from duallang.io.pair_log import PairLog
from duallang.pipeline.controller import InterceptionController, intercept


@pytest.fixture
def controller(store, settings):
    controller = InterceptionController(store, settings=settings)
    controller.arm()
    return controller


@pytest.fixture
def hooked(store, controller):
    hook = LookupHook(store, controller.postfix)
    hook.install()
    yield store
    hook.uninstall()


def _count_guarded_lookups(controller, monkeypatch):
    calls = []
    original = controller.guard.with_secondary_locale

    def counting(lookup):
        calls.append(1)
        return original(lookup)

    monkeypatch.setattr(controller.guard, "with_secondary_locale", counting)
    return calls


def test_merges_eligible_lookup(hooked):
    assert hooked.get("PINSTRESS_01", "Dialogue") == "You carry yourself well.<br>Ты хорошо держишься."
    assert hooked.current_locale() == Locale.EN


def test_merges_paginated_dialogue(hooked):
    assert hooked.get("SHERMA_MEET", "Dialogue") == (
        "Oh! A traveller.<br>О! Путник.<page>"
        "These roads are dangerous.<br>Эти дороги опасны.<page>"
        "Be careful out there."
    )


def test_unarmed_controller_passes_through(store, settings, monkeypatch):
    controller = InterceptionController(store, settings=settings)
    calls = _count_guarded_lookups(controller, monkeypatch)
    assert controller.postfix("PINSTRESS_01", "Dialogue", "You carry yourself well.") == "You carry yourself well."
    assert calls == []


def test_empty_result_passes_through(controller, monkeypatch):
    calls = _count_guarded_lookups(controller, monkeypatch)
    assert controller.postfix("PINSTRESS_01", "Dialogue", "") == ""
    assert controller.postfix("PINSTRESS_01", "Dialogue", None) is None
    assert calls == []


@pytest.mark.parametrize(
    "sheet, key",
    [("MainMenu", "START"), ("Quests", "QUEST_NAME_1"), ("", "X"), (None, "X")],
)
def test_ineligible_entries_untouched(controller, monkeypatch, sheet, key):
    calls = _count_guarded_lookups(controller, monkeypatch)
    assert controller.postfix(key, sheet, "Start Game") == "Start Game"
    assert calls == []
    assert controller.merge_count == 0


def test_description_keys_merged_in_description_only_sheet(hooked):
    assert hooked.get("QUEST_DESC_1", "Quests") == "Gather three rosaries.<br>Соберите три чётки."


def test_missing_secondary_leaves_primary(hooked, controller):
    assert hooked.get("EN_ONLY", "Dialogue") == "Only in English."
    assert controller.merge_count == 0


def test_already_in_secondary_locale_not_merged(hooked, controller):
    hooked.switch_locale(Locale.RU)
    assert hooked.get("PINSTRESS_01", "Dialogue") == "Ты хорошо держишься."
    assert controller.merge_count == 0


def test_sentinel_text_never_merged(store, controller):
    store.get = lambda key, sheet: controller.guard.not_found
    assert controller.postfix("K", "Dialogue", "Hello") == "Hello"


def test_nested_lookup_during_switch_is_passthrough(hooked, controller, monkeypatch):
    calls = _count_guarded_lookups(controller, monkeypatch)
    nested = []
    hooked.on_switch.append(lambda locale: nested.append(hooked.get("PINSTRESS_01", "Dialogue")))

    merged = hooked.get("PINSTRESS_01", "Dialogue")

    assert merged == "You carry yourself well.<br>Ты хорошо держишься."
    assert calls == [1]
    # One nested lookup per switch (to RU and back to EN), both unmerged
    assert nested == ["Ты хорошо держишься.", "You carry yourself well."]
    assert not controller.flag.is_set


def test_unexpected_error_returns_primary(store, settings):
    class BrokenMerger:
        def merge(self, primary, secondary):
            raise RuntimeError("bad merge")

    controller = InterceptionController(store, settings=settings, merger=BrokenMerger())
    controller.arm()
    assert controller.postfix("PINSTRESS_01", "Dialogue", "You carry yourself well.") == "You carry yourself well."
    assert store.current_locale() == Locale.EN


def test_successful_merge_is_logged_and_captured(store, settings, tmp_path, qapp):
    from duallang.pipeline.capture import CaptureStatus

    log = PairLog(str(tmp_path / "pairs.txt"), secondary=Locale.RU)
    capture = CaptureStatus()
    received = []
    capture.pair_captured.connect(lambda en, other: received.append((en, other)))
    controller = InterceptionController(store, settings=settings, capture=capture, pair_log=log)
    controller.arm()

    controller.postfix("PINSTRESS_01", "Dialogue", "You carry yourself well.")

    records = log.read_records()
    assert len(records) == 1
    assert records[0].sheet == "Dialogue"
    assert records[0].key == "PINSTRESS_01"
    assert records[0].primary == "You carry yourself well."
    assert records[0].secondary == "Ты хорошо держишься."
    assert received == [("You carry yourself well.", "Ты хорошо держишься.")]
    assert capture.last.key == "PINSTRESS_01"


def test_nothing_logged_without_merge(store, settings, tmp_path):
    path = tmp_path / "pairs.txt"
    controller = InterceptionController(store, settings=settings, pair_log=PairLog(str(path)))
    controller.arm()
    controller.postfix("EN_ONLY", "Dialogue", "Only in English.")
    assert not path.exists()


def test_disarm_stops_interception(hooked, controller):
    controller.disarm()
    assert hooked.get("PINSTRESS_01", "Dialogue") == "You carry yourself well."


def test_intercept_function(store, settings):
    merged = intercept("PINSTRESS_01", "Dialogue", "You carry yourself well.", store, settings=settings)
    assert merged == "You carry yourself well.<br>Ты хорошо держишься."
    assert intercept("START", "MainMenu", "Start Game", store, settings=settings) == "Start Game"
    assert store.current_locale() == Locale.EN
