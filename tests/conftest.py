# -*- coding: utf-8 -*-
import pytest

from duallang.config.defaults import HookDefaults, Locale
from duallang.host.store import InMemoryLocalizationStore


def _tables():
    return {
        Locale.EN: {
            "Dialogue": {
                "SHERMA_MEET": "Oh! A traveller.<page>These roads are dangerous.<hpage>Be careful out there.",
                "PINSTRESS_01": "You carry yourself well.",
                "EN_ONLY": "Only in English.",
            },
            "Quests": {
                "QUEST_DESC_1": "Gather three rosaries.",
                "QUEST_NAME_1": "Shrine Offering",
            },
            "MainMenu": {"START": "Start Game"},
        },
        Locale.RU: {
            "Dialogue": {
                "SHERMA_MEET": "О! Путник.<page>Эти дороги опасны.",
                "PINSTRESS_01": "Ты хорошо держишься.",
            },
            "Quests": {
                "QUEST_DESC_1": "Соберите три чётки.",
                "QUEST_NAME_1": "Подношение святилищу",
            },
            "MainMenu": {"START": "Начать игру"},
        },
    }


@pytest.fixture
def store():
    return InMemoryLocalizationStore(_tables(), active=Locale.EN)


@pytest.fixture
def settings():
    return HookDefaults(
        secondary_locale=Locale.RU,
        excluded_sheets=("MainMenu",),
        description_only_sheets=("Quests",),
        enable_pair_log=False,
    )


@pytest.fixture(scope="session")
def qapp():
    from PySide6 import QtCore

    app = QtCore.QCoreApplication.instance()
    if app is None:
        app = QtCore.QCoreApplication([])
    return app
