import pytest

from solz.states import AppSystems, Menu, Screen, StateMachine


def test_initial_state_is_current():
    machine = StateMachine(Screen.SPLASH)
    assert machine.current() is Screen.SPLASH


def test_set_is_deferred_until_apply():
    machine = StateMachine(Menu.NONE)
    machine.set(Menu.MAIN)
    assert machine.current() is Menu.NONE
    assert machine.apply() == (Menu.NONE, Menu.MAIN)
    assert machine.current() is Menu.MAIN


def test_apply_without_pending_returns_none():
    machine = StateMachine(Screen.TITLE)
    assert machine.apply() is None
    assert machine.current() is Screen.TITLE


def test_last_set_wins():
    machine = StateMachine(Menu.NONE)
    machine.set(Menu.CREDITS)
    machine.set(Menu.SETTINGS)
    assert machine.apply() == (Menu.NONE, Menu.SETTINGS)
    assert machine.apply() is None


def test_setting_same_state_still_transitions():
    machine = StateMachine(Screen.GAMEPLAY)
    machine.set(Screen.GAMEPLAY)
    assert machine.apply() == (Screen.GAMEPLAY, Screen.GAMEPLAY)


def test_boolean_state_machine():
    pause = StateMachine(False)
    pause.set(True)
    assert pause.apply() == (False, True)
    assert pause.current() is True


@pytest.mark.parametrize(
    "earlier,later",
    [
        (AppSystems.TICK_TIMERS, AppSystems.RECORD_INPUT),
        (AppSystems.RECORD_INPUT, AppSystems.UPDATE),
    ],
)
def test_app_systems_are_ordered(earlier, later):
    assert earlier < later


def test_machine_walks_through_every_screen():
    machine = StateMachine(Screen.SPLASH)
    visited = [machine.current().name]
    for screen in list(Screen)[1:]:
        machine.set(screen)
        machine.apply()
        visited.append(machine.current().name)
    assert visited == ["SPLASH", "TITLE", "LOADING", "GAMEPLAY"]


def test_machine_walks_through_every_menu():
    machine = StateMachine(Menu.NONE)
    visited = [machine.current().name]
    for menu in list(Menu)[1:]:
        machine.set(menu)
        machine.apply()
        visited.append(machine.current().name)
    assert visited == ["NONE", "MAIN", "CREDITS", "SETTINGS", "PAUSE"]