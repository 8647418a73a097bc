"""Tests for the keyboard contract."""

from study_map.core.navigation.controller import Idle, NavigationController, ZoomingOut
from study_map.core.navigation.keys import dispatch_key
from tests.unit.fakes import FakeScheduler


def _enter_b(controller: NavigationController, scheduler: FakeScheduler) -> None:
    controller.enter_child(1)
    scheduler.run_all()


def test_back_key_goes_back(controller: NavigationController, scheduler: FakeScheduler) -> None:
    _enter_b(controller, scheduler)
    assert dispatch_key(controller, "b")
    assert isinstance(controller.transition, ZoomingOut)


def test_uppercase_back_key(controller: NavigationController, scheduler: FakeScheduler) -> None:
    _enter_b(controller, scheduler)
    assert dispatch_key(controller, "B")
    assert isinstance(controller.transition, ZoomingOut)


def test_back_key_dismisses_detail_first(
    controller: NavigationController, scheduler: FakeScheduler
) -> None:
    _enter_b(controller, scheduler)
    controller.show_detail(controller.current_node)

    dispatch_key(controller, "b")
    assert controller.detail is None
    assert isinstance(controller.transition, Idle)
    assert controller.path == (1,)


def test_escape_only_dismisses(controller: NavigationController, scheduler: FakeScheduler) -> None:
    _enter_b(controller, scheduler)
    assert dispatch_key(controller, "escape")
    assert isinstance(controller.transition, Idle)
    assert controller.path == (1,)

    controller.show_detail(controller.current_node)
    dispatch_key(controller, "escape")
    assert controller.detail is None


def test_unknown_key_is_not_handled(controller: NavigationController) -> None:
    assert not dispatch_key(controller, "x")
