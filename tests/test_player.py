"""Tests for click path playback and its cancellation."""

import pytest

from clickpath.commands import PLAY_ONCE, Command, PlayMode
from clickpath.errors import InputSimulationError
from clickpath.player import play_click_path
from clickpath.recorder import Click, ClickPath, Wait


@pytest.fixture
def path():
    return ClickPath([Click(10, 20), Wait(50), Click(30, 40)])


class TestPlayOnce:

    def test_replays_clicks_and_waits_in_order(self, path, mouse, commands, sleep):
        cancelled = play_click_path(path, PlayMode.ONCE, mouse, commands, sleep=sleep)

        assert cancelled is False
        assert mouse.actions == [("click_at", 10, 20), ("click_at", 30, 40)]
        assert sleep.calls == [0.05]

    def test_other_commands_are_dropped(self, path, mouse, commands, sleep):
        commands.put(Command.START_RECORDING)
        commands.put(PLAY_ONCE)

        assert play_click_path(path, PlayMode.ONCE, mouse, commands, sleep=sleep) is False
        assert commands.empty()
        assert len(mouse.actions) == 2

    def test_exit_before_first_event(self, path, mouse, commands, sleep):
        commands.put(Command.EXIT)

        assert play_click_path(path, PlayMode.ONCE, mouse, commands, sleep=sleep) is True
        assert mouse.actions == []
        assert sleep.calls == []

    def test_input_failure_propagates(self, path, mouse, commands, sleep):
        mouse.fail = True
        with pytest.raises(InputSimulationError):
            play_click_path(path, PlayMode.ONCE, mouse, commands, sleep=sleep)


class TestPlayLoop:

    def test_repeats_until_exit(self, path, mouse, commands, make_sleep):
        def hook(calls):
            if calls == 3:
                commands.put(Command.EXIT)

        sleep = make_sleep(hook)
        cancelled = play_click_path(path, PlayMode.LOOP, mouse, commands, sleep=sleep)

        assert cancelled is True
        # third pass: click, wait (exit arrives), then stop before the next click
        assert mouse.actions == [
            ("click_at", 10, 20), ("click_at", 30, 40),
            ("click_at", 10, 20), ("click_at", 30, 40),
            ("click_at", 10, 20),
        ]
        assert sleep.calls == [0.05, 0.05, 0.05]

    def test_exit_seen_within_one_event(self, mouse, commands, make_sleep):
        path = ClickPath([Wait(10), Wait(10), Wait(10), Click(1, 1)])

        def hook(calls):
            if calls == 1:
                commands.put(Command.EXIT)

        sleep = make_sleep(hook)
        assert play_click_path(path, PlayMode.LOOP, mouse, commands, sleep=sleep) is True
        assert sleep.calls == [0.01]
        assert mouse.actions == []

    def test_non_exit_commands_do_not_stop_loop(self, path, mouse, commands, make_sleep):
        def hook(calls):
            if calls == 1:
                commands.put(Command.STOP_RECORDING)
            elif calls == 2:
                commands.put(Command.EXIT)

        sleep = make_sleep(hook)
        assert play_click_path(path, PlayMode.LOOP, mouse, commands, sleep=sleep) is True
        assert sleep.calls == [0.05, 0.05]
