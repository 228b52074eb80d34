import logging
import queue

from .commands import PLAY_LOOP, PLAY_ONCE, Command
from .config import KEY_MODIFIER, KEY_MODIFIER_DISPLAY

logger = logging.getLogger(__name__)

# ===============================
# HOTKEYS (fixed: key, label, command)
# ===============================
# function keys: pynput matches them by virtual key, so Shift cannot turn them into another character
HOTKEYS = [
    ("<f1>", "F1", Command.START_RECORDING),
    ("<f2>", "F2", Command.REGISTER_CLICK),
    ("<f3>", "F3", Command.STOP_RECORDING),
    ("<f4>", "F4", PLAY_ONCE),
    ("<f5>", "F5", PLAY_LOOP),
    ("<f12>", "F12", Command.EXIT),
]


def hotkey_label(command):
    for _, label, bound in HOTKEYS:
        if bound == command:
            return f"{KEY_MODIFIER_DISPLAY}+{label}"
    raise KeyError(command)


def hotkey_help():
    return [
        f"Press {hotkey_label(Command.START_RECORDING)} to start recording",
        f"Press {hotkey_label(Command.REGISTER_CLICK)} to add a click",
        f"Press {hotkey_label(Command.STOP_RECORDING)} to stop recording",
        f"Press {hotkey_label(PLAY_ONCE)} to play the recorded clicks",
        f"Press {hotkey_label(PLAY_LOOP)} to play the recorded clicks in a loop",
        f"Press {hotkey_label(Command.EXIT)} to exit",
    ]


def _make_callback(commands, label, command):
    def on_activate():
        print(f"Pressed {KEY_MODIFIER_DISPLAY}+{label}")
        commands.put(command)
    return on_activate


def build_bindings(commands):
    """Map pynput hotkey strings to callbacks that enqueue command tokens."""
    return {
        f"{KEY_MODIFIER}+{key}": _make_callback(commands, label, command)
        for key, label, command in HOTKEYS
    }


class HotkeyListener:
    """Runs pynput's global hotkey listener in its own thread."""

    def __init__(self, commands=None):
        self.commands = commands if commands is not None else queue.Queue()
        self._listener = None

    def start(self):
        # imported here: pynput needs a display server as soon as it is imported
        from pynput import keyboard

        self._listener = keyboard.GlobalHotKeys(build_bindings(self.commands))
        self._listener.start()
        logger.debug("Hotkey listener started")

    def stop(self):
        if self._listener is not None:
            self._listener.stop()
            self._listener = None
            logger.debug("Hotkey listener stopped")
