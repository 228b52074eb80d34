import logging
import time

from .commands import Command, PlayClicks, PlayMode
from .config import CLICK_PATH_FILE
from .hotkeys import hotkey_label
from .errors import RecoverableError
from .player import play_click_path
from .recorder import ClickPath, load_click_path, save_click_path

logger = logging.getLogger(__name__)


class SessionController:
    """Owns the recording state and runs the command loop.

    Only one thread may call ``run``/``dispatch``. Fatal errors
    (``FatalError``) propagate to the caller.
    """

    def __init__(self, commands, mouse, file_path=CLICK_PATH_FILE,
                 hotkeys=None, clock=time.monotonic_ns, sleep=time.sleep):
        self.commands = commands
        self.mouse = mouse
        self.file_path = file_path
        self.hotkeys = hotkeys
        self.clock = clock
        self.sleep = sleep

        self.recording = False
        self.path = ClickPath()
        self.last_mark = clock()

    def run(self):
        while self.dispatch(self.commands.get()):
            pass

    def dispatch(self, command):
        """Handle one command. Returns False once the loop should end."""
        logger.debug("Dispatching %s", command)

        if command == Command.START_RECORDING:
            self.start_recording()
        elif command == Command.REGISTER_CLICK:
            self.register_click()
        elif command == Command.STOP_RECORDING:
            self.stop_recording()
        elif isinstance(command, PlayClicks):
            self.play_clicks(command.mode)
        elif command == Command.EXIT:
            self.exit()
            return False
        else:
            logger.warning("Ignoring unknown command %r", command)
        return True

    # ===============================
    # RECORDING
    # ===============================
    def start_recording(self):
        print("Starting recording...")
        self.last_mark = self.clock()
        self.path = ClickPath()
        self.recording = True

    def register_click(self):
        if not self.recording:
            print(f"Not recording. Press {hotkey_label(Command.START_RECORDING)} to start recording.")
            return

        now = self.clock()
        elapsed_ms = (now - self.last_mark) // 1_000_000
        if elapsed_ms > 0:
            self.path.add_wait(elapsed_ms)
            print(f"Wait for: {elapsed_ms} ms")
        self.last_mark = now

        x, y = self.mouse.position()
        print(f"Click at: ({x}, {y})")
        self.path.add_click(x, y)
        self.mouse.click()

    def stop_recording(self):
        print("Stopping recording...")
        self.recording = False
        save_click_path(self.path, self.file_path)
        print(f"Click path saved to {self.file_path}")

    # ===============================
    # PLAYBACK
    # ===============================
    def play_clicks(self, mode):
        if self.recording:
            print("Cannot play while recording. Stop recording first.")
            return

        if mode == PlayMode.LOOP:
            print("Playing recorded clicks in a loop...")
        else:
            print("Playing recorded clicks once...")

        try:
            path = load_click_path(self.file_path)
        except RecoverableError as e:
            logger.warning("Cannot play clicks: %s", e)
            return

        if path.is_empty():
            print("No clicks recorded. Please record some clicks first.")
            return
        if mode == PlayMode.LOOP:
            print(f"Press {hotkey_label(Command.EXIT)} to stop playing.")

        play_click_path(path, mode, self.mouse, self.commands, sleep=self.sleep)

    def exit(self):
        print("Exiting...")
        if self.hotkeys is not None:
            self.hotkeys.stop()
