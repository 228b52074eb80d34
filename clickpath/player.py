import logging
import queue
import time

from .commands import Command, PlayMode
from .recorder import Click, Wait

logger = logging.getLogger(__name__)


def _exit_requested(commands):
    try:
        command = commands.get_nowait()
    except queue.Empty:
        return False

    if command == Command.EXIT:
        return True
    logger.debug("Dropped %s during playback", command)
    return False


def play_click_path(path, mode, mouse, commands, sleep=time.sleep):
    """Replay ``path`` once or until an exit command shows up on ``commands``.

    The queue is polled before every event, so cancellation takes effect
    within one click or wait. Returns True if playback was cancelled.
    """
    while True:
        for event in path.clicks:
            if _exit_requested(commands):
                print("Exiting loop...")
                return True

            if isinstance(event, Click):
                mouse.click_at(event.x, event.y)
                print(f"Click at: ({event.x}, {event.y})")
            elif isinstance(event, Wait):
                sleep(event.duration_ms / 1000)

        if mode == PlayMode.ONCE:
            print("Finished playing recorded clicks.")
            return False
