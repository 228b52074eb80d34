import logging
import queue

from .config import APP_NAME, APP_VERSION, DEFAULT_CONFIG, load_config, setup_logging
from .errors import FatalError, MalformedConfigError
from .hotkeys import HotkeyListener, hotkey_help
from .mouse import Mouse
from .session import SessionController

logger = logging.getLogger(__name__)


def print_banner():
    print(f"{APP_NAME} {APP_VERSION}: auto clicker")
    for line in hotkey_help():
        print(line)


def main():
    try:
        config = load_config()
    except MalformedConfigError as e:
        config = DEFAULT_CONFIG.copy()
        setup_logging(config["log_level"])
        logger.warning("%s; using defaults", e)
    else:
        setup_logging(config["log_level"])

    print_banner()

    commands = queue.Queue()
    hotkeys = HotkeyListener(commands)
    controller = SessionController(
        commands,
        Mouse(),
        file_path=config["click_path_file"],
        hotkeys=hotkeys,
    )

    hotkeys.start()
    try:
        controller.run()
    except FatalError as e:
        logger.error("Fatal: %s", e)
        return 1
    except KeyboardInterrupt:
        print("Exiting...")
        return 130
    finally:
        hotkeys.stop()
    return 0
