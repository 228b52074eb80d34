import logging

import pyautogui

from .errors import InputSimulationError

logger = logging.getLogger(__name__)

_FAILURES = (pyautogui.PyAutoGUIException, OSError)


class Mouse:
    """Left-button mouse backed by pyautogui.

    Every failure is fatal: the caller gets an InputSimulationError.
    """

    def __init__(self, pause=0.0):
        # pyautogui sleeps PAUSE seconds after every call, which would skew replayed waits
        pyautogui.PAUSE = pause

    def position(self):
        try:
            x, y = pyautogui.position()
        except _FAILURES as e:
            raise InputSimulationError(f"Could not read pointer position: {e}") from e
        return int(x), int(y)

    def click(self):
        try:
            pyautogui.click(button="left")
        except _FAILURES as e:
            raise InputSimulationError(f"Click failed: {e}") from e

    def click_at(self, x, y):
        try:
            pyautogui.moveTo(x, y)
            pyautogui.click(button="left")
        except _FAILURES as e:
            raise InputSimulationError(f"Click at ({x}, {y}) failed: {e}") from e
