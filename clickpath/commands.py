from dataclasses import dataclass
from enum import Enum


class PlayMode(Enum):
    ONCE = "once"
    LOOP = "loop"


class Command(Enum):
    START_RECORDING = "start_recording"
    REGISTER_CLICK = "register_click"
    STOP_RECORDING = "stop_recording"
    EXIT = "exit"


@dataclass(frozen=True)
class PlayClicks:
    mode: PlayMode = PlayMode.ONCE


PLAY_ONCE = PlayClicks(PlayMode.ONCE)
PLAY_LOOP = PlayClicks(PlayMode.LOOP)
