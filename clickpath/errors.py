class ClickPathError(Exception):
    pass


# ===============================
# NON-FATAL: log it and return to idle
# ===============================
class RecoverableError(ClickPathError):
    pass


class ClickPathNotFoundError(RecoverableError):
    def __init__(self, path):
        super().__init__(f"No click path found at {path}")
        self.path = path


class MalformedClickPathError(RecoverableError, ValueError):
    def __init__(self, message, index=None):
        if index is not None:
            message = f"event {index}: {message}"
        super().__init__(message)
        self.index = index


class MalformedConfigError(RecoverableError, ValueError):
    pass


# ===============================
# FATAL: stop the command loop and the process
# ===============================
class FatalError(ClickPathError):
    pass


class InputSimulationError(FatalError):
    pass


class StorageWriteError(FatalError):
    pass
