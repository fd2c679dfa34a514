import logging

from file_logger import FileLogger, Level

# Process-wide slot: empty until init, then taken for good
_installed = None


class AlreadyInitializedError(RuntimeError):
    pass


def init_with_level(log_file, level):
    """
    Install a FileLogger as the process-wide logger.

    1. Attach it to the root logger and set the root level to match,
       so the facade drops disabled events before formatting them.
    2. A second call raises AlreadyInitializedError and leaves the
       first logger in place.
    """
    global _installed

    if _installed is not None:
        raise AlreadyInitializedError(
            f"A logger is already installed (writing to {_installed.target_path})"
        )

    logger = FileLogger(log_file, level)
    root = logging.getLogger()
    root.addHandler(logger)
    root.setLevel(level)
    _installed = logger


def init(log_file):
    init_with_level(log_file, Level.TRACE)


def get_logger():
    return _installed


def log_event(level, message: str):
    logging.getLogger().log(level, message)


def shutdown():
    if _installed is None:
        return

    logging.getLogger().removeHandler(_installed)
    _installed.close()
