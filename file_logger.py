import datetime as dt
import logging
import sys
from enum import IntEnum
from pathlib import Path


class Level(IntEnum):
    """Severity levels, numerically aligned with the stdlib logging module."""

    TRACE = 5
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR

    @classmethod
    def parse(cls, name: str):
        key = name.strip().upper()
        if key == "WARNING":
            key = "WARN"
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown log level: {name!r}") from None


logging.addLevelName(Level.TRACE, "TRACE")


def utc_now_stamp() -> str:
    return dt.datetime.now(dt.timezone.utc).strftime("%Y-%m-%d %H:%M:%S.%f UTC")


class FileLogger(logging.Handler):
    """
    Append-only file sink for the logging facade.

    Every line is written with its own open/append/close cycle, so no file
    handle is held between calls. I/O failures never reach the caller: they
    are reported on stderr and the line is dropped. Once END LOG is written,
    further records are dropped.
    """

    def __init__(self, path, threshold=Level.TRACE):
        super().__init__(level=threshold)
        self._target_path = Path(path)
        try:
            self._threshold = Level(threshold)
        except ValueError:
            # custom numeric levels are compared as plain ints
            self._threshold = threshold
        self._finalized = False
        self.setFormatter(logging.Formatter("%(message)s"))

    @property
    def target_path(self):
        return self._target_path

    @property
    def threshold(self):
        return self._threshold

    def __repr__(self):
        level = getattr(self._threshold, "name", self._threshold)
        return f"<FileLogger {self._target_path} ({level})>"

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def is_enabled(self, severity) -> bool:
        return int(severity) >= int(self._threshold)

    def record(self, message: str):
        if self._finalized:
            return
        self._append_line(message)

    def finalize(self):
        """Write the closing END LOG marker. Only the first call writes."""
        if self._finalized:
            return
        self._finalized = True
        self._append_line("END LOG")

    def emit(self, log_record):
        try:
            self.record(self.format(log_record))
        except Exception:
            self.handleError(log_record)

    def close(self):
        self.acquire()
        try:
            self.finalize()
        finally:
            self.release()
        super().close()

    def _append_line(self, text: str):
        try:
            f = self._target_path.open("a", encoding="utf-8", errors="backslashreplace")
        except OSError as e:
            print(
                f"[ERROR] Could not open the file {self._target_path} for appending: {e}",
                file=sys.stderr,
            )
            return

        try:
            with f:
                f.write(f"[{utc_now_stamp()}] {text}\n")
        except (OSError, ValueError) as e:
            print(
                f"[ERROR] Could not write to the file {self._target_path}: {e}",
                file=sys.stderr,
            )
