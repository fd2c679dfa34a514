import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from file_logger import Level

DEFAULT_LOG_PATH = "filelogger.log"
DEFAULT_LOG_LEVEL = "trace"


def main() -> int:
    load_dotenv()

    log_path = os.getenv("FILELOG_PATH", DEFAULT_LOG_PATH)
    level_name = os.getenv("FILELOG_LEVEL", DEFAULT_LOG_LEVEL)

    print("=== File Logger Configuration ===")
    ok = True

    try:
        level = Level.parse(level_name)
        print(f"[OK] Threshold: {level.name}")
    except ValueError as e:
        print(f"[FAIL] {e}")
        print(f"       Valid levels: {', '.join(l.name.lower() for l in Level)}")
        ok = False

    target = Path(log_path)
    target_dir = target.parent
    print(f"[INFO] Log file path: {target}")

    if not target_dir.is_dir():
        print(f"[FAIL] Directory {target_dir} does not exist.")
        print("       Log lines would be dropped with a diagnostic on stderr.")
        ok = False
    elif not os.access(target_dir, os.W_OK):
        print(f"[FAIL] Directory {target_dir} is not writable.")
        ok = False
    elif target.exists() and not os.access(target, os.W_OK):
        print(f"[FAIL] File {target} exists but is not writable.")
        ok = False
    else:
        print("[OK] Log file is writable.")

    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
