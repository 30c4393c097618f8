"""
Main entry point: run the uptime counter with settings from env/.env
"""
import sys
from pathlib import Path

# Allow `python backend/main.py` without installing the package
BACKEND_DIR = Path(__file__).resolve().parent
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

from uptime_demo.cli import main as cli_main


def main(argv=None) -> int:
    # Same error handling and exit codes as the uptime-demo script
    return cli_main(argv)


if __name__ == "__main__":
    raise SystemExit(main())
