"""Application entry point."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from .core.config import Settings, settings
from .core.errors import CommandError, DataConversionError, ParseError, StorageError
from .core.logging import init_logging
from .domain.hr_manager import HrManager
from .logic.logic_manager import LogicManager
from .logic.parser import COMMAND_PARSERS
from .storage.json_storage import JsonHrManagerStorage

logger = logging.getLogger(__name__)


def load_model(storage: JsonHrManagerStorage) -> HrManager:
    """Load saved data, starting empty if it is corrupt or unreadable."""
    try:
        return storage.read_hr_manager()
    except DataConversionError as exc:
        logger.warning("Data files are not in the correct format, starting empty: %s", exc)
    except StorageError as exc:
        logger.warning("Problem while reading from the data files, starting empty: %s", exc)
    return HrManager()


def create_logic(config: Settings = settings) -> LogicManager:
    """Create and wire the model, storage and logic."""
    init_logging(config.LOG_LEVEL)

    storage = JsonHrManagerStorage(
        config.CANDIDATES_FILE, config.POSITIONS_FILE, config.INTERVIEWS_FILE
    )
    return LogicManager(load_model(storage), storage)


def run(logic: LogicManager, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> None:
    """Read commands line by line until ``exit`` or end of input."""
    for line in stdin:
        if not line.strip():
            continue
        try:
            result = logic.execute(line)
        except ParseError as exc:
            print(exc.message, file=stdout)
            if exc.usage and exc.usage not in exc.message:
                print(exc.usage, file=stdout)
            continue
        except CommandError as exc:
            print(exc.message, file=stdout)
            continue
        print(result.feedback_to_user, file=stdout)
        if result.show_help:
            print("Available commands: " + ", ".join(sorted(COMMAND_PARSERS)), file=stdout)
        if result.exit:
            break


def main() -> None:
    logger.info("Starting HR manager")
    run(create_logic())


if __name__ == "__main__":
    main()
