#
# PROJECT: vex-math
# MODULE: vex_math/logging_config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "vex_math"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach handlers to the 'vex_math' logger and return it.

    The math modules never configure logging themselves. At DEBUG they report
    singular matrices skipped by inverse() (vex_math.matrix) and vertices
    dropped behind the near plane (vex_math.demo); nothing is logged at INFO
    or above. Records go to stderr so the demo report on stdout stays clean,
    and they do not propagate to the root logger.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.WARNING)
        log_file: Optional path to also write the records to, truncated first.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    logger.propagate = False

    # Calling again replaces the handlers instead of stacking them
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    formatter = logging.Formatter('%(asctime)s %(levelname)-5s %(name)s: %(message)s',
                                  datefmt='%H:%M:%S')

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug(f"Logging initialized at {logging.getLevelName(level)}.")
    return logger
