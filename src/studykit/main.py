"""
Snippet runner

Imports every snippet module so their demos register, configures logging
and runs the demo named on the command line:

    python -m studykit.main sorting
    python -m studykit.main            # lists the registered demos
"""

import sys

from loguru import logger

from studykit.utils.logger import configure_logging
from studykit.utils.utils import demosRegister

# Importing the packages registers their demos
import studykit.arrays  # noqa: F401
import studykit.db  # noqa: F401
import studykit.patterns  # noqa: F401
import studykit.refactoring  # noqa: F401
import studykit.solid  # noqa: F401
import studykit.workers  # noqa: F401


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    configure_logging(app_name="studykit", service="snippets")

    if not argv:
        logger.info(f"Available demos: {', '.join(demosRegister.names())}")
        return 0

    status = 0
    for name in argv:
        try:
            demo = demosRegister.get_demo(name)
        except KeyError as e:
            logger.error(f"✖ {e.args[0]}")
            status = 2
            continue
        logger.info(f"► Running demo '{name}'")
        demo()
    return status


if __name__ == "__main__":
    sys.exit(main())
