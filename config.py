# config.py
# Environment-driven defaults for the command line runner

import os

# ======= Logging =======
LOG_LEVEL = os.getenv("CAL_LOG_LEVEL", "INFO").upper()

# ======= Output =======
SHOW_SOLUTIONS = int(os.getenv("CAL_SHOW_SOLUTIONS", "1")) != 0
SHOW_PIECES    = int(os.getenv("CAL_SHOW_PIECES", "1")) != 0

# Log a progress line every N solutions (0 disables)
PROGRESS_EVERY = int(os.getenv("CAL_PROGRESS_EVERY", "50"))


class CFG:
    LOG_LEVEL = LOG_LEVEL

    SHOW_SOLUTIONS = SHOW_SOLUTIONS
    SHOW_PIECES    = SHOW_PIECES
    PROGRESS_EVERY = PROGRESS_EVERY
