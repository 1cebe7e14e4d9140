"""
__main__.py
-----------
Entry point: `python -m cactus_run` or the `cactus-run` script.
"""

import sys

from cactus_run.core.runtime.game_loop import GameLoop


def main():
    GameLoop().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
