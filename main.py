import logging
import sys

from gridpath.config import LOG_FORMAT, LOG_LEVEL


def main():
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    # Imported late so logging is configured before the world loads
    from gridpath.demo import PathfindingDemo

    demo = PathfindingDemo()
    demo.run()
    print("\nThanks for trying the Pathfinding Demo!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
