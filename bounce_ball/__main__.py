"""Entry point: ``python -m bounce_ball`` or the ``bounce-ball`` script."""

import logging

from bounce_ball.game import run


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    run()


if __name__ == "__main__":
    main()
