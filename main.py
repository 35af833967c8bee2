import logging

from config import config
from ui.main_window import MainWindow


def main():
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    MainWindow().run()


if __name__ == "__main__":
    main()
