from .flappy_client import FlappyClient
from .logger import setup_logging


def main():
    setup_logging()
    FlappyClient().run()


if __name__ == "__main__":
    main()
