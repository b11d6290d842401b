import logging

from tilepath.demo import Demo


def main():
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s: %(message)s"
    )
    Demo().run()


if __name__ == "__main__":
    main()
