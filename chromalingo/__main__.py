"""Entry point for `python -m chromalingo`."""

import sys


def main():
    from chromalingo.app import run_app
    sys.exit(run_app())


if __name__ == "__main__":
    main()
