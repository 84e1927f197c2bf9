import sys

from snippetbox.cli import main


if __name__ == "__main__":
    sys.exit(main())
