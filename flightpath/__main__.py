"""Allow ``python -m flightpath``."""

from flightpath.cli import main

if __name__ == "__main__":
    main()
