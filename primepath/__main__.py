"""Allow ``python -m primepath``."""

from primepath.cli import main

if __name__ == "__main__":
    main()
