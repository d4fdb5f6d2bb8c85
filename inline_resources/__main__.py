"""Allow ``python -m inline_resources``."""

from inline_resources.cli import main

if __name__ == "__main__":
    main()
