"""Allow running gitsu with ``python -m gitsu``."""

from gitsu.cli.gitsu_cli import main

if __name__ == "__main__":
    main()
