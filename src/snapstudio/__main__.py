"""Allow ``python -m snapstudio``."""

from snapstudio.ui.app import main

if __name__ == "__main__":
    main()
