"""Package entry point for ``python -m ui_typography``.

Delegates to the CLI's main() function. The HTTP API has its own
``ui-typography-api`` console script.
"""

from ui_typography.cli import main

if __name__ == "__main__":
    main()
