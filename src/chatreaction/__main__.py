"""Allow ``python -m chatreaction``."""

from .cli import main

main()
