"""Allow ``python -m duke_cli``."""

from .cli import main

main()
