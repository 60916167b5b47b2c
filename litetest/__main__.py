"""Allow ``python -m litetest``."""

from .cli import main

main()
