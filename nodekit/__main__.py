"""Allow ``python -m nodekit``."""

from nodekit.main import main

main()
