"""Allow ``python -m tuichess``."""

from tuichess.app import main

main()
