"""Allow ``python -m tinqer_pages`` to run the site build."""

from .cli import main

main()
