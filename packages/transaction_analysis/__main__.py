"""Allow ``python -m transaction_analysis``."""

from .cli import main

main()
