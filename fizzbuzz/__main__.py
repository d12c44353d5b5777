"""Allow `python -m fizzbuzz`."""

from .cli import main

raise SystemExit(main())
