"""Allow ``python -m ffquick``."""

from .cli import main

raise SystemExit(main())
