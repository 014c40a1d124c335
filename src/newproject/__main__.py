"""Allow ``python -m newproject``."""

from .cli import main

raise SystemExit(main())
