"""Allow ``python -m minire``."""

from minire.cli import main

raise SystemExit(main())
