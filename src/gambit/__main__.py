"""Allow ``python -m gambit``."""

from gambit.app import main

raise SystemExit(main())
