"""Allow ``python -m openapi_to_typescript_generator``."""

from __future__ import annotations

from .cli import main

raise SystemExit(main())
