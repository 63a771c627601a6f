"""Allow ``python -m apprendo_mcp``."""

from apprendo_mcp.main import main

raise SystemExit(main())
