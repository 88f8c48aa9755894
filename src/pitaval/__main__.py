from __future__ import annotations

import sys

from pitaval.cli import main

sys.exit(main())
