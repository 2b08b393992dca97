from __future__ import annotations

import sys

from fieldlog.main import main

sys.exit(main())
