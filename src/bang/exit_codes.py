from __future__ import annotations

OK = 0
ERR_USAGE = 1
ERR_CONFIG = 1
ERR_NOT_FOUND = 1
ERR_INTERNAL = 1
