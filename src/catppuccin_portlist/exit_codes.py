from __future__ import annotations

OK = 0
ERR_IO = 3
ERR_NETWORK = 4
ERR_VALIDATION = 5
ERR_CONFIG = 6
ERR_SECTION = 7
ERR_DRIFT = 8
ERR_INTERNAL = 99
