"""Package logger for tabdeck."""

from __future__ import annotations

import logging

logger = logging.getLogger("tabdeck")
