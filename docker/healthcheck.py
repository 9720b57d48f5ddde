"""Container healthcheck script: exit 0 if the API answers /health with 200."""

from __future__ import annotations

import os
import sys
import urllib.error
import urllib.request

port = os.environ.get("PORT", "3000")

try:
    with urllib.request.urlopen(f"http://localhost:{port}/health", timeout=5) as resp:
        sys.exit(0 if resp.status == 200 else 1)
except (urllib.error.URLError, OSError):
    sys.exit(1)
