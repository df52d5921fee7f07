from __future__ import annotations

import json
import logging
import os
import tempfile
from typing import Any

logger = logging.getLogger(__name__)


def load_whitelist(path: str) -> dict[str, Any]:
    if not os.path.exists(path):
        return {}
    with open(path, "r", encoding="utf-8") as handle:
        return json.load(handle) or {}


class JsonPersistor:
    def persist(self, data: dict[str, Any], path: str) -> str:
        """Replace the file at ``path`` with ``data`` as pretty-printed JSON.

        The existing file is only replaced once the new content is fully
        serialized and written, so a failure leaves it untouched.
        """
        payload = json.dumps(data, indent=4) + "\n"

        resolved = os.path.abspath(path)
        directory = os.path.dirname(resolved)
        os.makedirs(directory, exist_ok=True)

        fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".whitelist-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
            os.replace(tmp_path, resolved)
        except OSError:
            os.unlink(tmp_path)
            raise

        logger.info(f"Wrote whitelist to {resolved}")
        return resolved
