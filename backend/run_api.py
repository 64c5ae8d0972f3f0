"""Local dev entrypoint for the mathpad API."""

from __future__ import annotations

import os

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "mathpad.api:app",
        host=os.environ.get("MATHPAD_HOST", "127.0.0.1"),
        port=int(os.environ.get("MATHPAD_PORT", "8000")),
        reload=True,
        log_level=os.environ.get("MATHPAD_LOG_LEVEL", "debug").lower(),
    )
