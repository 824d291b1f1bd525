#!/usr/bin/env python3
"""Start the Wall Draw API server."""

import uvicorn

from walldraw.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "walldraw.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        reload_dirs=["walldraw"],
    )
