#!/usr/bin/env python3
"""Start the catalog API under uvicorn on the configured host and port."""

import uvicorn

from catalog.core.config import get_settings

if __name__ == '__main__':
    settings = get_settings()
    uvicorn.run(
        "catalog.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
