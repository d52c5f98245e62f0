#!/usr/bin/env python
"""Script to run the TaskCafe server."""
import uvicorn

from taskcafe.config import HOST, PORT, RELOAD

if __name__ == "__main__":
    uvicorn.run(
        "taskcafe.main:app",
        host=HOST,
        port=PORT,
        reload=RELOAD,
    )
