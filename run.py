import os

import uvicorn

if __name__ == "__main__":
    port = int(os.environ.get("PORT", 8000))
    # Requests are independent and async; one worker is enough unless
    # WEB_CONCURRENCY says otherwise.
    workers = int(os.environ.get("WEB_CONCURRENCY", 1))
    uvicorn.run(
        "fitment_api.main:app",
        host="0.0.0.0",
        port=port,
        workers=workers,
    )
