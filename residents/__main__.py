"""Run the API server: python -m residents"""

import uvicorn

from residents.core.settings import settings


if __name__ == "__main__":
    uvicorn.run(
        "residents.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
