import uvicorn

from .config import settings

if __name__ == "__main__":
    uvicorn.run(
        "gamestore.main:app",
        host=settings.HOST,
        port=settings.PORT,
        workers=settings.WORKERS,
        log_level=settings.LOG_LEVEL.lower()
    )
