import uvicorn

from scoretracker.core.config import settings

if __name__ == "__main__":
    uvicorn.run("scoretracker.main:app", host="0.0.0.0", port=settings.API_PORT)
