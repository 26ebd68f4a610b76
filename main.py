import uvicorn

from ssda.config import settings

if __name__ == "__main__":
    uvicorn.run("ssda.main:app", host=settings.API_HOST, port=settings.API_PORT)
