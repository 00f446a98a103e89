import uvicorn

from project_usage.config import settings

if __name__ == "__main__":
    uvicorn.run("project_usage.main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)
