import uvicorn

from honyaku.config.settings import settings

if __name__ == "__main__":
    uvicorn.run(
        "honyaku.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
