import uvicorn

from shorturl.core.config import settings


def run():
    uvicorn.run("shorturl.main:app", host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
