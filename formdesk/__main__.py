import uvicorn

from formdesk.core.config import load_settings


def main() -> None:
    settings = load_settings()
    uvicorn.run("formdesk.app:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
