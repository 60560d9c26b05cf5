"""Run the API server with ``python -m chat_markdown``."""

import uvicorn

from chat_markdown.config import settings


def main() -> None:
    uvicorn.run(
        "chat_markdown.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        access_log=False,
    )


if __name__ == "__main__":
    main()
