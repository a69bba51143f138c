"""Run the API with uvicorn: ``python -m cureconnect``."""

import uvicorn

from cureconnect.config import settings


def main() -> None:
    uvicorn.run(
        "cureconnect.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
