"""Run the Todo API under uvicorn: python -m todoapi"""

import uvicorn

from .config import settings


def main() -> None:
    uvicorn.run("todoapi.main:app", host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
