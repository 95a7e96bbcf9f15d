import uvicorn

from .config import CONFIG
from .server import create_app


def main() -> None:
    uvicorn.run(create_app(), host=CONFIG.HOST, port=CONFIG.PORT, log_level=CONFIG.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
