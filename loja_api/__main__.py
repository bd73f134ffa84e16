# loja_api/__main__.py

import uvicorn

from loja_api.adapters.configuration.config import settings


def main() -> None:
    """Serve the API with uvicorn (python -m loja_api)."""
    uvicorn.run(
        "loja_api.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.ENVIRONMENT == "development",
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
