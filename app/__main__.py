# =============================================================================
# app/__main__.py - Run the API with uvicorn
# =============================================================================
# Usage:
#   python -m app
# =============================================================================

import uvicorn

from app.config import settings


def main() -> None:
    """Serve app.main:app on the configured host and port."""
    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    main()
