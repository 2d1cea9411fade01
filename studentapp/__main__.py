"""Run the app with uvicorn: ``python -m studentapp``."""
import uvicorn

from studentapp.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "studentapp.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.app_env == "dev",
    )


if __name__ == "__main__":
    main()
