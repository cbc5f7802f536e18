"""Run the API server: python -m diff_review."""

import uvicorn

from diff_review.core.config import settings


def main() -> None:
    uvicorn.run(
        "diff_review.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
