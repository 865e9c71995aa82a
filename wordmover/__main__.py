"""Run the FastAPI app via `python -m wordmover`."""
from __future__ import annotations

import uvicorn

from .logging_config import configure_logging


def main() -> None:
    configure_logging()
    uvicorn.run("wordmover.app:app", host="0.0.0.0", port=8000, reload=True)


if __name__ == "__main__":
    main()
