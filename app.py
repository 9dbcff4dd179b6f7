"""
App assembly entry point.

Re-exports the FastAPI `app` from `coursetrack.api.main`; ``python app.py``
serves it with uvicorn on ``HOST``/``PORT``.
"""
import os

from coursetrack.api.main import app  # noqa: F401


def run() -> None:
    import uvicorn

    uvicorn.run(
        "coursetrack.api.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "5000")),
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


if __name__ == "__main__":
    run()
