# main.py

from uvicorn import run

from quill.main import app


def main() -> None:
    run(
        "quill.main:app",
        host="127.0.0.1",
        port=8000,
        reload=True,
        log_level="info",
    )


if __name__ == "__main__":
    __all__ = ["app"]
    main()
