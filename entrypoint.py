"""Backend entrypoint. Starts uvicorn with host and port taken from the environment."""
import os
import uvicorn

from mybudget.main import app


def main() -> None:
    host = os.environ.get("MYBUDGET_HOST", "127.0.0.1")
    port = int(os.environ.get("MYBUDGET_PORT", "8080"))
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
