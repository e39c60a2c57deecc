"""Main application entry point.

Runs FastAPI (port 8000) with NiceGUI mounted for the chat interface.
Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def run_integrated() -> None:
    """Run FastAPI with NiceGUI mounted on the same server.

    FastAPI handles API routes, NiceGUI handles the UI.
    Both accessible on port 8000.
    """
    import uvicorn
    from nicegui import ui

    from chatway.api.app import create_app
    from chatway.ui.chat_page import chat_page  # noqa: F401 - Registers the page

    app = create_app()

    ui.run_with(
        app,
        title="Chat Way",
        favicon="💬",
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "chatway-secret"),
    )

    port = int(os.getenv("PORT", "8000"))
    logger.info(f"Starting integrated server on http://localhost:{port}")
    logger.info(f"API docs available at http://localhost:{port}/docs")
    logger.info(f"Chat UI available at http://localhost:{port}/")

    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


def run_separate() -> None:
    """Run FastAPI and NiceGUI as separate servers.

    FastAPI on PORT, NiceGUI on UI_PORT. The UI process gets API_BASE_URL
    pointing at the API.
    """
    import subprocess

    api_port = os.getenv("PORT", "8000")
    ui_port = os.getenv("UI_PORT", "8080")
    env = {
        **os.environ,
        "API_BASE_URL": os.getenv("API_BASE_URL", f"http://localhost:{api_port}"),
    }

    logger.info(f"Starting FastAPI on http://localhost:{api_port}")
    logger.info(f"Starting NiceGUI on http://localhost:{ui_port}")

    fastapi_proc = subprocess.Popen(
        [
            sys.executable,
            "-m",
            "uvicorn",
            "chatway.api.app:app",
            "--host",
            os.getenv("HOST", "0.0.0.0"),
            "--port",
            api_port,
        ]
    )
    nicegui_proc = subprocess.Popen(
        [sys.executable, "-c", "from chatway.ui.chat_page import main; main()"],
        env=env,
    )

    try:
        fastapi_proc.wait()
    except KeyboardInterrupt:
        logger.info("Shutting down servers...")
    finally:
        fastapi_proc.terminate()
        nicegui_proc.terminate()
        fastapi_proc.wait()
        nicegui_proc.wait()


def main() -> None:
    """Application entry point.

    Set RUN_MODE=separate to run FastAPI and NiceGUI on different ports.
    Default is integrated mode (both on port 8000).
    """
    mode = os.getenv("RUN_MODE", "integrated").lower()

    logger.info(f"Starting Chat Way in {mode} mode")

    if mode == "separate":
        run_separate()
    else:
        run_integrated()


if __name__ == "__main__":
    main()
