"""
ASGI entry point for the shade picker API.

Used by uvicorn (see server.main). .env is loaded before the app is built
so AppConfig.load_from_env() sees it.
"""

from dotenv import load_dotenv

load_dotenv()

from server.app import create_app  # pylint: disable=wrong-import-position

app = create_app()
