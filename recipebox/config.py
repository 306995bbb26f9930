import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parent.parent
load_dotenv(ROOT_DIR / ".env")


def _as_bool(value: str, default: bool = False) -> bool:
    if value is None:
        return default
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    catalog_path: str = os.getenv("RECIPE_CATALOG_PATH", str(ROOT_DIR / "recipes" / "catalog.json"))
    # Base URL of the recipe files; the gradio app does not serve them, so point
    # this at the host or static route that does (e.g. https://files.example/recipes/).
    recipe_url_prefix: str = os.getenv("RECIPE_URL_PREFIX", "/recipes/")
    debug_log: bool = _as_bool(os.getenv("DEBUG_LOG", "0"))
    gradio_server_name: str = os.getenv("GRADIO_SERVER_NAME", "0.0.0.0")
    gradio_server_port: int = int(os.getenv("GRADIO_SERVER_PORT", "7860"))


settings = Settings()
