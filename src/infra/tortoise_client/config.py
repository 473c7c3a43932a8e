"""
Tortoise ORM configuration
"""
from pathlib import Path
from typing import Any, Dict

from src.infra.config import Settings

MODELS_MODULE = "src.infra.tortoise_client.models"
SQLITE_SCHEME = "sqlite://"


def build_tortoise_config(database_url: str) -> Dict[str, Any]:
    return {
        "connections": {
            "default": database_url
        },
        "apps": {
            "models": {
                "models": [MODELS_MODULE],
                "default_connection": "default",
            },
        },
    }


def ensure_sqlite_directory(database_url: str) -> None:
    """SQLiteファイルの親ディレクトリを作成（Tortoiseは作成しない）"""
    if not database_url.startswith(SQLITE_SCHEME):
        return
    path = database_url[len(SQLITE_SCHEME):].split("?", 1)[0]
    if path and path != ":memory:":
        Path(path).parent.mkdir(parents=True, exist_ok=True)


def get_tortoise_config(settings: Settings = None) -> Dict[str, Any]:
    settings = settings or Settings()
    ensure_sqlite_directory(settings.database_url)
    return build_tortoise_config(settings.database_url)
