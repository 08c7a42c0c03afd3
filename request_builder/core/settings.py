"""Unified settings for request-builder."""

import tomllib
from pathlib import Path
from typing import ClassVar, Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


def read_pyproject(pyproject_path: Path) -> dict:
    """Read pyproject.toml into a dict, empty when the file is not shipped."""
    if not pyproject_path.is_file():
        return {}
    with pyproject_path.open("rb") as file_handle:
        return tomllib.load(file_handle)


def get_version(base_dir: Path) -> str:
    """Get version from git tags or fallback to package metadata."""
    try:
        import git

        repo = git.Repo(base_dir, search_parent_directories=True)
        latest_tag = max(repo.tags, key=lambda t: t.commit.committed_datetime, default=None)
        return str(latest_tag) if latest_tag else "0.0.0"
    except Exception:
        try:
            import importlib.metadata

            return importlib.metadata.version("request-builder")
        except Exception:
            return "0.0.0"


class Settings(BaseSettings):
    """Unified settings for request-builder."""

    DEBUG: bool = True
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # ClassVar to prevent Pydantic from trying to load from env
    BASE_DIR: ClassVar[Path] = Path(__file__).parent.parent.parent
    PROJECT: ClassVar[dict] = read_pyproject(BASE_DIR / "pyproject.toml")
    PROJECT_NAME: ClassVar[str] = PROJECT.get("project", {}).get("name", "request-builder")
    PROJECT_VERSION: ClassVar[str] = get_version(BASE_DIR)

    # Multipart
    DEFAULT_MIME_TYPE: str = "application/octet-stream"

    # Connection defaults stamped on every built request
    SERVER_NAME: str = "localhost"
    SERVER_PORT: int = 80
    REMOTE_ADDR: str = "127.0.0.1"
    REMOTE_PORT: int = 80
    LOCAL_ADDR: str = "127.0.0.1"
    LOCAL_PORT: int = 80
    LOCAL_HOSTNAME: str = "localhost"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = Settings()  # type: ignore
