"""Application settings."""

from pathlib import Path
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    host: str = "127.0.0.1"
    port: int = 8788
    debug: bool = False
    frontend_dir: Path = Path(__file__).resolve().parent.parent / "frontend"
    max_upload_size_mb: int = 512
    hash_isolation: str = "process"  # "process" or "thread"
    default_algorithm: str = "MD5"
    pdf_render_scale: float = 2.0
    pdf_page_width: int = 800
    pdf_max_page_height: int = 20000

    model_config = {"env_prefix": "HASHV_"}


settings = Settings()
