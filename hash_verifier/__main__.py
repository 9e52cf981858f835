"""Entry point: python -m hash_verifier"""

import uvicorn
from .config import settings


def main():
    uvicorn.run(
        "hash_verifier.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
