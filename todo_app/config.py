"""
Configuration for the to-do API, read from the environment (and a local .env file).
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class Config:
    jwt_secret: Optional[str] = None
    jwt_algorithm: str = "HS256"
    host: str = "127.0.0.1"
    port: int = 5001
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()
        return cls(
            jwt_secret=os.getenv("JWT_SECRET") or None,
            jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
            host=os.getenv("HOST", "127.0.0.1"),
            port=int(os.getenv("PORT", "5001")),
            debug=os.getenv("FLASK_DEBUG", "").lower() in _TRUTHY,
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def to_flask(self) -> dict:
        # Flask keeps settings under upper-case keys
        return {
            "JWT_SECRET": self.jwt_secret,
            "JWT_ALGORITHM": self.jwt_algorithm,
            "HOST": self.host,
            "PORT": self.port,
            "DEBUG": self.debug,
            "LOG_LEVEL": self.log_level,
        }
