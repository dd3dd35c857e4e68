"""
Configuration management.
"""

import os
from dataclasses import dataclass, field


@dataclass
class Config:
    """
    Demo runner configuration.

    Loads from environment variables with sensible defaults.
    """

    # Logging
    log_level: str = field(
        default_factory=lambda: os.getenv("REALESTATE_LOG_LEVEL", "WARNING").upper()
    )
    verbose: bool = field(
        default_factory=lambda: os.getenv("REALESTATE_VERBOSE", "false").lower() == "true"
    )

    # Reporting
    currency: str = field(
        default_factory=lambda: os.getenv("REALESTATE_CURRENCY", "HUF").upper()
    )

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from environment."""
        return cls()

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "log_level": self.log_level,
            "verbose": self.verbose,
            "currency": self.currency,
        }
