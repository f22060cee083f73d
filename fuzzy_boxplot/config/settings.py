"""
Application Settings

Environment configuration for the box-plot tools.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings from environment."""

    # Tolerance as a percentage of the value range
    default_fuzziness: float = 0.0
    log_level: str = "INFO"
    # Key prefix of the zero-valued entries added to small samples
    padding_key: str = "FakeValue"

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables."""
        return cls(
            default_fuzziness=float(os.getenv("BOXPLOT_FUZZINESS", "0.0")),
            log_level=os.getenv("BOXPLOT_LOG_LEVEL", "INFO").upper(),
            padding_key=os.getenv("BOXPLOT_PADDING_KEY", "FakeValue"),
        )
