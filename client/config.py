"""
Client configuration settings.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


@dataclass
class ClientSettings:
    """Client configuration."""
    
    # Logging
    log_level: str = "INFO"
    
    # Dice settings
    dice_seed: Optional[int] = None
    
    # Number formatting locale name, e.g. "de_DE"; None uses the system locale
    locale_name: Optional[str] = None
    
    # UI settings
    window_width: int = 420
    window_height: int = 640


def _optional_int(value: Optional[str]) -> Optional[int]:
    return int(value) if value else None


def load_settings() -> ClientSettings:
    """Load settings from environment variables."""
    return ClientSettings(
        log_level=os.getenv("PATHWAY_LOG_LEVEL", "INFO").upper(),
        dice_seed=_optional_int(os.getenv("PATHWAY_DICE_SEED")),
        locale_name=os.getenv("PATHWAY_LOCALE") or None,
        window_width=int(os.getenv("PATHWAY_WINDOW_WIDTH", "420")),
        window_height=int(os.getenv("PATHWAY_WINDOW_HEIGHT", "640")),
    )


settings = load_settings()
