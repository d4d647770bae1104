"""
Custom exceptions for the draft lottery
"""

from typing import Optional


class LotteryError(Exception):
    """Base exception for all lottery errors"""

    pass


class StoreError(LotteryError):
    """Reading from or writing to a league/override store failed"""

    def __init__(self, message: str, season_id: Optional[str] = None):
        super().__init__(message)
        self.season_id = season_id
