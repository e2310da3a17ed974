"""IPL Auction War Room: player valuation and squad construction."""

__version__ = "1.0.0"
