"""Reusable UI components for the war room application."""

from .player_table import render_player_table
from .squad_insights import render_best_lineup, render_gaps
from .squad_status import render_squad_status

__all__ = ["render_best_lineup", "render_gaps", "render_player_table", "render_squad_status"]
