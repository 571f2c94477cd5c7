"""Summaries of batch results."""

from monty_hall.simulation.analysis.summary import render_summary, summarize

__all__ = ["render_summary", "summarize"]
