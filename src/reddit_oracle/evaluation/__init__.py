"""Leaderboards and daily statistics built on top of scoring."""

__all__: list[str] = []
