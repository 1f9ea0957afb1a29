"""Daily submission window and countdown (fixed UTC-5 reference zone)."""

__all__: list[str] = []
