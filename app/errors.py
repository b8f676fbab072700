class InvalidInput(ValueError):
    """Dataset is missing, or one of its collections is absent, not a list, or empty."""


class InvalidStrategy(TypeError):
    """A revenue or bonus strategy is not callable."""
