from blogapp.decorators.metrics import timed

__all__ = ["timed"]
