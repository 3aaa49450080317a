from . import model, source

__all__ = ("model", "source")
