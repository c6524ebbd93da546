from .fred import FredProvider

__all__ = ['FredProvider']
