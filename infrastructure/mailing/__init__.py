from .buttondown import ButtondownClient, classify_error

__all__ = ['ButtondownClient', 'classify_error']
