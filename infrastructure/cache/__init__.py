from .quote_cache import QuoteCache

__all__ = ['QuoteCache']
