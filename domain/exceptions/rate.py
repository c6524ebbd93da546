class RateException(Exception):
    pass


class ProviderError(RateException):
    pass
