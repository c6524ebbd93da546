class SubscriptionError(Exception):
    pass


class ValidationError(SubscriptionError):
    pass


class ConfigurationError(SubscriptionError):
    pass


class NotFoundError(SubscriptionError):
    pass


class UpstreamError(SubscriptionError):
    pass


class SubscriberAlreadyExistsError(UpstreamError):
    """Create was rejected because the email is already on the list."""
