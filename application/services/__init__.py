from .rate_quote_service import RateQuoteService
from .subscription_service import SubscriptionReconciler

__all__ = ['RateQuoteService', 'SubscriptionReconciler']
