"""Custom exception types for domain and API layers."""


class AppError(Exception):
    """Base app exception."""


class ValidationError(AppError):
    """Validation failure for user input."""


class InvalidMonthYearError(ValidationError, ValueError):
    """A month-year value is not in MM-YYYY form."""


class NotFoundError(AppError):
    """Requested record does not exist or has been deleted."""


class SubscriptionNotFoundError(NotFoundError):
    def __init__(self, subscription_id) -> None:
        self.subscription_id = subscription_id
        super().__init__(f"Subscription {subscription_id} not found")


class RepositoryError(AppError):
    """Persistence layer failure."""
