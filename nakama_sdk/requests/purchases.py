"""In-app purchase and subscription validation requests."""

from typing import Annotated, Any, Self

from nakama_sdk.models.purchases import (
    SubscriptionList,
    ValidatedSubscription,
    ValidatePurchaseResponse,
    ValidateSubscriptionResponse,
)
from nakama_sdk.requests._base import PathId, Request


class _ValidateRequest(Request):
    method = "POST"
    sends_body = True

    persist: bool | None = None

    def with_persist(self, persist: bool) -> Self:
        """Store the validated receipt on the server."""
        self.persist = persist
        return self


class ValidatePurchaseAppleRequest(_ValidateRequest):
    path = "v2/iap/purchase/apple"
    response_type = ValidatePurchaseResponse

    receipt: str

    def __init__(self, receipt: str, **data: Any) -> None:
        super().__init__(receipt=receipt, **data)


class ValidatePurchaseGoogleRequest(_ValidateRequest):
    path = "v2/iap/purchase/google"
    response_type = ValidatePurchaseResponse

    purchase: str

    def __init__(self, purchase: str, **data: Any) -> None:
        super().__init__(purchase=purchase, **data)


class ValidatePurchaseHuaweiRequest(_ValidateRequest):
    path = "v2/iap/purchase/huawei"
    response_type = ValidatePurchaseResponse

    purchase: str
    signature: str

    def __init__(self, purchase: str, signature: str, **data: Any) -> None:
        super().__init__(purchase=purchase, signature=signature, **data)


class ValidateSubscriptionAppleRequest(_ValidateRequest):
    path = "v2/iap/subscription/apple"
    response_type = ValidateSubscriptionResponse

    receipt: str

    def __init__(self, receipt: str, **data: Any) -> None:
        super().__init__(receipt=receipt, **data)


class ValidateSubscriptionGoogleRequest(_ValidateRequest):
    path = "v2/iap/subscription/google"
    response_type = ValidateSubscriptionResponse

    receipt: str

    def __init__(self, receipt: str, **data: Any) -> None:
        super().__init__(receipt=receipt, **data)


class SubscriptionsRequest(Request):
    """List the current user's validated subscriptions."""

    method = "POST"
    path = "v2/iap/subscription"
    response_type = SubscriptionList
    sends_body = True

    limit: int | None = None
    cursor: str | None = None

    def with_limit(self, limit: int) -> Self:
        self.limit = limit
        return self

    def with_cursor(self, cursor: str) -> Self:
        self.cursor = cursor
        return self


class SubscriptionRequest(Request):
    path = "v2/iap/subscription/{product_id}"
    response_type = ValidatedSubscription

    product_id: PathId

    def __init__(self, product_id: str, **data: Any) -> None:
        super().__init__(product_id=product_id, **data)
