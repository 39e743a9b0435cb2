"""Pydantic models for in-app purchase and subscription validation."""

from datetime import datetime

from pydantic import BaseModel, Field

from nakama_sdk.models.enums import StoreEnvironment, StoreProvider


class ValidatedPurchase(BaseModel):
    user_id: str | None = None
    product_id: str | None = None
    transaction_id: str | None = None
    store: StoreProvider = StoreProvider.APPLE_APP_STORE
    purchase_time: datetime | None = None
    create_time: datetime | None = None
    update_time: datetime | None = None
    refund_time: datetime | None = None
    provider_response: str | None = None
    environment: StoreEnvironment = StoreEnvironment.UNKNOWN
    seen_before: bool = False


class ValidatePurchaseResponse(BaseModel):
    validated_purchases: list[ValidatedPurchase] = Field(default_factory=list)


class ValidatedSubscription(BaseModel):
    user_id: str | None = None
    product_id: str | None = None
    original_transaction_id: str | None = None
    store: StoreProvider = StoreProvider.APPLE_APP_STORE
    purchase_time: datetime | None = None
    create_time: datetime | None = None
    update_time: datetime | None = None
    environment: StoreEnvironment = StoreEnvironment.UNKNOWN
    expiry_time: datetime | None = None
    refund_time: datetime | None = None
    provider_response: str | None = None
    provider_notification: str | None = None
    active: bool = False


class ValidateSubscriptionResponse(BaseModel):
    validated_subscription: ValidatedSubscription | None = None


class SubscriptionList(BaseModel):
    validated_subscriptions: list[ValidatedSubscription] = Field(default_factory=list)
    cursor: str | None = None
    prev_cursor: str | None = None
