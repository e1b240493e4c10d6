"""Defines the request and response models for the pricing and inventory APIs."""

from datetime import datetime
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PricingRequestProduct(ApiModel):
    product_reference: str
    number_of_items: int


class PricingRequest(ApiModel):
    cookie_id: str
    ip: str | None = None
    date_from: datetime
    date_to: datetime
    timezone: str
    products: list[PricingRequestProduct]
    times: list[str] | None = None


class PricingResponseProduct(ApiModel):
    product_reference: str
    number_of_items: int
    price: str


class PricingResponseItem(ApiModel):
    price_date: str
    price_time: str | None = None
    products: list[PricingResponseProduct]


class PricingResponse(ApiModel):
    prices: list[PricingResponseItem]


class ProductPricing(ApiModel):
    min_accepted_price: str | None = None
    max_accepted_price: str
    average_target_price: str | None = None
    box_office_price: str | None = None


class ProductCreatedPayload(ApiModel):
    product_reference: str
    name: str
    availability: int | None = None
    pricing: ProductPricing


class ProductPricingChangedPayload(ApiModel):
    product_reference: str
    pricing: ProductPricing


class ProductRemovedPayload(ApiModel):
    product_reference: str


class ProductAvailabilityChangedPayload(ApiModel):
    product_reference: str
    event_date: str
    start_time: str | None = None
    availability: int


class ProductCreatedEvent(ApiModel):
    type: Literal["ProductCreated"] = "ProductCreated"
    payload: ProductCreatedPayload


class ProductPricingChangedEvent(ApiModel):
    type: Literal["ProductPricingChanged"] = "ProductPricingChanged"
    payload: ProductPricingChangedPayload


class ProductRemovedEvent(ApiModel):
    type: Literal["ProductRemoved"] = "ProductRemoved"
    payload: ProductRemovedPayload


class ProductAvailabilityChangedEvent(ApiModel):
    type: Literal["ProductAvailabilityChanged"] = "ProductAvailabilityChanged"
    payload: ProductAvailabilityChangedPayload


InventoryEvent = Annotated[
    Union[
        ProductCreatedEvent,
        ProductPricingChangedEvent,
        ProductRemovedEvent,
        ProductAvailabilityChangedEvent,
    ],
    Field(discriminator="type"),
]
