"""Struct drills: plain records, tuple records, unit records and packages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

_MIN_WEIGHT_GRAMS = 10


@dataclass
class ColorClassic:
    red: int
    green: int
    blue: int


class ColorTuple(NamedTuple):
    red: int
    green: int
    blue: int


@dataclass(frozen=True, repr=False)
class UnitLike:
    """A record with no fields."""

    def __repr__(self) -> str:
        return "UnitLike"


@dataclass
class Order:
    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


@dataclass
class Package:
    """A parcel sent between two countries."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams < _MIN_WEIGHT_GRAMS:
            raise ValueError("Can not ship a package with weight below 10 grams.")

    def is_international(self) -> bool:
        return self.recipient_country != self.sender_country

    def get_fees(self, cents_per_gram: int) -> int:
        return self.weight_in_grams * cents_per_gram