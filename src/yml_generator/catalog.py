import json
import logging
import typing
from dataclasses import dataclass, field

from yml_generator.exceptions import CatalogError
from yml_generator.types import (
    OFFER_TYPES,
    Category,
    Currency,
    Offer,
    OfferParam,
    ShopInfo,
)

logger = logging.getLogger("catalog")


@dataclass
class Catalog:
    shop_info: ShopInfo
    currencies: typing.List[Currency] = field(default_factory=list)
    categories: typing.List[Category] = field(default_factory=list)
    offers: typing.List[Offer] = field(default_factory=list)


def _build(cls, raw: dict, what: str):
    """Constructs dataclass `cls` from `raw` dictionary"""
    if not isinstance(raw, dict):
        raise CatalogError(f"{what} must be an object, got {raw!r}")

    try:
        return cls(**raw)
    except TypeError as exc:
        raise CatalogError(f"Bad {what}: {exc}") from exc


def _items(raw: dict, key: str) -> list:
    """Returns `raw[key]` list, missing key is an empty list"""
    items = raw.get(key, [])

    if not isinstance(items, list):
        raise CatalogError(f"{key} must be a list, got {items!r}")

    return items


def parse_offer(raw: dict) -> Offer:
    """Builds `Offer` subclass, chosen by `type` key"""
    if not isinstance(raw, dict):
        raise CatalogError(f"offer must be an object, got {raw!r}")

    raw = dict(raw)
    offer_type = raw.pop("type", None)

    if offer_type not in OFFER_TYPES:
        raise CatalogError(f"Unknown offer type: {offer_type!r}")

    if not isinstance(raw.get("available", True), bool):
        raise CatalogError(
            f"available must be true or false, got {raw['available']!r}"
        )

    raw["params"] = [
        _build(OfferParam, param, "param") for param in _items(raw, "params")
    ]

    return _build(OFFER_TYPES[offer_type], raw, "offer")


def parse_catalog(raw: dict) -> Catalog:
    """Builds `Catalog` from parsed JSON"""
    if not isinstance(raw, dict):
        raise CatalogError("Catalog must be a JSON object.")

    return Catalog(
        shop_info=_build(ShopInfo, raw.get("shop", {}), "shop"),
        currencies=[
            _build(Currency, currency, "currency")
            for currency in _items(raw, "currencies")
        ],
        categories=[
            _build(Category, category, "category")
            for category in _items(raw, "categories")
        ],
        offers=[parse_offer(offer) for offer in _items(raw, "offers")],
    )


def load_catalog(path: str) -> Catalog:
    """Reads catalog from JSON file"""
    logger.info("Loading catalog from %s", path)

    try:
        with open(path, encoding="utf-8") as file:
            raw = json.load(file)
    except (OSError, json.JSONDecodeError) as exc:
        raise CatalogError(f"Can't read catalog {path}: {exc}") from exc

    return parse_catalog(raw)
