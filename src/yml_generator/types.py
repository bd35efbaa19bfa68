from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, ClassVar, List, Tuple

# (element name, value), `None` values are not emitted
Field = Tuple[str, Any]


@dataclass
class ShopInfo:
    name: str | None = None
    company: str | None = None
    url: str | None = None
    platform: str | None = None
    version: str | None = None
    agency: str | None = None
    email: str | None = None

    def fields(self) -> List[Field]:
        return [
            ("name", self.name),
            ("company", self.company),
            ("url", self.url),
            ("platform", self.platform),
            ("version", self.version),
            ("agency", self.agency),
            ("email", self.email),
        ]


@dataclass
class Currency:
    id: str
    rate: str | float | Decimal


@dataclass
class Category:
    id: int | str
    name: str
    parent_id: int | str | None = None


@dataclass
class OfferParam:
    name: str
    value: Any
    unit: str | None = None


@dataclass
class Offer:
    """
    Common part of all offers.

    Subclasses set `TYPE` (the `type` attribute of <offer>) and
    return their own elements from `_type_fields`, which are placed
    between the common header and footer elements.
    """

    TYPE: ClassVar[str | None] = None

    id: int | str
    available: bool = True

    url: str | None = None
    price: Any = None
    oldprice: Any = None
    currency_id: str | None = None
    category_id: int | str | None = None
    market_category: str | None = None
    pictures: List[str] = field(default_factory=list)
    store: bool | None = None
    pickup: bool | None = None
    delivery: bool | None = None
    local_delivery_cost: Any = None

    description: str | None = None
    sales_notes: str | None = None
    manufacturer_warranty: bool | None = None
    country_of_origin: str | None = None
    downloadable: bool | None = None
    adult: bool | None = None
    barcodes: List[str] = field(default_factory=list)
    cpa: int | None = None

    params: List[OfferParam] = field(default_factory=list)

    @property
    def type(self) -> str | None:
        return self.TYPE

    def fields(self) -> List[Field]:
        """Ordered elements of <offer>, without params."""
        return self._header_fields() + self._type_fields() + self._footer_fields()

    def _header_fields(self) -> List[Field]:
        return [
            ("url", self.url),
            ("price", self.price),
            ("oldprice", self.oldprice),
            ("currencyId", self.currency_id),
            ("categoryId", self.category_id),
            ("market_category", self.market_category),
            ("picture", self.pictures),
            ("store", self.store),
            ("pickup", self.pickup),
            ("delivery", self.delivery),
            ("local_delivery_cost", self.local_delivery_cost),
        ]

    def _type_fields(self) -> List[Field]:
        return []

    def _footer_fields(self) -> List[Field]:
        return [
            ("description", self.description),
            ("sales_notes", self.sales_notes),
            ("manufacturer_warranty", self.manufacturer_warranty),
            ("country_of_origin", self.country_of_origin),
            ("downloadable", self.downloadable),
            ("adult", self.adult),
            ("barcode", self.barcodes),
            ("cpa", self.cpa),
        ]


@dataclass
class SimpleOffer(Offer):
    name: str | None = None
    vendor: str | None = None
    vendor_code: str | None = None

    def _type_fields(self) -> List[Field]:
        return [
            ("name", self.name),
            ("vendor", self.vendor),
            ("vendorCode", self.vendor_code),
        ]


@dataclass
class VendorModelOffer(Offer):
    TYPE: ClassVar[str | None] = "vendor.model"

    type_prefix: str | None = None
    vendor: str | None = None
    vendor_code: str | None = None
    model: str | None = None

    def _type_fields(self) -> List[Field]:
        return [
            ("typePrefix", self.type_prefix),
            ("vendor", self.vendor),
            ("vendorCode", self.vendor_code),
            ("model", self.model),
        ]


@dataclass
class BookOffer(Offer):
    TYPE: ClassVar[str | None] = "book"

    author: str | None = None
    name: str | None = None
    publisher: str | None = None
    series: str | None = None
    year: int | None = None
    isbn: str | None = None
    volume: int | None = None
    part: int | None = None
    language: str | None = None
    binding: str | None = None
    page_extent: int | None = None
    table_of_contents: str | None = None

    def _type_fields(self) -> List[Field]:
        return [
            ("author", self.author),
            ("name", self.name),
            ("publisher", self.publisher),
            ("series", self.series),
            ("year", self.year),
            ("ISBN", self.isbn),
            ("volume", self.volume),
            ("part", self.part),
            ("language", self.language),
            ("binding", self.binding),
            ("page_extent", self.page_extent),
            ("table_of_contents", self.table_of_contents),
        ]


@dataclass
class AudiobookOffer(Offer):
    TYPE: ClassVar[str | None] = "audiobook"

    author: str | None = None
    name: str | None = None
    publisher: str | None = None
    series: str | None = None
    year: int | None = None
    isbn: str | None = None
    volume: int | None = None
    part: int | None = None
    language: str | None = None
    table_of_contents: str | None = None
    performed_by: str | None = None
    performance_type: str | None = None
    storage: str | None = None
    format: str | None = None
    recording_length: str | None = None

    def _type_fields(self) -> List[Field]:
        return [
            ("author", self.author),
            ("name", self.name),
            ("publisher", self.publisher),
            ("series", self.series),
            ("year", self.year),
            ("ISBN", self.isbn),
            ("volume", self.volume),
            ("part", self.part),
            ("language", self.language),
            ("table_of_contents", self.table_of_contents),
            ("performed_by", self.performed_by),
            ("performance_type", self.performance_type),
            ("storage", self.storage),
            ("format", self.format),
            ("recording_length", self.recording_length),
        ]


@dataclass
class ArtistTitleOffer(Offer):
    TYPE: ClassVar[str | None] = "artist.title"

    artist: str | None = None
    title: str | None = None
    year: int | None = None
    media: str | None = None
    starring: str | None = None
    director: str | None = None
    original_name: str | None = None
    country: str | None = None

    def _type_fields(self) -> List[Field]:
        return [
            ("artist", self.artist),
            ("title", self.title),
            ("year", self.year),
            ("media", self.media),
            ("starring", self.starring),
            ("director", self.director),
            ("originalName", self.original_name),
            ("country", self.country),
        ]


@dataclass
class TourOffer(Offer):
    TYPE: ClassVar[str | None] = "tour"

    world_region: str | None = None
    country: str | None = None
    region: str | None = None
    days: int | None = None
    data_tour: List[str] = field(default_factory=list)
    name: str | None = None
    hotel_stars: str | None = None
    room: str | None = None
    meal: str | None = None
    included: str | None = None
    transport: str | None = None

    def _type_fields(self) -> List[Field]:
        return [
            ("worldRegion", self.world_region),
            ("country", self.country),
            ("region", self.region),
            ("days", self.days),
            ("dataTour", self.data_tour),
            ("name", self.name),
            ("hotel_stars", self.hotel_stars),
            ("room", self.room),
            ("meal", self.meal),
            ("included", self.included),
            ("transport", self.transport),
        ]


@dataclass
class EventTicketOffer(Offer):
    TYPE: ClassVar[str | None] = "event-ticket"

    name: str | None = None
    place: str | None = None
    hall: str | None = None
    hall_part: str | None = None
    date: str | None = None
    is_premiere: bool | None = None
    is_kids: bool | None = None

    def _type_fields(self) -> List[Field]:
        return [
            ("name", self.name),
            ("place", self.place),
            ("hall", self.hall),
            ("hall_part", self.hall_part),
            ("date", self.date),
            ("is_premiere", self.is_premiere),
            ("is_kids", self.is_kids),
        ]


@dataclass
class CustomOffer(Offer):
    """Offer with a caller-defined type tag and elements."""

    type_tag: str | None = None
    extra_fields: List[Field] = field(default_factory=list)

    @property
    def type(self) -> str | None:
        return self.type_tag

    def _type_fields(self) -> List[Field]:
        return list(self.extra_fields)


# `type` attribute -> offer class, used when loading catalogs
OFFER_TYPES = {
    None: SimpleOffer,
    VendorModelOffer.TYPE: VendorModelOffer,
    BookOffer.TYPE: BookOffer,
    AudiobookOffer.TYPE: AudiobookOffer,
    ArtistTitleOffer.TYPE: ArtistTitleOffer,
    TourOffer.TYPE: TourOffer,
    EventTicketOffer.TYPE: EventTicketOffer,
}
