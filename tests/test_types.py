from yml_generator.types import (
    OFFER_TYPES,
    BookOffer,
    CustomOffer,
    EventTicketOffer,
    ShopInfo,
    SimpleOffer,
    VendorModelOffer,
)


def test_shop_info_fields_order():
    shop_info = ShopInfo(name="Shop", email="shop@example.com")

    assert shop_info.fields() == [
        ("name", "Shop"),
        ("company", None),
        ("url", None),
        ("platform", None),
        ("version", None),
        ("agency", None),
        ("email", "shop@example.com"),
    ]


def test_simple_offer_has_no_type():
    assert SimpleOffer(id=1).type is None


def test_offer_fields_order():
    offer = SimpleOffer(id=1, url="https://example.com/1", price=10, name="Pen", adult=False)
    names = [name for name, _ in offer.fields()]

    # header, own elements, footer
    assert names.index("url") < names.index("price") < names.index("name")
    assert names.index("vendorCode") < names.index("description")
    assert names[-1] == "cpa"
    assert dict(offer.fields())["adult"] is False


def test_variant_type_tags():
    assert VendorModelOffer(id=1).type == "vendor.model"
    assert BookOffer(id=1).type == "book"
    assert EventTicketOffer(id=1).type == "event-ticket"


def test_book_offer_element_names():
    offer = BookOffer(id=1, isbn="978-5-00", page_extent=320)
    fields = dict(offer.fields())

    assert fields["ISBN"] == "978-5-00"
    assert fields["page_extent"] == 320


def test_custom_offer():
    offer = CustomOffer(
        id=1,
        type_tag="medicine",
        extra_fields=[("name", "Aspirin"), ("vendor", "Bayer")],
    )
    names = [name for name, _ in offer.fields()]

    assert offer.type == "medicine"
    assert names.index("local_delivery_cost") < names.index("name") < names.index("vendor")
    assert names.index("vendor") < names.index("description")


def test_offer_types_registry():
    assert OFFER_TYPES[None] is SimpleOffer

    for offer_type, cls in OFFER_TYPES.items():
        assert cls(id=1).type == offer_type
