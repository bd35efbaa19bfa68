import io
from datetime import datetime

import pytest

from yml_generator.configurator import Settings
from yml_generator.generator import Generator
from yml_generator.types import Category, Currency, OfferParam, ShopInfo, SimpleOffer

FIXED_NOW = datetime(2024, 1, 2, 3, 4, 5)


@pytest.fixture
def shop_info():
    return ShopInfo(name="Test", company="Test LLC", url="https://example.com")


@pytest.fixture
def currencies():
    return [Currency(id="RUR", rate="30.1")]


@pytest.fixture
def categories():
    return [Category(id=1, name="Books")]


@pytest.fixture
def offers():
    return [
        SimpleOffer(
            id=100,
            available=True,
            price=500,
            params=[OfferParam(name="color", value="red", unit="")],
        )
    ]


@pytest.fixture
def render():
    """Generates feed into memory & returns it as a string"""

    def _render(shop_info, currencies, categories, offers, **options):
        stream = io.BytesIO()
        generator = Generator(Settings(**options), stream=stream, now=lambda: FIXED_NOW)
        generator.generate(shop_info, currencies, categories, offers)
        return stream.getvalue().decode(options.get("encoding", "UTF-8"))

    return _render
