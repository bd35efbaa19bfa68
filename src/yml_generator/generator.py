import codecs
import logging
import os
import sys
import tempfile
import typing
from datetime import datetime

from yml_generator.configurator import Settings
from yml_generator.exceptions import GenerationError
from yml_generator.types import Category, Currency, Offer, OfferParam, ShopInfo
from yml_generator.writer import StreamWriter

DATE_FORMAT = "%Y-%m-%d %H:%M"
TMP_PREFIX = "YMLGenerator"


def format_value(value) -> str:
    """Booleans are `true`/`false` in YML, everything else is `str()`."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class Generator:
    """
    Writes YML (Yandex Market Language) feed.

    With `output_file` the feed is written to a temporary file
    which replaces `output_file` only after the whole document is done.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        stream: typing.BinaryIO | None = None,
        now: typing.Callable[[], datetime] = datetime.now,
    ):
        """
        Initializes `self` & opens the output
        :param settings: A `Settings`, defaults are used if `None`
        :param stream: An open binary stream to write to instead of a file/stdout
        :param now: Returns the `date` of the catalog
        """
        self._settings = settings if settings is not None else Settings()
        self._logger = logging.getLogger("generator")
        self._now = now
        self._tmp_file: str | None = None
        self._own_stream = False
        self._used = False

        try:
            if stream is not None:
                self._stream = stream
            elif self._settings.output_file is not None:
                self._stream = self._open_tmp_file()
            else:
                self._stream = self._open_stdout()
        except (OSError, LookupError) as exc:
            self.close()
            raise GenerationError(f"Can't open output: {exc}") from exc

        self._writer = StreamWriter(self._stream, self._settings.indent_string)

    def _open_tmp_file(self) -> typing.BinaryIO:
        # Unknown encoding must fail before the file is created
        codecs.lookup(self._settings.encoding)

        fd, self._tmp_file = tempfile.mkstemp(
            prefix=TMP_PREFIX, suffix=".xml", dir=self._settings.tmp_dir
        )
        os.close(fd)
        self._logger.debug("Writing to temporary file %s", self._tmp_file)

        stream = open(self._tmp_file, "wb")
        self._own_stream = True
        return stream

    def _open_stdout(self) -> typing.BinaryIO:
        codecs.lookup(self._settings.encoding)

        # Text written before the feed goes first
        sys.stdout.flush()
        return sys.stdout.buffer

    def _remove_tmp_file(self):
        if self._tmp_file is not None and os.path.exists(self._tmp_file):
            os.unlink(self._tmp_file)
            self._logger.debug("Removed temporary file %s", self._tmp_file)
        self._tmp_file = None

    def _release_stream(self):
        if self._own_stream:
            self._stream.close()
            self._own_stream = False

    def close(self):
        """Releases the output, an unpublished temporary file is removed"""
        self._release_stream()
        self._remove_tmp_file()

    def generate(
        self,
        shop_info: ShopInfo,
        currencies: typing.Sequence[Currency],
        categories: typing.Sequence[Category],
        offers: typing.Sequence[Offer],
    ) -> bool:
        """
        Writes the whole feed & publishes it to `output_file`
        :param shop_info: A `ShopInfo`
        :param currencies: `Currency` list
        :param categories: `Category` list
        :param offers: `Offer` list
        :return: `True`, errors are raised as `GenerationError`
        """
        try:
            if self._used:
                raise RuntimeError("Generator can be used only once.")
            self._used = True

            self._logger.info(
                "Generating feed: %d currencies, %d categories, %d offers",
                len(currencies),
                len(categories),
                len(offers),
            )

            self.add_header()

            self.add_shop_info(shop_info)
            self.add_currencies(currencies)
            self.add_categories(categories)
            self.add_offers(offers)

            self.add_footer()

            self._publish()
        except Exception as exc:
            self.close()
            raise GenerationError(f"Problem with generating YML file: {exc}") from exc

        self._release_stream()
        return True

    def _publish(self):
        output_file = self._settings.output_file

        if self._tmp_file is None or output_file is None:
            return

        self._release_stream()
        os.replace(self._tmp_file, output_file)
        self._tmp_file = None
        self._logger.info("Feed is saved to %s", output_file)

    def _accepts(self, item, expected: type) -> bool:
        """Checks the type of collection's item, according to `strict` policy"""
        if isinstance(item, expected):
            return True

        if self._settings.strict:
            raise TypeError(f"Expected {expected.__name__}, got {type(item).__name__}")

        self._logger.warning("Skipped %r (not a %s)", item, expected.__name__)
        return False

    def add_header(self):
        self._writer.start_document("1.0", self._settings.encoding)
        self._writer.start_element("yml_catalog")
        self._writer.write_attribute("date", self._now().strftime(DATE_FORMAT))
        self._writer.start_element("shop")

    def add_footer(self):
        # </shop> & </yml_catalog>
        self._writer.end_element(full=True)
        self._writer.end_element(full=True)
        self._writer.end_document()

    def add_shop_info(self, shop_info: ShopInfo):
        """Adds <shop> children, `None` values are omitted"""
        if not self._accepts(shop_info, ShopInfo):
            return

        for name, value in shop_info.fields():
            if value is not None:
                self._writer.write_element(name, value)

    def add_currency(self, currency: Currency):
        self._writer.start_element("currency")
        self._writer.write_attribute("id", currency.id)
        self._writer.write_attribute("rate", currency.rate)
        self._writer.end_element()

    def add_category(self, category: Category):
        self._writer.start_element("category")
        self._writer.write_attribute("id", category.id)

        if category.parent_id is not None:
            self._writer.write_attribute("parentId", category.parent_id)

        self._writer.write_text(category.name)
        self._writer.end_element(full=True)

    def add_param(self, param: OfferParam):
        self._writer.start_element("param")
        self._writer.write_attribute("name", param.name)

        # Empty unit is the same as no unit
        if param.unit:
            self._writer.write_attribute("unit", param.unit)

        self._writer.write_text(param.value)
        self._writer.end_element()

    def add_offer(self, offer: Offer):
        self._writer.start_element("offer")
        self._writer.write_attribute("id", offer.id)
        self._writer.write_attribute("available", format_value(bool(offer.available)))

        if offer.type is not None:
            self._writer.write_attribute("type", offer.type)

        for name, value in offer.fields():
            # Lists are written as repeated elements
            values = value if isinstance(value, (list, tuple)) else [value]

            for item in values:
                if item is not None:
                    self._writer.write_element(name, format_value(item))

        for param in offer.params:
            if self._accepts(param, OfferParam):
                self.add_param(param)

        self._writer.end_element(full=True)

    def add_currencies(self, currencies: typing.Sequence[Currency]):
        self._writer.start_element("currencies")

        for currency in currencies:
            if self._accepts(currency, Currency):
                self.add_currency(currency)

        self._writer.end_element(full=True)

    def add_categories(self, categories: typing.Sequence[Category]):
        self._writer.start_element("categories")

        for category in categories:
            if self._accepts(category, Category):
                self.add_category(category)

        self._writer.end_element(full=True)

    def add_offers(self, offers: typing.Sequence[Offer]):
        self._writer.start_element("offers")

        for offer in offers:
            if self._accepts(offer, Offer):
                self.add_offer(offer)

        self._writer.end_element(full=True)
