"""Builders for transient catalog entities used across the tests."""

from catalog_search.database.catalog_models import (
    Product,
    ProductAttribute,
    ProductAttributeValue,
    ProductOptionValue,
    ProductOptionValueTranslation,
    ProductTranslation,
    ProductVariant,
    Taxon,
)


class RecordingChecker:
    """Availability checker returning a fixed answer and remembering what it was asked."""

    def __init__(self, result=True):
        self.result = result
        self.checked = []

    def is_stock_available(self, stockable):
        self.checked.append(stockable)
        return self.result


class CatalogStub:
    """Plain object for catalog entities without the ORM capabilities (e.g. non-stockable)."""

    def __init__(self, **fields):
        self.__dict__.update(fields)


class StubProduct(CatalogStub):
    """Duck-typed product accepting stub variants and attribute values."""

    def __init__(self, locale="en_US", attribute_values=(), **fields):
        fields.setdefault("id", 7)
        fields.setdefault("code", "STUB")
        fields.setdefault("enabled", True)
        fields.setdefault("slug", "stub")
        fields.setdefault("name", "Stub")
        fields.setdefault("description", None)
        fields.setdefault("images", [])
        fields.setdefault("main_taxon", Taxon(code="root", name="Root", position=0, level=0))
        fields.setdefault("product_taxons", [])
        fields.setdefault("channels", [])
        fields.setdefault("variants", [])
        super().__init__(**fields)
        self.locale = locale
        self.attribute_values = list(attribute_values)
        self.requested_locales = []

    def get_translation(self, locale=None):
        if self.locale is None:
            return None
        return CatalogStub(locale=self.locale)

    def get_attributes_by_locale(self, locale, fallback_locale, base_locale=None):
        self.requested_locales.append((locale, fallback_locale))
        return self.attribute_values


def make_attribute(code, name=None, storage_type="text", searchable=True, filterable=False):
    return ProductAttribute(
        code=code,
        name=name or code.replace("_", " ").title(),
        storage_type=storage_type,
        translatable=True,
        searchable=searchable,
        filterable=filterable,
    )


def make_attribute_value(attribute, value, locale_code="en_US"):
    attribute_value = ProductAttributeValue(attribute=attribute, locale_code=locale_code)
    attribute_value.value = value
    return attribute_value


def make_option_value(option, code, translations):
    return ProductOptionValue(
        option=option,
        code=code,
        translations=[
            ProductOptionValueTranslation(locale=locale, value=value)
            for locale, value in translations.items()
        ],
    )


def make_variant(code, option_values=(), enabled=True, tracked=False, on_hand=0, on_hold=0):
    return ProductVariant(
        code=code,
        enabled=enabled,
        tracked=tracked,
        on_hand=on_hand,
        on_hold=on_hold,
        option_values=list(option_values),
    )


def make_product(locale="en_US", **fields):
    """Build a transient product with an English and a French translation."""
    fields.setdefault("id", 42)
    fields.setdefault("code", "TSHIRT_BASIC")
    fields.setdefault("enabled", True)
    fields.setdefault("main_taxon", Taxon(code="t_shirts", name="T-Shirts", slug="t-shirts", position=2, level=1))
    fields.setdefault("translations", [
        ProductTranslation(locale="en_US", name="Basic T-Shirt", slug="basic-t-shirt", description="Plain cotton tee"),
        ProductTranslation(locale="fr_FR", name="T-shirt basique", slug="t-shirt-basique", description="Tee en coton"),
    ])
    product = Product(**fields)
    product.set_current_locale(locale)
    return product


