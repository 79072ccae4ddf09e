# tests/conftest.py
import pytest

from catalog_search.database.catalog_models import Channel, ProductImage, ProductOption, ProductTaxon, Taxon
from catalog_search.indexing.mappers import DocumentMapper
from catalog_search.indexing.projector import ProductDocumentProjector
from tests.factories import (
    RecordingChecker,
    make_attribute,
    make_attribute_value,
    make_option_value,
    make_product,
    make_variant,
)


@pytest.fixture
def checker():
    return RecordingChecker(result=True)


@pytest.fixture
def projector(checker):
    return ProductDocumentProjector(DocumentMapper(), checker)


@pytest.fixture
def size_option():
    return ProductOption(code="size", name="Size")


@pytest.fixture
def color_option():
    return ProductOption(code="color", name="Color")


@pytest.fixture
def full_product(size_option, color_option):
    """Product with media, taxons, channels, attributes and two variants."""
    shirts = Taxon(code="t_shirts", name="T-Shirts", slug="t-shirts", position=2, level=1)
    summer = Taxon(code="summer", name="Summer", slug="summer", position=5, level=1)

    color = make_attribute("color", searchable=True)
    material = make_attribute("material", searchable=False, filterable=True)
    internal_note = make_attribute("internal_note", searchable=False, filterable=False)
    organic = make_attribute("organic", storage_type="boolean", filterable=True)

    size_m = make_option_value(size_option, "size_m", {"en_US": "Medium", "fr_FR": "Moyen"})
    size_l = make_option_value(size_option, "size_l", {"en_US": "Large", "fr_FR": "Grand"})
    white = make_option_value(color_option, "white", {"en_US": "White", "fr_FR": "Blanc"})

    return make_product(
        main_taxon=shirts,
        images=[
            ProductImage(type="main", path="ab/cd/main.jpg", position=0),
            ProductImage(type="thumbnail", path="ab/cd/thumb.jpg", position=1),
        ],
        product_taxons=[
            ProductTaxon(taxon=shirts, position=0),
            ProductTaxon(taxon=summer, position=3),
        ],
        channels=[
            Channel(code="WEB_US", name="Web US", hostname="shop.example.com", enabled=True),
            Channel(code="WEB_FR", name="Web FR", hostname="shop.example.fr", enabled=True),
        ],
        attributes=[
            make_attribute_value(color, "red"),
            make_attribute_value(color, "rouge", locale_code="fr_FR"),
            make_attribute_value(material, "cotton"),
            make_attribute_value(internal_note, "do not restock"),
            make_attribute_value(organic, True, locale_code=None),
        ],
        variants=[
            make_variant("TSHIRT_M_WHITE", [size_m, white], tracked=True, on_hand=3),
            make_variant("TSHIRT_L_WHITE", [size_l, white], enabled=False, tracked=True),
        ],
    )
