"""Catalog models read by the search document projector."""
from sqlalchemy import Column, Integer, String, Text, Boolean, Float, Date, DateTime, JSON, ForeignKey, Table
from sqlalchemy.orm import declarative_base, relationship

# Base class for models
Base = declarative_base()


product_channels = Table(
    "product_channels",
    Base.metadata,
    Column("product_id", Integer, ForeignKey("products.id"), primary_key=True),
    Column("channel_id", Integer, ForeignKey("channels.id"), primary_key=True),
)

product_variant_option_values = Table(
    "product_variant_option_values",
    Base.metadata,
    Column("variant_id", Integer, ForeignKey("product_variants.id"), primary_key=True),
    Column("option_value_id", Integer, ForeignKey("product_option_values.id"), primary_key=True),
)


def _is_empty(value):
    # False and 0 are real values
    return value is None or value == "" or value == []


class TranslatableMixin:
    """
    Resolves translations against a caller-selected locale.

    The current and fallback locales are not persisted: whoever loads the
    entity decides which locale is active for the request.
    """

    current_locale = None
    fallback_locale = None

    def set_current_locale(self, locale):
        self.current_locale = locale

    def set_fallback_locale(self, locale):
        self.fallback_locale = locale

    def get_translation(self, locale=None):
        """
        Get the translation for a locale.

        Args:
            locale: Requested locale (defaults to the current locale)

        Returns:
            The translation in the requested locale, else in the fallback
            locale, else None
        """
        for code in (locale or self.current_locale, self.fallback_locale):
            if code is None:
                continue
            for translation in self.translations:
                if translation.locale == code:
                    return translation
        return None


class Stockable:
    """Inventory fields of a stock-tracked item."""

    on_hand = Column(Integer, default=0, nullable=False)
    on_hold = Column(Integer, default=0, nullable=False)
    tracked = Column(Boolean, default=False, nullable=False)


class Searchable:
    """Search capability flags of an attribute."""

    searchable = Column(Boolean, default=True, nullable=False, index=True)
    filterable = Column(Boolean, default=False, nullable=False, index=True)


class Product(TranslatableMixin, Base):
    """Product aggregate: translations, media, taxonomy, channels, variants and attributes."""

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String(255), unique=True, nullable=True, index=True)
    enabled = Column(Boolean, default=True, nullable=False, index=True)
    main_taxon_id = Column(Integer, ForeignKey("taxons.id"), nullable=True)

    translations = relationship("ProductTranslation", back_populates="product", cascade="all, delete-orphan")
    images = relationship("ProductImage", back_populates="product", order_by="ProductImage.position")
    main_taxon = relationship("Taxon", foreign_keys="Product.main_taxon_id")
    product_taxons = relationship("ProductTaxon", back_populates="product", order_by="ProductTaxon.position")
    channels = relationship("Channel", secondary=product_channels)
    variants = relationship("ProductVariant", back_populates="product", order_by="ProductVariant.position")
    attributes = relationship("ProductAttributeValue", back_populates="product", cascade="all, delete-orphan")

    @property
    def name(self):
        translation = self.get_translation()
        return translation.name if translation else None

    @property
    def slug(self):
        translation = self.get_translation()
        return translation.slug if translation else None

    @property
    def description(self):
        translation = self.get_translation()
        return translation.description if translation else None

    def get_attributes_by_locale(self, locale, fallback_locale, base_locale=None):
        """
        Get the attribute values visible in a locale.

        Values localized in the base locale, and values that are not
        localized at all, are kept. Each one is then replaced by the
        non-empty value with the same code in ``locale`` or, failing that, in
        the fallback locale. When no distinct base locale is given the
        fallback locale acts as the base.

        Args:
            locale: Locale the values are wanted in
            fallback_locale: Locale used when a value is missing in ``locale``
            base_locale: Locale selecting which values are candidates

        Returns:
            List of ProductAttributeValue objects
        """
        if base_locale is None or base_locale == fallback_locale:
            base_locale = fallback_locale
            fallback_locale = None

        candidates = [
            attribute_value for attribute_value in self.attributes
            if attribute_value.locale_code is None or attribute_value.locale_code == base_locale
        ]
        return [
            self._get_attribute_in_locale(attribute_value, locale, fallback_locale)
            for attribute_value in candidates
        ]

    def get_attribute_by_code_and_locale(self, code, locale):
        for attribute_value in self.attributes:
            if attribute_value.code == code and attribute_value.locale_code == locale:
                return attribute_value
        return None

    def _get_attribute_in_locale(self, attribute_value, locale, fallback_locale):
        for code in (locale, fallback_locale):
            if code is None:
                continue
            localized = self.get_attribute_by_code_and_locale(attribute_value.code, code)
            if localized is not None and not _is_empty(localized.value):
                return localized
        return attribute_value

    def __repr__(self):
        return f"<Product(id={self.id}, code='{self.code}')>"


class ProductTranslation(Base):
    """Locale-specific texts of a product."""

    __tablename__ = "product_translations"

    id = Column(Integer, primary_key=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)
    locale = Column(String(12), nullable=False, index=True)
    name = Column(String(255), nullable=True)
    slug = Column(String(255), nullable=True, index=True)
    description = Column(Text, nullable=True)

    product = relationship("Product", back_populates="translations")


class ProductImage(Base):
    __tablename__ = "product_images"

    id = Column(Integer, primary_key=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)
    type = Column(String(100), nullable=True)
    path = Column(String(500), nullable=False)
    position = Column(Integer, default=0, nullable=False)

    product = relationship("Product", back_populates="images")


class Taxon(Base):
    """Node of the catalog taxonomy (category tree)."""

    __tablename__ = "taxons"

    id = Column(Integer, primary_key=True)
    code = Column(String(255), unique=True, nullable=False, index=True)
    name = Column(String(255), nullable=True)
    slug = Column(String(255), nullable=True)
    position = Column(Integer, default=0, nullable=False)
    level = Column(Integer, default=0, nullable=False)

    def __repr__(self):
        return f"<Taxon(id={self.id}, code='{self.code}')>"


class ProductTaxon(Base):
    """Association of a product with a taxon, positioned within that taxon."""

    __tablename__ = "product_taxons"

    id = Column(Integer, primary_key=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)
    taxon_id = Column(Integer, ForeignKey("taxons.id"), nullable=False, index=True)
    position = Column(Integer, default=0, nullable=False)

    product = relationship("Product", back_populates="product_taxons")
    taxon = relationship("Taxon")


class Channel(Base):
    """Sales channel a product is published in."""

    __tablename__ = "channels"

    id = Column(Integer, primary_key=True)
    code = Column(String(255), unique=True, nullable=False, index=True)
    name = Column(String(255), nullable=True)
    hostname = Column(String(255), nullable=True)
    enabled = Column(Boolean, default=True, nullable=False)


class ProductVariant(Stockable, Base):
    """Purchasable variant of a product; inventory is tracked through Stockable."""

    __tablename__ = "product_variants"

    id = Column(Integer, primary_key=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)
    code = Column(String(255), unique=True, nullable=True, index=True)
    enabled = Column(Boolean, default=True, nullable=False)
    position = Column(Integer, default=0, nullable=False)

    product = relationship("Product", back_populates="variants")
    option_values = relationship("ProductOptionValue", secondary=product_variant_option_values)

    def __repr__(self):
        return f"<ProductVariant(id={self.id}, code='{self.code}')>"


class ProductOption(Base):
    """Variant axis, e.g. size or color."""

    __tablename__ = "product_options"

    id = Column(Integer, primary_key=True)
    code = Column(String(255), unique=True, nullable=False, index=True)
    name = Column(String(255), nullable=True)

    values = relationship("ProductOptionValue", back_populates="option")


class ProductOptionValue(TranslatableMixin, Base):
    __tablename__ = "product_option_values"

    id = Column(Integer, primary_key=True)
    option_id = Column(Integer, ForeignKey("product_options.id"), nullable=False, index=True)
    code = Column(String(255), unique=True, nullable=False, index=True)

    option = relationship("ProductOption", back_populates="values")
    translations = relationship(
        "ProductOptionValueTranslation", back_populates="option_value", cascade="all, delete-orphan"
    )

    @property
    def option_code(self):
        return self.option.code if self.option else None

    @property
    def name(self):
        return self.option.name if self.option else None

    @property
    def value(self):
        translation = self.get_translation()
        return translation.value if translation else None


class ProductOptionValueTranslation(Base):
    __tablename__ = "product_option_value_translations"

    id = Column(Integer, primary_key=True)
    option_value_id = Column(Integer, ForeignKey("product_option_values.id"), nullable=False, index=True)
    locale = Column(String(12), nullable=False)
    value = Column(String(255), nullable=True)

    option_value = relationship("ProductOptionValue", back_populates="translations")


class ProductAttribute(Searchable, Base):
    """Attribute definition; storage_type selects the column holding its values."""

    __tablename__ = "product_attributes"

    id = Column(Integer, primary_key=True)
    code = Column(String(255), unique=True, nullable=False, index=True)
    name = Column(String(255), nullable=True)
    storage_type = Column(String(20), default="text", nullable=False)
    translatable = Column(Boolean, default=True, nullable=False)

    def __repr__(self):
        return f"<ProductAttribute(code='{self.code}', storage_type='{self.storage_type}')>"


class ProductAttributeValue(Base):
    """Value of an attribute for a product, optionally localized."""

    __tablename__ = "product_attribute_values"

    STORAGE_COLUMNS = {
        "text": "text_value",
        "boolean": "boolean_value",
        "integer": "integer_value",
        "float": "float_value",
        "datetime": "datetime_value",
        "date": "date_value",
        "json": "json_value",
    }

    id = Column(Integer, primary_key=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)
    attribute_id = Column(Integer, ForeignKey("product_attributes.id"), nullable=False, index=True)
    locale_code = Column(String(12), nullable=True, index=True)  # NULL for non-translatable attributes

    # One storage column per attribute storage type
    text_value = Column(Text, nullable=True)
    boolean_value = Column(Boolean, nullable=True)
    integer_value = Column(Integer, nullable=True)
    float_value = Column(Float, nullable=True)
    datetime_value = Column(DateTime, nullable=True)
    date_value = Column(Date, nullable=True)
    json_value = Column(JSON, nullable=True)  # select options, lists

    product = relationship("Product", back_populates="attributes")
    attribute = relationship("ProductAttribute")

    @property
    def code(self):
        return self.attribute.code if self.attribute else None

    @property
    def name(self):
        return self.attribute.name if self.attribute else None

    @property
    def value(self):
        if self.attribute is None:
            return None
        return getattr(self, self._storage_column())

    @value.setter
    def value(self, value):
        setattr(self, self._storage_column(), value)

    def _storage_column(self):
        storage_type = self.attribute.storage_type or "text"
        if storage_type not in self.STORAGE_COLUMNS:
            raise ValueError(f"Unsupported attribute storage type: {storage_type}")
        return self.STORAGE_COLUMNS[storage_type]

    def __repr__(self):
        return f"<ProductAttributeValue(code='{self.code}', locale='{self.locale_code}')>"
