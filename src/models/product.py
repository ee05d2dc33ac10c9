"""Product model."""

from sqlalchemy import JSON, Column, Integer, Numeric, String, Text

from src.database import Base


class Product(Base):
    """Catalog entry that orders are priced against."""

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    # Raw image bytes or references, as sent by the client
    raw_image_arr = Column("rawimagearr", JSON, nullable=True)
    description = Column(Text, nullable=True)
    price = Column(Numeric(12, 2), nullable=False)
