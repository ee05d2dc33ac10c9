"""Order model."""

from sqlalchemy import Column, Integer, Numeric

from src.database import Base


class Order(Base):
    """Immutable record of a product purchase."""

    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)
    # Plain reference: the product must exist when ordering, not afterwards
    product_id = Column(Integer, nullable=False, index=True)
    quantity = Column(Integer, nullable=False)
    # product.price * quantity at the time the order was placed
    total_price = Column(Numeric(12, 2), nullable=False)
