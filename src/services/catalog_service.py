"""Catalog service for products and order placement."""

import logging
from decimal import Decimal

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.exceptions import NotFoundError, StorageError, ValidationError
from src.models.order import Order
from src.models.product import Product
from src.schemas.product import ProductCreate, ProductUpdate

logger = logging.getLogger(__name__)

PRODUCT_NOT_FOUND = "Product not found."

# Bounds of orders.quantity (INTEGER) and orders.total_price (NUMERIC(12, 2))
MAX_QUANTITY = 2**31 - 1
MAX_TOTAL_PRICE = Decimal("9999999999.99")


class CatalogService:
    """Service for product and order operations."""

    def __init__(self, db: Session):
        self.db = db

    def list_products(self) -> list[Product]:
        """Return every product in storage order."""
        try:
            return self.db.query(Product).all()
        except SQLAlchemyError as e:
            self._fail("fetching products", e)
            raise StorageError("Failed to fetch products.") from e

    def get_product(self, product_id: int) -> Product:
        try:
            product = self.db.query(Product).filter(Product.id == product_id).first()
        except SQLAlchemyError as e:
            self._fail(f"fetching product {product_id}", e)
            raise StorageError("Failed to fetch product.") from e

        if product is None:
            raise NotFoundError(PRODUCT_NOT_FOUND)
        return product

    def create_product(self, product_data: ProductCreate) -> Product:
        """Persist a new product. Fields are stored as given."""
        product = Product(
            name=product_data.name,
            raw_image_arr=product_data.raw_image_arr,
            description=product_data.description,
            price=product_data.price,
        )
        try:
            self.db.add(product)
            self.db.commit()
            self.db.refresh(product)
        except SQLAlchemyError as e:
            self._fail("adding product", e)
            raise StorageError("Failed to add product.") from e

        logger.info(f"Created product {product.id}")
        return product

    def update_product(self, product_id: int, product_data: ProductUpdate) -> Product:
        """Replace all mutable fields of a product in one commit."""
        try:
            product = self.db.query(Product).filter(Product.id == product_id).first()
            if product is None:
                raise NotFoundError(PRODUCT_NOT_FOUND)

            product.name = product_data.name
            product.raw_image_arr = product_data.raw_image_arr
            product.description = product_data.description
            product.price = product_data.price

            self.db.commit()
            self.db.refresh(product)
        except SQLAlchemyError as e:
            self._fail(f"updating product {product_id}", e)
            raise StorageError("Failed to update product.") from e

        logger.info(f"Updated product {product_id}")
        return product

    def delete_product(self, product_id: int) -> None:
        """Delete a product. Unknown ids are not an error."""
        try:
            self.db.query(Product).filter(Product.id == product_id).delete()
            self.db.commit()
        except SQLAlchemyError as e:
            self._fail(f"deleting product {product_id}", e)
            raise StorageError("Failed to delete product.") from e

        logger.info(f"Deleted product {product_id}")

    def list_orders(self) -> list[Order]:
        try:
            return self.db.query(Order).all()
        except SQLAlchemyError as e:
            self._fail("fetching orders", e)
            raise StorageError("Failed to fetch orders.") from e

    def place_order(self, product_id: int, quantity: int | None) -> Order:
        """Create an order priced from the product row read in the same transaction.

        The product row is locked (``FOR UPDATE``) until the order is
        committed, so a concurrent price change cannot slip in between the
        read and the insert. The caller never supplies a price.
        """
        if quantity is None or quantity <= 0:
            raise ValidationError("Quantity must be a positive integer.")
        if quantity > MAX_QUANTITY:
            raise ValidationError(f"Quantity must not exceed {MAX_QUANTITY}.")

        try:
            product = (
                self.db.query(Product)
                .filter(Product.id == product_id)
                .with_for_update()
                .first()
            )
            if product is None:
                self.db.rollback()
                raise NotFoundError(PRODUCT_NOT_FOUND)

            total_price = product.price * quantity
            if abs(total_price) > MAX_TOTAL_PRICE:
                self.db.rollback()
                raise ValidationError("Order total is too large.")

            order = Order(
                product_id=product.id,
                quantity=quantity,
                total_price=total_price,
            )
            self.db.add(order)
            self.db.commit()
            self.db.refresh(order)
        except SQLAlchemyError as e:
            self._fail(f"placing order for product {product_id}", e)
            raise StorageError("Failed to place order.") from e

        logger.info(
            f"Placed order {order.id}: product {product_id} x{quantity} = {order.total_price}"
        )
        return order

    def _fail(self, action: str, error: SQLAlchemyError) -> None:
        """Roll back the session and log a storage failure."""
        self.db.rollback()
        logger.error(f"Error {action}: {error}")
