import logging
from typing import List

from sqlalchemy import delete as sql_delete, update as sql_update
from sqlalchemy.exc import NoResultFound, SQLAlchemyError
from sqlalchemy.orm import Session

from product_api.infrastructure.exceptions import ProductNotFoundError, StoreError
from product_api.models.product import Product

logger = logging.getLogger(__name__)


class ProductService:
    """
    Data access for the ``products`` table.

    Every method issues one statement and commits it. Database failures
    are rolled back and re-raised as ``StoreError`` with the driver's
    message; a missing row on ``fetch`` raises ``ProductNotFoundError``.
    """

    def __init__(self, db: Session):
        self.db = db

    def _store_error(self, e: SQLAlchemyError) -> StoreError:
        self.db.rollback()
        logger.error(f"数据库操作失败: {e}", exc_info=True)
        return StoreError(str(e))

    def fetch(self, product_id: int) -> Product:
        try:
            return self.db.query(Product).filter(Product.id == product_id).one()
        except NoResultFound:
            raise ProductNotFoundError()
        except SQLAlchemyError as e:
            raise self._store_error(e) from e

    def list(self, start: int, count: int) -> List[Product]:
        """Products ordered by id, skipping ``start`` rows, at most ``count``."""
        try:
            query = self.db.query(Product).order_by(Product.id)
            return query.offset(start).limit(count).all()
        except SQLAlchemyError as e:
            raise self._store_error(e) from e

    def create(self, product: Product) -> Product:
        """Insert ``product``; the database assigns its id."""
        product.id = None
        try:
            self.db.add(product)
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._store_error(e) from e
        logger.info(f"创建商品成功: id={product.id}")
        return product

    def update(self, product: Product) -> Product:
        """
        Overwrite name, quantity and price of the row with ``product.id``.

        No existence check: updating an unknown id changes nothing.
        """
        statement = (
            sql_update(Product)
            .where(Product.id == product.id)
            .values(name=product.name, quantity=product.quantity, price=product.price)
        )
        try:
            self.db.execute(statement)
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._store_error(e) from e
        return product

    def delete(self, product_id: int) -> None:
        """Remove the row with ``product_id``; absent rows are ignored."""
        statement = (
            sql_delete(Product)
            .where(Product.id == product_id)
        )
        try:
            self.db.execute(statement)
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._store_error(e) from e
