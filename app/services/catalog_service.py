import time
from typing import List

from sqlalchemy.orm import Session
from sqlalchemy.sql import func

from app.core.errors import RecordNotFound
from app.models.tenant.tenant import Category, Product
from app.schemas.catalog import CategoryIn, ProductIn
from app.services.remote import remote_operation


# =====================================================
# CATEGORIES
# =====================================================

def list_categories(db: Session) -> List[Category]:
    with remote_operation(db, "fetch categories"):
        return db.query(Category).order_by(Category.created_at).all()


def add_category(db: Session, data: CategoryIn) -> Category:
    with remote_operation(db, "add category"):
        category = Category(title=data.title, image=data.image)
        db.add(category)
        db.commit()
        db.refresh(category)
        return category


def update_category(db: Session, category_id: str, data: CategoryIn) -> Category:
    with remote_operation(db, "update category"):
        category = db.get(Category, category_id)
        if category is None:
            raise RecordNotFound("Category not found")

        category.title = data.title
        category.image = data.image
        category.updated_at = func.now()
        db.commit()
        db.refresh(category)
        return category


def delete_category(db: Session, category_id: str) -> bool:
    # deleting a missing record is not an error
    with remote_operation(db, "delete category"):
        deleted = db.query(Category).filter(Category.id == category_id).delete()
        db.commit()
        return bool(deleted)


# =====================================================
# PRODUCTS
# =====================================================

def _new_product_code() -> str:
    return f"PRD-{int(time.time() * 1000)}"


def list_products(db: Session, category_id: str) -> List[Product]:
    with remote_operation(db, "fetch products"):
        return (
            db.query(Product)
            .filter(Product.category_id == category_id)
            .order_by(Product.created_at)
            .all()
        )


def add_product(db: Session, data: ProductIn) -> Product:
    with remote_operation(db, "add product"):
        product = Product(product_id=_new_product_code(), **data.model_dump())
        db.add(product)
        db.commit()
        db.refresh(product)
        return product


def update_product(db: Session, product_id: str, data: ProductIn) -> Product:
    with remote_operation(db, "update product"):
        product = db.get(Product, product_id)
        if product is None:
            raise RecordNotFound("Product not found")

        for field, value in data.model_dump().items():
            setattr(product, field, value)
        product.updated_at = func.now()
        db.commit()
        db.refresh(product)
        return product


def delete_product(db: Session, product_id: str) -> bool:
    with remote_operation(db, "delete product"):
        deleted = db.query(Product).filter(Product.id == product_id).delete()
        db.commit()
        return bool(deleted)
