import uuid
from sqlalchemy import (
    Column, String, Boolean, Float, Text, JSON, DateTime
)
from sqlalchemy.sql import func
from app.db.base_tenant import TenantBase


def _new_id() -> str:
    return uuid.uuid4().hex


# =====================================================
# CATEGORY
# =====================================================

class Category(TenantBase):
    __tablename__ = "categories"

    id = Column(String(32), primary_key=True, default=_new_id)
    title = Column(String(127), nullable=False)
    image = Column(Text, nullable=False)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime)


# =====================================================
# PRODUCT
# =====================================================

class Product(TenantBase):
    __tablename__ = "products"

    id = Column(String(32), primary_key=True, default=_new_id)
    # PRD-<epoch millis>, shown to operators
    product_id = Column(String(32), nullable=False)
    # no FK, categories may be deleted under their products
    category_id = Column(String(32), nullable=False, index=True)

    title = Column(String(127), nullable=False)
    image = Column(Text, nullable=False)
    weight = Column(String(50))
    karat = Column(String(50))
    making = Column(String(50))
    description = Column(Text)
    stock = Column(Boolean, default=True)
    show = Column(Boolean, default=True)
    shop = Column(String(127))

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime)


# =====================================================
# INVESTMENT PLANS
# =====================================================

class InvestmentPlan(TenantBase):
    __tablename__ = "investment_plans"

    id = Column(String(32), primary_key=True, default=_new_id)
    name = Column(String(127), nullable=False)
    tenure = Column(String(50), nullable=False)
    amount = Column(String(50), nullable=False)
    details = Column(Text)
    terms = Column(Text)


# =====================================================
# CUSTOMER INVESTMENTS
# =====================================================

class Investment(TenantBase):
    """A customer's enrollment in a plan, written by the customer app."""

    __tablename__ = "investments"

    id = Column(String(32), primary_key=True, default=_new_id)
    plan_name = Column(String(127))
    user_mobile = Column(String(20))
    created_at = Column(DateTime, server_default=func.now())

    # [{month, amount, date, accountName, remark}]
    payment_history = Column(JSON, default=list)


# =====================================================
# PARTNERS
# =====================================================

class PartnerUser(TenantBase):
    __tablename__ = "partner_users"

    mobile = Column(String(20), primary_key=True)
    name = Column(String(127), default="")
    total_earning = Column(Float, default=0)

    # [{billAmount, earningAmount, date, remark}]
    history = Column(JSON, default=list)


# =====================================================
# METAL RATES
# =====================================================

class MetalRates(TenantBase):
    __tablename__ = "metal_rates"

    CURRENT = "currentRates"

    id = Column(String(32), primary_key=True, default=CURRENT)
    gold24k = Column(Float)
    gold22k = Column(Float)
    gold18k = Column(Float)
    gold14k = Column(Float)
    silver = Column(Float)


# =====================================================
# APP USERS (read-only here)
# =====================================================

class User(TenantBase):
    __tablename__ = "users"

    id = Column(String(64), primary_key=True, default=_new_id)
    mobile = Column(String(20))
    gender = Column(String(20))
    pin = Column(String(10))
    created_at = Column(DateTime, server_default=func.now())

    # {name, city}
    profile = Column(JSON)
