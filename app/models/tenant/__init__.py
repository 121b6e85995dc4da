# app/models/tenant/__init__.py

from .tenant import (
    Category,
    Product,
    InvestmentPlan,
    Investment,
    PartnerUser,
    MetalRates,
    User
)
