from sqlalchemy.orm import declarative_base

# per-shop tables, created in every tenant database
TenantBase = declarative_base()
