from sqlalchemy import Column, String, DateTime
from sqlalchemy.sql import func
from app.db.base import Base


# =====================================================
# SHOPS (master directory)
# =====================================================

class Shop(Base):
    """One jewellery shop and the parameters of its data store.

    Maintained out of band; the console only reads it.
    """

    __tablename__ = "shops"

    shop_id = Column(String(128), primary_key=True)
    # stored as-is, see app.core.security.PasswordVerifier
    password = Column(String, nullable=False)

    api_key = Column(String)
    auth_domain = Column(String)
    project_id = Column(String, nullable=False)
    app_id = Column(String)
    messaging_sender_id = Column(String)
    measurement_id = Column(String)
    shop_name = Column(String)

    created_at = Column(DateTime, server_default=func.now())
