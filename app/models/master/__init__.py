# app/models/master/__init__.py

from .master import Shop
