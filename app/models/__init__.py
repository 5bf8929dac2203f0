"""
Import every model so relationship() string targets resolve and
Base.metadata is complete wherever any model is imported.
"""

from app.models.base import Base
from app.models.company import Company
from app.models.principal import Principal
from app.models.user_profile import UserProfile
from app.models.account import Account, AccountStatus
from app.models.contact import Contact
from app.models.product import Product, ProductVolume
from app.models.account_product import AccountProduct
from app.models.shipping_location import ShippingLocation
from app.models.call_note import CallNote

__all__ = [
    "Base",
    "Company",
    "Principal",
    "UserProfile",
    "Account",
    "AccountStatus",
    "Contact",
    "Product",
    "ProductVolume",
    "AccountProduct",
    "ShippingLocation",
    "CallNote",
]
