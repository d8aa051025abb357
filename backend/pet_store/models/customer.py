"""
Customer model.

WHY: Customers are shared between stores; the patron relationship is a
many-to-many stored in ``pet_store_customer``.
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from pet_store.models.base import Base, TimestampMixin
from pet_store.models.pet_store import pet_store_customer


class Customer(Base, TimestampMixin):
    """Customer who may be a patron of several pet stores."""

    __tablename__ = "customer"

    customer_id = Column(Integer, primary_key=True, index=True)

    customer_first_name = Column(String(128), nullable=True)
    customer_last_name = Column(String(128), nullable=True)
    customer_email = Column(String(255), nullable=True)

    pet_stores = relationship(
        "PetStore",
        secondary=pet_store_customer,
        back_populates="customers",
        collection_class=set,
        lazy="selectin",
    )

    def is_patron_of(self, pet_store_id: int) -> bool:
        """
        Check patronage by identifier value.

        WHY: Identifiers are compared with ``==`` so that equal ids coming
        from different sources (path params, ORM rows) always match.
        """
        return any(store.pet_store_id == pet_store_id for store in self.pet_stores)

    def __repr__(self) -> str:
        return f"<Customer(customer_id={self.customer_id}, email={self.customer_email})>"
