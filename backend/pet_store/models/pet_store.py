"""
Pet store model.

WHY: A pet store is the aggregate the other entities hang off: employees
work at exactly one store, customers patronize any number of stores.
"""

from sqlalchemy import Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import relationship

from pet_store.models.base import Base, TimestampMixin


# Patron relationship between stores and customers
# WHY: A plain association table; neither side owns the other, so deleting
# a store removes its edges but never the customers themselves.
pet_store_customer = Table(
    "pet_store_customer",
    Base.metadata,
    Column(
        "pet_store_id",
        Integer,
        ForeignKey("pet_store.pet_store_id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "customer_id",
        Integer,
        ForeignKey("customer.customer_id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class PetStore(Base, TimestampMixin):
    """
    Pet store with its employees and patrons.

    Relationships are loaded with ``selectin`` so that building nested
    summaries never triggers a lazy load on the async session.
    """

    __tablename__ = "pet_store"

    pet_store_id = Column(Integer, primary_key=True, index=True)

    pet_store_name = Column(String(255), nullable=True)
    pet_store_address = Column(String(255), nullable=True)
    pet_store_city = Column(String(128), nullable=True)
    pet_store_state = Column(String(128), nullable=True)
    pet_store_zip = Column(String(20), nullable=True)
    pet_store_phone = Column(String(40), nullable=True)

    # Relationships
    # WHY: Employees are part of the store (composition); removing a store
    # removes its employees. Customers are shared and only unlinked.
    employees = relationship(
        "Employee",
        back_populates="pet_store",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="Employee.employee_id",
    )
    customers = relationship(
        "Customer",
        secondary=pet_store_customer,
        back_populates="pet_stores",
        collection_class=set,
        lazy="selectin",
    )

    def add_employee(self, employee) -> None:
        """
        Make this store the employee's one and only workplace.

        Assigning the many-to-one side lets ``back_populates`` keep
        ``employees`` in step; the membership check covers employees that
        were already on the list.
        """
        employee.pet_store = self
        if employee not in self.employees:
            self.employees.append(employee)

    def add_customer(self, customer) -> None:
        """Record ``customer`` as a patron of this store (both sides)."""
        self.customers.add(customer)
        if self not in customer.pet_stores:
            customer.pet_stores.add(self)

    def __repr__(self) -> str:
        return f"<PetStore(pet_store_id={self.pet_store_id}, name={self.pet_store_name})>"
