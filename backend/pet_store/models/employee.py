"""
Employee model.

WHY: An employee belongs to exactly one pet store. The store reference is a
back-reference; the store owns the employee's lifecycle.
"""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from pet_store.models.base import Base, TimestampMixin


class Employee(Base, TimestampMixin):
    """Employee working at a single pet store."""

    __tablename__ = "employee"

    employee_id = Column(Integer, primary_key=True, index=True)

    pet_store_id = Column(
        Integer,
        ForeignKey("pet_store.pet_store_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    employee_first_name = Column(String(128), nullable=True)
    employee_last_name = Column(String(128), nullable=True)
    employee_phone = Column(String(40), nullable=True)
    employee_job_title = Column(String(128), nullable=True)

    pet_store = relationship("PetStore", back_populates="employees", lazy="selectin")

    def __repr__(self) -> str:
        return (
            f"<Employee(employee_id={self.employee_id}, "
            f"pet_store_id={self.pet_store_id})>"
        )
