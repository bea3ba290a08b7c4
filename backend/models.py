from sqlalchemy import Column, String, Integer, Index
from database import Base
from constants import OwnerFieldLength


class Owner(Base):
    """
    A pet-clinic customer.

    The id is assigned by the database on first save and never changes
    afterwards. Every other field is optional.
    """
    __tablename__ = 'owners'

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(OwnerFieldLength.FIRST_NAME), nullable=True)
    last_name = Column(String(OwnerFieldLength.LAST_NAME), nullable=True)
    address = Column(String(OwnerFieldLength.ADDRESS), nullable=True)
    city = Column(String(OwnerFieldLength.CITY), nullable=True)
    telephone = Column(String(OwnerFieldLength.TELEPHONE), nullable=True)

    __table_args__ = (
        Index('idx_owners_last_name', 'last_name'),
    )

    def to_dict(self) -> dict:
        """Plain dict of every column value"""
        return {
            'id': self.id,
            'first_name': self.first_name,
            'last_name': self.last_name,
            'address': self.address,
            'city': self.city,
            'telephone': self.telephone,
        }

    def __repr__(self) -> str:
        return (
            f"Owner(id={self.id!r}, first_name={self.first_name!r}, "
            f"last_name={self.last_name!r}, address={self.address!r}, "
            f"city={self.city!r}, telephone={self.telephone!r})"
        )
