from sqlalchemy import Column, String, Boolean, Integer, Float, Text
from sqlalchemy.orm import Mapped
from domain.entities.transaction import Transaction
from infrastructure.db.models.base import Base


class TransactionModel(Base):
    __tablename__ = "transactions"
    id: Mapped[int] = Column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = Column(String, nullable=False)
    description: Mapped[str] = Column(Text, nullable=False)
    price: Mapped[float] = Column(Float, nullable=False)
    # ISO-8601 text; the month filter matches on characters 6-7
    date_of_sale: Mapped[str] = Column(String(64), nullable=False, index=True)
    sold: Mapped[bool] = Column(Boolean, nullable=False, default=False)
    category: Mapped[str] = Column(String, nullable=False, index=True)

    def to_domain(self) -> Transaction:
        return Transaction(
            id=self.id,
            title=self.title,
            description=self.description,
            price=self.price,
            date_of_sale=self.date_of_sale,
            sold=self.sold,
            category=self.category,
        )

    @classmethod
    def from_domain(cls, transaction: Transaction) -> "TransactionModel":
        # the store assigns keys; ids coming from the seed dataset are not kept
        return cls(
            title=transaction.title,
            description=transaction.description,
            price=transaction.price,
            date_of_sale=transaction.date_of_sale,
            sold=transaction.sold,
            category=transaction.category,
        )
