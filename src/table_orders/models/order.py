from sqlalchemy import Column, Integer, ForeignKey
from sqlalchemy.orm import relationship
from ..db.base import Base


class Order(Base):
    """
    Открытый заказ стола.
    Строка существует, пока в заказе есть хотя бы одна позиция.
    """
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)
    # unique: у стола не больше одного открытого заказа
    table_id = Column(Integer, ForeignKey("tables.id"), nullable=False, unique=True)

    # связи
    table = relationship("Table", back_populates="order")
    items = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="OrderItem.id",
    )
