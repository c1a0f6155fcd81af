from sqlalchemy import Column, Integer, ForeignKey, UniqueConstraint, CheckConstraint
from sqlalchemy.orm import relationship
from ..db.base import Base


class OrderItem(Base):
    __tablename__ = "order_items"
    __table_args__ = (
        UniqueConstraint("order_id", "menu_id", name="uq_order_items_order_menu"),
        CheckConstraint("quantity >= 1", name="ck_order_items_quantity_positive"),
        CheckConstraint("cooking_time >= 1", name="ck_order_items_cooking_time_positive"),
    )

    id = Column(Integer, primary_key=True, index=True)
    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False)
    menu_id = Column(Integer, ForeignKey("menus.id"), nullable=False)
    cooking_time = Column(Integer, nullable=False)  # суммарная оценка по позиции, минуты
    quantity = Column(Integer, nullable=False, default=1)

    # связи
    order = relationship("Order", back_populates="items")
    menu = relationship("Menu", back_populates="order_items")
