from sqlalchemy import CheckConstraint, Column, Integer, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()

class ItemRecord(Base):
    """One row of the roulette menu.

    `seq` is the zero-based index written by a replace; reads order by
    (seq, id) so the wheel and the selector always agree on slot order.
    """
    __tablename__ = "items"
    __table_args__ = (
        CheckConstraint("weight >= 1", name="items_weight_positive"),
    )

    id = Column(Integer, primary_key=True)
    seq = Column(Integer, nullable=False)
    label = Column(String(255), nullable=False)
    weight = Column(Integer, nullable=False)
