from sqlalchemy import Column, Integer, Text

from .db import Base


class Expense(Base):
    __tablename__ = "expenses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    date = Column(Text)  # "Jan 5, 2024" as printed on the statement
    category = Column(Text)  # "Expense" | "Income"
    amount = Column(Text)  # signed decimal string, e.g. "-15500.00"
    description = Column(Text)

    def __repr__(self):
        return f"<Expense(id={self.id}, date='{self.date}', amount='{self.amount}')>"
