from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..db import get_db
from ..models import Expense
from ..schemas import ExpenseCreate, ExpenseOut

router = APIRouter(prefix="/api/expenses", tags=["expenses"])


@router.get("", response_model=List[ExpenseOut])
def list_expenses(db: Session = Depends(get_db)) -> List[ExpenseOut]:
    """
    List every stored expense and income entry, oldest first.
    """
    return db.query(Expense).order_by(Expense.id).all()


@router.post("", response_model=ExpenseOut)
def create_expense(
    payload: ExpenseCreate,
    db: Session = Depends(get_db),
) -> ExpenseOut:
    """
    Add a manually entered transaction.

    The amount is stored as sent; the client signs expenses itself.
    """
    expense = Expense(
        date=payload.date,
        category=payload.category,
        amount=payload.amount,
        description=payload.description,
    )
    db.add(expense)
    db.commit()
    db.refresh(expense)
    return expense
