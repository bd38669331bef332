from typing import Literal

from pydantic import BaseModel, Field


# Expense schemas
class ExpenseCreate(BaseModel):
    date: str = Field(..., min_length=1)
    category: Literal["Expense", "Income"]
    amount: str = Field(..., pattern=r"^-?\d+(\.\d{1,2})?$")
    description: str = Field(..., min_length=1)


class ExpenseOut(BaseModel):
    id: int
    date: str
    category: str
    amount: str
    description: str

    class Config:
        from_attributes = True


# Parsed statement schemas (CLI / debugging)
class ParsedRecordOut(BaseModel):
    date: str
    description: str
    amount: str
    category: str

    class Config:
        from_attributes = True
