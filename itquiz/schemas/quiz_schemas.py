from typing import List, Optional
from pydantic import BaseModel


class QuizEntryOut(BaseModel):
    question: str
    answer: str
    alternativeAnswers: Optional[List[str]] = None


class QuizCountOut(BaseModel):
    count: int


class FieldErrorOut(BaseModel):
    field: str
    message: str


class DispatchOut(BaseModel):
    message: str = "delivered"
