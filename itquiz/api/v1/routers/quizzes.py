from fastapi import APIRouter, HTTPException, Depends, Request, status
from typing import Annotated
from ....schemas.quiz_schemas import FieldErrorOut, QuizCountOut, QuizEntryOut
from ....services.quiz_service import QuizService

router = APIRouter(prefix="/quizzes", tags=["quizzes"])

# Service dependency factory

def get_service(request: Request) -> QuizService:
    return QuizService(request.app.state.quiz_repository)

ServiceDep = Annotated[QuizService, Depends(get_service)]

# /count must be registered before /{quiz_id}
@router.get("/count", response_model=QuizCountOut)
async def count_quizzes(svc: ServiceDep):
    return svc.count()

@router.get("/{quiz_id}", response_model=QuizEntryOut, response_model_exclude_none=True)
async def get_quiz(quiz_id: str, svc: ServiceDep):
    data = svc.get_entry(quiz_id)
    if isinstance(data, list):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=[FieldErrorOut(field=e.field, message=e.message).model_dump() for e in data],
        )
    return data
