from fastapi import APIRouter, HTTPException, Depends, Request, status
from typing import Annotated, Any
from ....core.config import settings
from ....domain.model import Delivered, DispatchMode, Failed, Rejected
from ....schemas.quiz_schemas import DispatchOut, FieldErrorOut
from ....services.dispatch_service import DispatchService

router = APIRouter(tags=["dispatch"])


def get_dispatch_service(request: Request) -> DispatchService:
    state = request.app.state
    return DispatchService(state.quiz_repository, state.webhook_dispatcher, settings.answer_link)

DispatchDep = Annotated[DispatchService, Depends(get_dispatch_service)]


async def _read_body(request: Request) -> Any:
    # parsed by hand so malformed input reaches the validator as a 400, not a 422
    try:
        return await request.json()
    except ValueError:
        return None


async def _dispatch(request: Request, svc: DispatchService, mode: DispatchMode) -> DispatchOut:
    outcome = await svc.dispatch(await _read_body(request), mode)
    match outcome:
        case Delivered():
            return DispatchOut()
        case Rejected(errors=errors):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=[FieldErrorOut(field=e.field, message=e.message).model_dump() for e in errors],
            )
        case Failed(reason=reason):
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=reason)


@router.post("/send_question", response_model=DispatchOut)
async def send_question(request: Request, svc: DispatchDep):
    return await _dispatch(request, svc, DispatchMode.QUESTION)

@router.post("/send_answer", response_model=DispatchOut)
async def send_answer(request: Request, svc: DispatchDep):
    return await _dispatch(request, svc, DispatchMode.ANSWER)
