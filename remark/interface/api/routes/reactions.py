"""Reaction routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from remark.application.usecase.reaction import (
    AddReactionRequest,
    AddReactionResponse,
    AddReactionUseCase,
    GetUserReactionRequest,
    GetUserReactionResponse,
    GetUserReactionUseCase,
    RemoveReactionRequest,
    RemoveReactionResponse,
    RemoveReactionUseCase,
)
from remark.domain.value import ReactionType
from remark.interface.api.dependencies import CallerDep

router = APIRouter(prefix="/comments", tags=["reactions"], route_class=DishkaRoute)


class AddReactionAPIRequest(BaseModel):
    """API request for reacting to a comment."""

    type: ReactionType


@router.post("/{comment_id}/reactions", response_model=AddReactionResponse)
async def add_reaction(
    comment_id: str,
    request: AddReactionAPIRequest,
    caller: CallerDep,
    add_reaction_use_case: FromDishka[AddReactionUseCase],
) -> AddReactionResponse:
    """Add or replace the caller's reaction on a comment."""
    return await add_reaction_use_case.execute(
        AddReactionRequest(
            comment_id=comment_id,
            user_id=caller.user_id,
            reaction_type=request.type,
        )
    )


@router.delete("/{comment_id}/reactions", response_model=RemoveReactionResponse)
async def remove_reaction(
    comment_id: str,
    caller: CallerDep,
    remove_reaction_use_case: FromDishka[RemoveReactionUseCase],
) -> RemoveReactionResponse:
    """Remove the caller's reaction, if any."""
    return await remove_reaction_use_case.execute(
        RemoveReactionRequest(comment_id=comment_id, user_id=caller.user_id)
    )


@router.get("/{comment_id}/reactions/me", response_model=GetUserReactionResponse)
async def get_my_reaction(
    comment_id: str,
    caller: CallerDep,
    get_user_reaction_use_case: FromDishka[GetUserReactionUseCase],
) -> GetUserReactionResponse:
    """The caller's own reaction on a comment."""
    return await get_user_reaction_use_case.execute(
        GetUserReactionRequest(comment_id=comment_id, user_id=caller.user_id)
    )
