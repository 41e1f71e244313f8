"""Reaction use cases."""

from .add_reaction import AddReactionRequest, AddReactionResponse, AddReactionUseCase
from .get_user_reaction import (
    GetUserReactionRequest,
    GetUserReactionResponse,
    GetUserReactionUseCase,
)
from .remove_reaction import (
    RemoveReactionRequest,
    RemoveReactionResponse,
    RemoveReactionUseCase,
)

__all__ = [
    "AddReactionRequest",
    "AddReactionResponse",
    "AddReactionUseCase",
    "GetUserReactionRequest",
    "GetUserReactionResponse",
    "GetUserReactionUseCase",
    "RemoveReactionRequest",
    "RemoveReactionResponse",
    "RemoveReactionUseCase",
]
