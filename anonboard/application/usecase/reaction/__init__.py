"""Reaction use cases."""

from .get_reaction import GetReactionRequest, GetReactionResponse, GetReactionUseCase
from .react import ReactRequest, ReactResponse, ReactUseCase

__all__ = [
    "GetReactionRequest",
    "GetReactionResponse",
    "GetReactionUseCase",
    "ReactRequest",
    "ReactResponse",
    "ReactUseCase",
]
