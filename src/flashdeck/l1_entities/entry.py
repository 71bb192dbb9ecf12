"""Deck entry entities — separators and cards as a tagged union."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class Separator(BaseModel):
    """Marks the start of a group of cards loaded from one source."""

    type: Literal['separator'] = 'separator'
    id: str
    title: str

    model_config = {'frozen': True}


class Card(BaseModel):
    """One study unit: a prompt and its response."""

    type: Literal['card'] = 'card'
    id: str
    prompt: str = ''
    response: str = ''

    model_config = {'frozen': True}


Entry = Annotated[Union[Separator, Card], Field(discriminator='type')]

# Insertion order is study order.
Deck = tuple[Entry, ...]
