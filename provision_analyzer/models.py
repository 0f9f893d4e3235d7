"""
Data model for contracts and the insurance provisions detected in them.
"""

import itertools
from enum import Enum
from typing import List

from pydantic import BaseModel, field_validator

from .utils import normalize_whitespace


class ContractType(str, Enum):
    NJA = 'NJA'
    SUPPLIER = 'Supplier'


class Provision(BaseModel):
    id: str
    text: str
    summary: str = ""

    @field_validator('text')
    @classmethod
    def text_must_be_normalized(cls, value: str) -> str:
        if not value or normalize_whitespace(value) != value:
            raise ValueError("provision text must be non-empty and whitespace-normalized")
        return value


class Contract(BaseModel):
    id: str
    name: str
    type: ContractType
    content: str
    provisions: List[Provision]


class RunIdentity:
    """Issues identities that are unique within one processing run."""

    def __init__(self):
        self._provision_counter = itertools.count(1)
        self._contract_counter = itertools.count(1)

    def next_provision_id(self) -> str:
        return f"prov-{next(self._provision_counter)}"

    def next_contract_id(self) -> str:
        return f"contract-{next(self._contract_counter)}"
