"""
Helpers for presenting processed contracts: search filtering, grouping and CSV export.
"""

import csv
import io
from collections import OrderedDict
from typing import Dict, List, Sequence

from .models import Contract, ContractType

CSV_HEADERS = ['Contract Name', 'Contract Type', 'Original Provision', 'AI Summary']


def filter_contracts(contracts: Sequence[Contract], search_term: str) -> List[Contract]:
    """
    Case-insensitive search over contract names, provision texts and summaries.

    A matching contract keeps only its matching provisions, or all of them
    when just its name matched.
    """
    if not search_term:
        return list(contracts)
    term = search_term.lower()

    filtered = []
    for contract in contracts:
        matching = [
            p for p in contract.provisions
            if term in p.text.lower() or term in p.summary.lower()
        ]
        if term in contract.name.lower() or matching:
            provisions = matching or contract.provisions
            filtered.append(contract.model_copy(update={'provisions': provisions}))
    return filtered


def group_by_type(contracts: Sequence[Contract]) -> Dict[ContractType, List[Contract]]:
    grouped: Dict[ContractType, List[Contract]] = OrderedDict()
    for contract in contracts:
        grouped.setdefault(contract.type, []).append(contract)
    return grouped


def contracts_to_csv(contracts: Sequence[Contract]) -> str:
    """One row per provision."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator='\n')
    writer.writerow(CSV_HEADERS)
    for contract in contracts:
        for provision in contract.provisions:
            writer.writerow([contract.name, contract.type.value, provision.text, provision.summary])
    return buffer.getvalue()
