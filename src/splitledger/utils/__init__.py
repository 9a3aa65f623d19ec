"""Utility functions for splitledger."""

from splitledger.utils.date_parser import parse_date
from splitledger.utils.amount_parser import parse_amount
from splitledger.utils.party_parser import parse_party

__all__ = ["parse_date", "parse_amount", "parse_party"]
