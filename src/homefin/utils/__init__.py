"""Utility functions for homefin."""

from homefin.utils.date_parser import parse_datetime, get_period_start
from homefin.utils.amount_parser import parse_amount, to_money, format_money

__all__ = ["parse_datetime", "get_period_start", "parse_amount", "to_money", "format_money"]
