"""Tyre purchase/sale profit and loss calculator."""
