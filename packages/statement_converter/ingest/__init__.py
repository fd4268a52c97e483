"""Readers that turn exported statement files into transactions."""
