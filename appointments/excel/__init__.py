"""Styled Excel output for appointment reports."""
from .writer import Column, ExcelWriter
