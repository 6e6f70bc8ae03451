"""CLI package for Virtual Library"""
from .main import cli

__all__ = ['cli']
