"""
API Routes Package
"""
from . import (
    health,
    plans,
    subscribe,
    contact,
    messages,
)
