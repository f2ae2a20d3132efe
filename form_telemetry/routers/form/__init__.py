"""
Form Router Module - serves the tracked form and accepts its submission
"""
from .form import router as form_router

__all__ = [
    "form_router",
]
