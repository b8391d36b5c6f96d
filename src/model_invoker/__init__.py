"""Generative backend access."""

from src.model_invoker.fragment_stream import FragmentStream
from src.model_invoker.service import ModelInvoker

__all__ = [
    "FragmentStream",
    "ModelInvoker",
]
