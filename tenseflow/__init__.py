"""Example generation and analyzer-response normalization for the TenseFlow tutor."""

from .config import TenseFlowConfig, load_config_from_env
from .generator import ExampleGenerator, generate
from .normalize import classify_payload, default_examples, normalize
from .phonetic import resolve

__all__ = [
    "TenseFlowConfig",
    "load_config_from_env",
    "ExampleGenerator",
    "generate",
    "normalize",
    "classify_payload",
    "default_examples",
    "resolve",
]
