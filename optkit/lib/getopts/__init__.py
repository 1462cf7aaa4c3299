"""
getopts package for optkit.

Compiles option-specification strings and classifies token streams
against them.
"""

from .compiler import SpecCompiler, spec_compile
from .classifier import TokenClassifier, tokens_classify

__all__ = ["SpecCompiler", "TokenClassifier", "spec_compile", "tokens_classify"]
