"""
# Brevity: __init__.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Compile Brevity shorthand markup to HTML.
"""

from brevity._version import __version__
from brevity.core import CompilationResult, Compiler, compile_to_html
from brevity.diagnostics import Diagnostic
from brevity.expressions import Evaluator

__all__ = [
    '__version__',
    'CompilationResult',
    'Compiler',
    'Diagnostic',
    'Evaluator',
    'compile_to_html',
]
