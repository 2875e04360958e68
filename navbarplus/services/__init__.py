from .host import FlaskHostContext, HostContext, StaticHostContext
from .navbar import explain, render, render_fragments

__all__ = [
    "FlaskHostContext",
    "HostContext",
    "StaticHostContext",
    "explain",
    "render",
    "render_fragments",
]
