"""Back-end of the Tally translator."""

from .assembly import AssemblyGenerator, generate, render

__all__ = ["AssemblyGenerator", "generate", "render"]
