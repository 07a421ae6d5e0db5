"""Screen rendering for the viewer."""

from notec.render.screen import RenderBuffer, ScreenRenderer

__all__ = ["RenderBuffer", "ScreenRenderer"]
