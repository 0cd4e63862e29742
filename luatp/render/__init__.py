"""Output rendering."""

from luatp.render.renderer import LineInfoGenerator, Renderer, render_to_string

__all__ = ["LineInfoGenerator", "Renderer", "render_to_string"]
