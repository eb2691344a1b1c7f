from tracecov.render.human import render_human
from tracecov.render.json import get_schema, render_json
from tracecov.render.lcov import render_lcov, write_lcov
from tracecov.render.render import FORMATS, OutputFormat, RenderOptions, render

__all__ = [
    "FORMATS",
    "OutputFormat",
    "RenderOptions",
    "get_schema",
    "render",
    "render_human",
    "render_json",
    "render_lcov",
    "write_lcov",
]
