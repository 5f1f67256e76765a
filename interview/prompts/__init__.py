"""
Prompts - Fixed Transcript Text

Jinja2 templates for the fixed text blocks reported to transcripts.
"""

from interview.prompts.loader import render, render_lines
from interview.prompts.templates import Template

__all__ = [
    "Template",
    "render",
    "render_lines",
]
