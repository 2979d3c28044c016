"""View rendering module for HTML templates.

This module handles all HTML/template rendering logic, separate from routers.
Views receive a prepared render context and render Jinja2 templates.
"""
