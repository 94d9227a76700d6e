"""Video listing site generator package.

This package turns a directory of Markdown files with YAML front matter
into a single static HTML listing page.

Package Structure
-----------------
- `pipeline/content_loader/`:
    Front-matter splitting, closed-schema metadata validation, Markdown
    rendering and directory loading.
- `pipeline/website_generator/`:
    Record ordering, rendering-context assembly, Jinja2 page rendering and
    HTML output.
- `generate_site.py`: Command-line entry point.
- `config.py`: All configuration constants (paths, names, options), as UPPER_SNAKE_CASE.
- `exceptions.py`: The application exception hierarchy.

Examples
--------
>>> from pathlib import Path
>>> from src.pipeline.website_generator import build_page
>>> html = build_page(Path("data/videos"), Path("templates"))
"""
