"""
Interface web FastAPI de MovieShelf (pages Jinja2 + fragments HTMX + API JSON).
"""
