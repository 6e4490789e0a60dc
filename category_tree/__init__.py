"""
Category Tree

Turns the category catalog returned by the catalog API into a display-ready
tree: derived sort order, home-page visibility and recursively mapped children.
"""
