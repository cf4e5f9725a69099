"""Core gameplay primitives (palette, levels, hit rules, scheduling and the game loop).

Kept free of FastAPI concerns so it can be reused by API routes, simulations, and tests.
"""
