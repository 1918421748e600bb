"""
Collaborators around the engine: the fixed-interval ticker and rendering.
"""
