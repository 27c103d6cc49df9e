"""
Rendering components for the galaxy maker.

``renderer`` and ``text`` need an OpenGL context; ``sprites`` and ``export``
only need pygame and can be used headless.
"""
