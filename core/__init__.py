"""
Core application components.

Import ``core.application`` directly; it pulls in OpenGL, while
``core.input_handler`` only needs pygame.
"""
