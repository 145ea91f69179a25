"""
Application package initializer.

The application is assembled by ``main.create_app``; ``main.app`` is
the instance built from environment settings.
"""
