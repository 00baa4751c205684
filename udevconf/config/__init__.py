"""
Settings, the variable registry, environment overrides and the loader.

Provides the UdevSettings value with its built-in defaults and the one-shot
loader that customizes it from the environment and udev.conf.
"""
