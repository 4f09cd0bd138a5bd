"""worldmaps.logging_funcs

Standard logging setup (console plus per-level log files) used by the worldmaps tools.
"""
