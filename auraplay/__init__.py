"""
AuraPlay adaptive difficulty.

Maps a child's calibration profile (motor, cognitive, visual) onto
per-game difficulty settings.
"""
