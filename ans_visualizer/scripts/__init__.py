"""
Report and self-check scripts for the state engine.
"""
