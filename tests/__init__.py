"""
Test suite for glsl-trig

Contains:
- tests/unit/  : unit tests for the numeric substrate, angle wrappers,
                 capability tables, scalar functions and vector broadcast
"""
