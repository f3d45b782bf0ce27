"""
Test package for the sonar log viewer backend.

Synthetic sl2/sl3 buffers are produced by tests.sonar_factory.
"""
