"""Test package for the layered sprite renderer.

The core geometry and mapping tests are pure. Tests touching pygame run
headlessly using pygame's dummy video driver to avoid opening real windows.
To run these tests, execute ``pytest`` from the project root.
"""
