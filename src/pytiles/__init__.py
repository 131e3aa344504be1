"""pytiles: arrange tiles in 3D and animate between arrangements.

- layout: Table, Sphere, Helix and Grid target generators and the engine caching them
- animation: Easing curves and the per-item transition controller
- model: Live item positions
- controller: Application entry point and Qt frame driver
"""

__version__ = "0.1.0"
