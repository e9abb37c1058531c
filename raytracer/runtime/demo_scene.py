"""The built-in demo scene."""

from raytracer.core.rendering.scene import Light, Material, Scene, Triangle


def build_demo_scene() -> Scene:
    """Two overlapping triangles one unit in front of the camera, lit from the camera position.

    The small blue triangle keeps its authored (counter-clockwise) winding;
    the large rough red triangle behind it in scene order is normalized.
    """
    triangles = [
        Triangle(
            origin=(0, 0, 1),
            points=[(0, 0.5, 1), (-0.5, -0.5, 1), (0.5, -0.5, 1)],
            material=Material(color=(0, 0, 255), transparency=0.0, roughness=0.0),
            skip_winding_order=True,
        ),
        Triangle(
            origin=(0, 0, 1),
            points=[(1, -1, 1), (-1, -1, 1), (0, 1, 1)],
            material=Material(color=(255, 0, 0), transparency=0.0, roughness=1.0),
        ),
    ]
    lights = [Light(origin=(0, 0, 0), strength=20.0)]
    return Scene.build(triangles, lights)


__all__ = ["build_demo_scene"]
