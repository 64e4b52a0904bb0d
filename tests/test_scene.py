import pytest

from softrender.raytrace.objects import Light, Sphere
from softrender.raytrace.scene import Scene
from softrender.raytrace.vector import Vector3f


def test_defaults():
    scene = Scene()
    assert (scene.width, scene.height, scene.fov) == (1280, 960, 90)
    assert scene.background_color == Vector3f(0.235294, 0.67451, 0.843137)
    assert scene.max_depth == 5
    assert scene.epsilon == 0.00001


def test_size_arguments():
    scene = Scene(64, 48)
    assert (scene.width, scene.height) == (64, 48)


def test_add_routes_objects_and_lights():
    scene = Scene(4, 4)
    sphere = Sphere(Vector3f(0, 0, -5), 1)
    light = Light(Vector3f(0, 10, 0), 1.0)
    scene.add(sphere)
    scene.add(light)
    assert scene.objects == (sphere,)
    assert scene.lights == (light,)


def test_add_preserves_order():
    scene = Scene(4, 4)
    first, second = Sphere(Vector3f(), 1), Sphere(Vector3f(1, 0, 0), 2)
    scene.add(first)
    scene.add(second)
    assert scene.objects == (first, second)


def test_add_rejects_other_types():
    with pytest.raises(TypeError):
        Scene().add("sphere")