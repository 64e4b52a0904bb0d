"""Vectors, objects, lights and scenes for ray tracing spheres and triangle meshes."""