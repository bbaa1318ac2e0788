from .vector import Vector3
from .mesh import MeshGeometry, MeshContext

__all__ = ["Vector3", "MeshGeometry", "MeshContext"]
