from .vector3 import Vector3, ZeroVectorError, VECTOR_TOLERANCE

__all__ = ['Vector3', 'ZeroVectorError', 'VECTOR_TOLERANCE']
