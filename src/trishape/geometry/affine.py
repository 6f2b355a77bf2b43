import numpy as np


class AffineTransform:
    """2D affine transform stored as a 3x3 homogeneous matrix."""
    def __init__(self, matrix=None):
        if matrix is None:
            matrix = np.eye(3)
        matrix = np.array(matrix, dtype=np.float64)
        if matrix.shape == (2, 3):
            matrix = np.vstack([matrix, [0.0, 0.0, 1.0]])
        if matrix.shape != (3, 3):
            raise ValueError(f"Expected a 2x3 or 3x3 matrix, got shape {matrix.shape}")
        self.matrix = matrix

    def __repr__(self):
        return f"<AffineTransform {self.matrix[:2].tolist()}>"

    @classmethod
    def identity(cls):
        return cls()

    @classmethod
    def translation(cls, tx: float, ty: float):
        return cls([[1, 0, tx], [0, 1, ty], [0, 0, 1]])

    @classmethod
    def scaling(cls, sx: float, sy: float = None):
        if sy is None:
            sy = sx
        return cls([[sx, 0, 0], [0, sy, 0], [0, 0, 1]])

    @classmethod
    def rotation(cls, theta: float, cx: float = 0.0, cy: float = 0.0):
        """Rotation by theta (radians) around (cx, cy)."""
        c, s = np.cos(theta), np.sin(theta)
        rot = cls([[c, -s, 0], [s, c, 0], [0, 0, 1]])
        return cls.translation(cx, cy).concatenate(rot).concatenate(cls.translation(-cx, -cy))

    def concatenate(self, other: 'AffineTransform') -> 'AffineTransform':
        """Returns self * other, i.e. other is applied first."""
        return AffineTransform(self.matrix @ other.matrix)

    def transform_point(self, point) -> np.ndarray:
        p = np.array([point[0], point[1], 1.0], dtype=np.float64)
        return (self.matrix @ p)[:2]

    def transform_points(self, points) -> np.ndarray:
        pts = np.asarray(points, dtype=np.float64)
        homogeneous = np.column_stack([pts, np.ones(len(pts))])
        return (homogeneous @ self.matrix.T)[:, :2]
