import math

import pytest
import numpy as np
from sidim.core.dimensions import Dimension, DimensionMismatch, DIMENSIONLESS, LENGTH, MASS, TIME
from sidim.core.quantity import Quantity
from sidim.vector import Vector3, ZeroVectorError, VECTOR_TOLERANCE


VELOCITY = Dimension(length=1, time=-1)
FORCE = Dimension(length=1, mass=1, time=-2)
ENERGY = Dimension(length=2, mass=1, time=-2)


def vec(x, y, z, dimension=LENGTH):
    return Vector3.from_array([x, y, z], dimension)


class TestVector3Construction:

    def test_components_share_dimension(self):
        v = Vector3(Quantity(1.0, LENGTH), Quantity(2.0, LENGTH), Quantity(3.0, LENGTH))

        assert v.dimension == LENGTH
        assert [c.magnitude for c in v] == [1.0, 2.0, 3.0]

    def test_mixed_dimensions_rejected(self):
        """Test a vector cannot mix lengths and times"""
        with pytest.raises(DimensionMismatch):
            Vector3(Quantity(1.0, LENGTH), Quantity(2.0, TIME), Quantity(3.0, LENGTH))

    def test_non_quantity_rejected(self):
        with pytest.raises(TypeError):
            Vector3(1.0, 2.0, 3.0)

    def test_from_array(self):
        v = Vector3.from_array(np.array([1, 2, 3]), VELOCITY)

        assert v.dimension == VELOCITY
        np.testing.assert_array_equal(v.to_array(), [1.0, 2.0, 3.0])

        with pytest.raises(ValueError):
            Vector3.from_array([1.0, 2.0])

    def test_factories(self):
        """Test zero and basis vectors"""
        assert Vector3.zero(LENGTH).is_zero()
        np.testing.assert_array_equal(Vector3.unit_x().to_array(), [1.0, 0.0, 0.0])
        np.testing.assert_array_equal(Vector3.unit_y().to_array(), [0.0, 1.0, 0.0])
        np.testing.assert_array_equal(Vector3.unit_z().to_array(), [0.0, 0.0, 1.0])
        assert Vector3.unit_z(TIME).dimension == TIME
        assert Vector3.unit_x().dimension == DIMENSIONLESS

    def test_of_constructor(self):
        v = Vector3.of(lambda value: Quantity(value, LENGTH), 1, 2, 3)

        assert v.equal(vec(1, 2, 3))

    def test_immutable(self):
        v = vec(1, 2, 3)
        with pytest.raises(AttributeError):
            v.x = Quantity(0.0, LENGTH)

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(vec(1, 2, 3))


class TestVector3Algebra:

    def setup_method(self):
        """Setup common vectors"""
        self.u = vec(1, 2, 3)
        self.v = vec(4, 5, 6)
        self.i = vec(1, 0, 0)
        self.j = vec(0, 1, 0)

    def test_add_and_subtract(self):
        assert self.u + self.v == vec(5, 7, 9)
        assert self.v - self.u == vec(3, 3, 3)
        assert self.u.add(self.v).dimension == LENGTH

    def test_add_dimension_mismatch(self):
        with pytest.raises(DimensionMismatch):
            self.u + vec(1, 1, 1, TIME)

    def test_subtract_dimension_mismatch(self):
        """Test subtracting a mass vector from a length vector fails"""
        with pytest.raises(DimensionMismatch):
            self.u - vec(1, 1, 1, MASS)
        with pytest.raises(DimensionMismatch):
            self.u.subtract(vec(1, 1, 1, TIME))

    def test_is_zero(self):
        assert Vector3.zero(LENGTH).is_zero()
        assert vec(0.0, -0.0, 0.0).is_zero()
        assert not Vector3.unit_x().is_zero()
        assert not vec(0, 0, 1e-300).is_zero()

    def test_scale_and_negate(self):
        """Test scalar multiplication on both sides"""
        assert self.u * 2 == vec(2, 4, 6)
        assert 2 * self.u == vec(2, 4, 6)
        assert self.u / 2 == vec(0.5, 1, 1.5)
        assert -self.u == vec(-1, -2, -3)

    def test_multiply_by_quantity(self):
        """Test velocity times time is a displacement"""
        velocity = vec(1, 2, 3, VELOCITY)
        displacement = velocity * Quantity(2.0, TIME)

        assert displacement == vec(2, 4, 6)
        assert (displacement / Quantity(2.0, TIME)) == velocity

    def test_dot(self):
        result = self.u.dot(self.v)

        assert result.magnitude == 32.0
        assert result.dimension == Dimension(length=2)

    def test_dot_orthogonal_basis(self):
        result = self.i.dot(self.j)

        assert result.magnitude == 0.0
        assert result.dimension == Dimension(length=2)

    def test_dot_force_displacement_is_energy(self):
        force = vec(0, 10, 0, FORCE)
        displacement = vec(0, 3, 4)

        work = force.dot(displacement)
        assert work.magnitude == 30.0
        assert work.dimension == ENERGY

    def test_cross_basis(self):
        """Test right-handed basis i x j = k"""
        i, j, k = (Vector3.unit_x(), Vector3.unit_y(), Vector3.unit_z())

        assert i.cross(j) == k
        assert j.cross(k) == i
        assert k.cross(i) == j

    def test_cross_composes_dimensions(self):
        ij = self.i.cross(self.j)

        assert ij.dimension == Dimension(length=2)
        assert ij == vec(0, 0, 1, Dimension(length=2))

    def test_cross_values(self):
        area = Dimension(length=2)

        assert self.u.cross(self.v) == vec(-3, 6, -3, area)
        assert self.v.cross(self.u) == vec(3, -6, 3, area)

    def test_cross_position_force_is_torque(self):
        torque = vec(2, 0, 0).cross(vec(0, 5, 0, FORCE))

        assert torque.dimension == ENERGY
        np.testing.assert_allclose(torque.to_array(), [0.0, 0.0, 10.0])

    def test_magnitude(self):
        """Test the 3-4-5 triangle"""
        v = vec(3, 4, 0, VELOCITY)

        assert v.magnitude_squared().magnitude == 25.0
        assert v.magnitude_squared().dimension == Dimension(length=2, time=-2)
        assert v.magnitude().magnitude == 5.0
        assert v.magnitude().dimension == VELOCITY

    def test_normalize(self):
        unit = vec(3, 4, 0).normalize()

        assert unit.dimension == DIMENSIONLESS
        assert unit == vec(0.6, 0.8, 0, DIMENSIONLESS)
        assert unit.magnitude().magnitude == pytest.approx(1.0)

    def test_normalize_zero_vector(self):
        with pytest.raises(ZeroVectorError):
            Vector3.zero(LENGTH).normalize()

        assert issubclass(ZeroVectorError, ValueError)

    def test_project_onto(self):
        projected = vec(3, 4, 0).project_onto(self.i)

        assert projected == vec(3, 0, 0)

    def test_project_keeps_own_dimension(self):
        """Test projecting a velocity onto a length axis gives a velocity"""
        projected = vec(2, 3, 0, VELOCITY).project_onto(vec(0, 5, 0))

        assert projected.dimension == VELOCITY
        assert projected == vec(0, 3, 0, VELOCITY)

    def test_project_onto_zero_vector(self):
        with pytest.raises(ZeroVectorError):
            self.u.project_onto(Vector3.zero(LENGTH))

    def test_angle_between(self):
        """Test angles between basis and diagonal vectors"""
        assert self.i.angle_between(self.j) == pytest.approx(math.pi / 2)
        assert self.i.angle_between(self.i * 3) == pytest.approx(0.0, abs=1e-7)
        assert self.i.angle_between(-self.i) == pytest.approx(math.pi)
        assert vec(1, 1, 0).angle_between(self.i) == pytest.approx(math.pi / 4)

    def test_angle_with_itself_is_clamped(self):
        """Test round-off never yields nan for parallel vectors"""
        v = vec(0.1, 0.2, 0.3)
        angle = v.angle_between(v)

        assert not math.isnan(angle)
        assert angle == pytest.approx(0.0, abs=1e-6)

    def test_angle_with_zero_vector(self):
        with pytest.raises(ZeroVectorError):
            self.u.angle_between(Vector3.zero(LENGTH))

    def test_angle_across_dimensions(self):
        """Test the angle is defined between vectors of different dimensions"""
        angle = vec(1, 0, 0, VELOCITY).angle_between(vec(0, 0, 2, FORCE))

        assert angle == pytest.approx(math.pi / 2)

    def test_parallel_and_perpendicular(self):
        assert self.u.is_parallel(vec(2, 4, 6))
        assert self.u.is_parallel(-self.u)
        assert not self.i.is_parallel(self.j)
        assert self.i.is_perpendicular(self.j)
        assert not self.u.is_perpendicular(self.v)
        assert VECTOR_TOLERANCE == 1e-10

    def test_equal_with_tolerance(self):
        assert self.u.equal(vec(1, 2, 3.001), tolerance=1e-2)
        assert self.u != vec(1, 2, 3.001)
        assert self.u != vec(1, 2, 3, TIME)

    def test_components_and_iteration(self):
        x, y, z = self.u

        assert x.magnitude == 1.0
        assert self.u.components() == (self.u.x, self.u.y, self.u.z)
        assert str(self.i) == "(1 [L^1], 0 [L^1], 0 [L^1])"


class TestVector3Properties:
    """Algebraic laws of vector arithmetic"""

    def setup_method(self):
        self.u = vec(1, 2, 3)
        self.v = vec(4, 5, 6)

    def test_cross_anticommutes(self):
        assert self.u.cross(self.v) == -self.v.cross(self.u)

    def test_cross_is_perpendicular(self):
        w = self.u.cross(self.v)

        assert w.is_perpendicular(self.u)
        assert w.is_perpendicular(self.v)

    def test_self_cross_is_zero(self):
        assert self.u.cross(self.u).is_zero()

    def test_dot_is_bilinear(self):
        scaled = self.u.scale(2.5).dot(self.v)

        assert scaled == self.u.dot(self.v).scale(2.5)

    def test_dot_commutes(self):
        assert self.u.dot(self.v) == self.v.dot(self.u)
