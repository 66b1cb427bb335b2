"""Tests for Vec3 class."""

import pytest
import numpy as np

from minitrace.vec3 import Vec3, Point3, Color


class TestVec3Creation:
    """Test Vec3 construction."""

    def test_default_constructor(self):
        v = Vec3()
        assert v.x == 0.0
        assert v.y == 0.0
        assert v.z == 0.0

    def test_value_constructor(self):
        v = Vec3(1.0, 2.0, 3.0)
        assert v.x == 1.0
        assert v.y == 2.0
        assert v.z == 3.0

    def test_single_precision_storage(self):
        v = Vec3(0.1, 0.2, 0.3)
        assert v.to_array().dtype == np.float32
        assert v.x == pytest.approx(0.1, abs=1e-7)

    def test_from_array(self):
        v = Vec3.from_array(np.array([1.0, 2.0, 3.0]))
        assert v == Vec3(1, 2, 3)

    def test_from_array_copies_input(self):
        arr = np.array([1.0, 2.0, 3.0], dtype=np.float32)
        v = Vec3.from_array(arr)
        v += Vec3(1, 1, 1)
        assert arr.tolist() == [1.0, 2.0, 3.0]

    def test_copy_is_independent(self):
        v = Vec3(1, 2, 3)
        w = v.copy()
        w *= 2.0
        assert v == Vec3(1, 2, 3)
        assert w == Vec3(2, 4, 6)

    def test_color_aliases(self):
        c = Color(0.5, 0.25, 1.0)
        assert c.r == 0.5
        assert c.g == 0.25
        assert c.b == 1.0

    def test_unpacking(self):
        x, y, z = Point3(1, 2, 3)
        assert (x, y, z) == (1.0, 2.0, 3.0)


class TestVec3Arithmetic:
    """Test Vec3 arithmetic operations."""

    def test_negation(self):
        assert -Vec3(1, 2, 3) == Vec3(-1, -2, -3)

    def test_addition(self):
        assert Vec3(1, 2, 3) + Vec3(4, 5, 6) == Vec3(5, 7, 9)

    def test_addition_negative(self):
        assert Vec3(1, -2, 3) + Vec3(-3, 2, -1) == Vec3(-2, 0, 2)

    def test_subtraction(self):
        assert Vec3(4, 5, 6) - Vec3(1, 2, 3) == Vec3(3, 3, 3)

    def test_scalar_multiplication(self):
        assert Vec3(4, 6, 2) * 0.5 == Vec3(2, 3, 1)
        assert 0.5 * Vec3(4, 6, 2) == Vec3(2, 3, 1)

    def test_scalar_multiplication_by_zero(self):
        assert Vec3(4, 6, 2) * 0.0 == Vec3(0, 0, 0)

    def test_entrywise(self):
        v1 = Vec3(1, 2, 3)
        v2 = Vec3(2, 3, 4)
        assert v1.entrywise(v2) == Vec3(2, 6, 12)
        assert v1 * v2 == Vec3(2, 6, 12)

    def test_division(self):
        assert Vec3(4, 6, 2) / 0.5 == Vec3(8, 12, 4)
        assert Vec3(4, 6, -2) / -2.0 == Vec3(-2, -3, 1)

    def test_division_of_zero_vector(self):
        assert Vec3(0, 0, 0) / 2.0 == Vec3(0, 0, 0)

    def test_division_by_zero_raises(self):
        with pytest.raises(ZeroDivisionError):
            Vec3(4, 6, 2) / 0.0

    def test_arithmetic_returns_new_vector(self):
        a = Vec3(1, 2, 3)
        b = a + Vec3(1, 1, 1)
        assert b is not a
        assert a == Vec3(1, 2, 3)


class TestVec3InPlace:
    """Test compound assignment operators."""

    def test_iadd_mutates_receiver(self):
        a = Vec3(1, 2, 3)
        alias = a
        a += Vec3(3, 2, 1)
        assert alias is a
        assert alias == Vec3(4, 4, 4)

    def test_isub(self):
        a = Vec3(4, 4, 4)
        a -= Vec3(3, 2, 1)
        assert a == Vec3(1, 2, 3)

    def test_imul(self):
        a = Vec3(4, 6, 2)
        a *= 0.5
        assert a == Vec3(2, 3, 1)

    def test_itruediv(self):
        a = Vec3(4, 6, 2)
        a /= 0.5
        assert a == Vec3(8, 12, 4)

    def test_itruediv_by_zero_leaves_receiver_untouched(self):
        a = Vec3(4, 6, 2)
        with pytest.raises(ZeroDivisionError):
            a /= 0.0
        assert a == Vec3(4, 6, 2)


class TestVec3VectorOps:
    """Test Vec3 vector operations."""

    def test_length(self):
        assert Vec3(3, 4, 0).length() == 5.0

    def test_length_of_zero_vector(self):
        assert Vec3(0, 0, 0).length() == 0.0

    def test_length_squared(self):
        assert Vec3(3, 4, 0).length_squared() == 25.0

    def test_normalize(self):
        n = Vec3(3, 4, 0).normalize()
        assert n == Vec3(0.6, 0.8, 0.0)
        assert n.length() == pytest.approx(1.0, abs=1e-6)

    def test_normalize_zero_vector_raises(self):
        with pytest.raises(ZeroDivisionError):
            Vec3(0, 0, 0).normalize()

    def test_dot_product(self):
        assert Vec3(1, 0, 0).dot(Vec3(0, 1, 0)) == 0.0
        assert Vec3(1, 2, 3).dot(Vec3(4, 5, 6)) == 32.0
        assert Vec3(-1, -2, -3).dot(Vec3(4, 5, 6)) == -32.0

    def test_cross_product_axes(self):
        assert Vec3(1, 0, 0).cross(Vec3(0, 1, 0)) == Vec3(0, 0, 1)
        assert Vec3(0, 1, 0).cross(Vec3(0, 0, 1)) == Vec3(1, 0, 0)
        assert Vec3(0, 0, 1).cross(Vec3(1, 0, 0)) == Vec3(0, 1, 0)

    def test_cross_product(self):
        assert Vec3(1, 2, 3).cross(Vec3(4, 5, 6)) == Vec3(-3, 6, -3)


class TestVec3Laws:
    """Algebraic identities that must hold for any inputs."""

    a = Vec3(1.5, -2.0, 0.25)
    b = Vec3(-3.0, 4.5, 2.0)
    c = Vec3(0.5, 0.5, -7.0)

    def test_addition_commutes(self):
        assert self.a + self.b == self.b + self.a

    def test_addition_associates(self):
        assert (self.a + self.b) + self.c == self.a + (self.b + self.c)

    def test_self_subtraction_is_zero(self):
        assert self.a - self.a == Vec3(0, 0, 0)

    def test_scalar_distributes(self):
        s = 2.5
        assert (self.a + self.b) * s == self.a * s + self.b * s

    def test_dot_commutes(self):
        assert self.a.dot(self.b) == pytest.approx(self.b.dot(self.a))

    def test_cross_anticommutes(self):
        assert self.a.cross(self.b) == -(self.b.cross(self.a))

    def test_divide_then_multiply(self):
        assert (self.a / 3.0) * 3.0 == self.a

    def test_normalize_idempotent(self):
        unit = self.a.normalize()
        assert unit.normalize() == unit
        assert unit.length() == pytest.approx(1.0, abs=1e-6)


class TestVec3Random:
    """Test Vec3 random generation."""

    def test_random(self):
        v = Vec3.random(0, 1)
        assert 0 <= v.x <= 1
        assert 0 <= v.y <= 1
        assert 0 <= v.z <= 1

    def test_random_in_unit_sphere(self):
        for _ in range(200):
            v = Vec3.random_in_unit_sphere()
            assert v.length_squared() < 1

    def test_random_in_unit_sphere_with_generator(self):
        rng = np.random.default_rng(0)
        for _ in range(200):
            v = Vec3.random_in_unit_sphere(rng)
            assert v.length_squared() < 1
            assert all(-1 <= c <= 1 for c in v)

    def test_seeded_generator_is_reproducible(self):
        first = Vec3.random_in_unit_sphere(np.random.default_rng(3))
        second = Vec3.random_in_unit_sphere(np.random.default_rng(3))
        assert first == second


class TestVec3Comparison:
    """Test Vec3 comparison operations."""

    def test_equality(self):
        assert Vec3(1, 2, 3) == Vec3(1, 2, 3)

    def test_inequality(self):
        assert Vec3(1, 2, 3) != Vec3(1, 2, 4)

    def test_compare_with_other_type(self):
        assert Vec3(1, 2, 3) != (1, 2, 3)

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Vec3(1, 2, 3))
