import numpy as np

from mini_beam import MomentLoad, PointLoad, Support, SupportType, UniformLoad, VaryingLoad
from mini_beam.kernel import DOF_BEAM, ROTATION, TRANSLATION
from mini_beam.loads import build_load_vector, element_distributed_load, trapezoid_equiv_nodal_load
from mini_beam.mesh import build_mesh


EI = 1.0e8


def test_uniform_equivalent_loads():
    """
    WHAT IS THIS TEST?
    ==================
    For q1 == q2 == w the trapezoid formula must give the textbook
    fixed-end forces of a UDL:

        [-wL/2, -wL²/12, -wL/2, +wL²/12]

    (negative = downward force / clockwise moment on the nodes)
    """
    w, a = 2000.0, 3.0
    fe = trapezoid_equiv_nodal_load(w, w, a)
    np.testing.assert_allclose(fe, [-w * a / 2, -w * a**2 / 12, -w * a / 2, w * a**2 / 12])
    print("✓ UDL equivalent nodal loads match the fixed-end forces")


def test_trapezoid_conserves_resultant():
    q1, q2, a = 1000.0, 4000.0, 2.0
    fe = trapezoid_equiv_nodal_load(q1, q2, a)
    assert np.isclose(fe[0] + fe[2], -(q1 + q2) * a / 2)
    assert np.isclose(fe[1], -fe[3])


def test_partial_overlap_uses_interpolated_intensity():
    """A UVL from 0 to 10 kN/m over [0, 10] seen by an element on [2, 4]."""
    load = VaryingLoad("v", magnitude=0.0, end_magnitude=10.0, position=0.0, end_position=10.0)
    fe = element_distributed_load(2.0, 4.0, [load])
    expected = trapezoid_equiv_nodal_load(2000.0, 4000.0, 2.0)
    np.testing.assert_allclose(fe, expected)


def test_partial_element_coverage():
    """A UDL ending inside an element only loads the covered part."""
    load = UniformLoad("u", 5.0, 0.0, 1.5)
    fe = element_distributed_load(1.0, 2.0, [load])
    np.testing.assert_allclose(fe, trapezoid_equiv_nodal_load(5000.0, 5000.0, 0.5))


def test_non_overlapping_and_touching_loads_ignored():
    loads = [UniformLoad("u", 5.0, 3.0, 6.0), PointLoad("p", 1.0, 1.5)]
    np.testing.assert_array_equal(element_distributed_load(1.0, 3.0, loads), np.zeros(4))
    np.testing.assert_array_equal(element_distributed_load(6.0, 7.0, loads), np.zeros(4))


def test_point_and_moment_loads_at_closest_node():
    supports = [Support("1", SupportType.PINNED, 0.0), Support("2", SupportType.ROLLER, 10.0)]
    loads = [PointLoad("p", 7.0, 2.5), MomentLoad("m", 3.0, 6.0)]
    mesh = build_mesh(10.0, supports, loads, 5.0)

    F = build_load_vector(mesh, EI, loads)

    p_node = mesh.closest(2.5)
    m_node = mesh.closest(6.0)
    assert F[DOF_BEAM.idx(p_node, TRANSLATION)] == -7000.0
    assert F[DOF_BEAM.idx(m_node, ROTATION)] == 3000.0
    assert np.count_nonzero(F) == 2
    print("✓ Point force downward, couple counter-clockwise, both in N / N·m")


def test_load_vector_total_matches_applied_loads():
    """Σ translational entries = -(ΣP + Σ line-load resultants), in N."""
    loads = [
        PointLoad("p", 4.0, 1.0),
        UniformLoad("u", 3.0, 2.0, 7.0),
        VaryingLoad("v", 1.0, 5.0, 6.0, 9.5),
    ]
    mesh = build_mesh(10.0, [], loads, 5.0)
    F = build_load_vector(mesh, EI, loads)

    total = 4.0 + 3.0 * 5.0 + 0.5 * (1.0 + 5.0) * 3.5
    assert np.isclose(F[TRANSLATION::2].sum(), -total * 1000.0, rtol=1e-12)
    # The end moments of adjacent elements cancel in pairs
    assert np.isclose(F[ROTATION::2].sum(), 0.0, atol=1e-6)
    print(f"✓ Load vector carries {total:.3f} kN downward")


def test_hinge_condenses_line_load():
    """
    At a hinge node the element end moments are condensed away, so the
    rotation entry of the load vector there is exactly zero.
    """
    supports = [
        Support("1", SupportType.FIXED, 0.0),
        Support("h", SupportType.HINGE, 5.0),
        Support("2", SupportType.ROLLER, 10.0),
    ]
    loads = [UniformLoad("u", 10.0, 0.0, 10.0)]
    mesh = build_mesh(10.0, supports, loads, 5.0)
    F = build_load_vector(mesh, EI, loads)

    hinge = mesh.closest(5.0)
    assert F[DOF_BEAM.idx(hinge, ROTATION)] == 0.0
    assert np.isclose(F[TRANSLATION::2].sum(), -100000.0, rtol=1e-12)
