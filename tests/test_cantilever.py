import numpy as np

from mini_beam import (
    BeamConfig, MomentLoad, PointLoad, Support, SupportType, UniformLoad, analyze,
)


def test_cantilever_tip_load():
    """
    WHAT IS THIS TEST?
    ==================
    A cantilever: fixed at x = 0, free at x = L, point load P at the tip.

    Textbook answers:
    - Vertical reaction: R = P (upward)
    - Fixed-end moment: M = -PL (hogging, top fibre in tension)
    - Tip deflection: δ = -PL³/(3EI)

    The fixed support restrains both translation and rotation, so it
    contributes two reaction components.
    """
    L = 10.0
    P = 10.0
    config = BeamConfig(length=L, elastic_modulus=200000.0, moment_of_inertia=5e8)
    supports = [Support("1", SupportType.FIXED, 0.0)]
    loads = [PointLoad("p1", magnitude=P, position=L)]

    results = analyze(config, supports, loads, probe_x=0.0)

    EI = config.flexural_rigidity()
    delta_expected = -(P * 1000) * L**3 / (3 * EI) * 1000   # mm

    reaction = results.reaction("1")
    assert np.isclose(reaction.force, P, rtol=1e-6), f"Reaction {reaction.force} != {P}"
    assert np.isclose(reaction.moment, -P * L, rtol=1e-6), \
        f"Fixed-end moment {reaction.moment} != {-P * L}"
    assert np.isclose(results.deflection[-1], delta_expected, rtol=1e-6), \
        f"Tip deflection {results.deflection[-1]} != expected {delta_expected}"
    assert np.isclose(results.bending_moment[0], -P * L, rtol=1e-6), \
        "Moment diagram should start at the fixed-end moment"
    assert results.bending_moment[-1] == 0.0, "Free end carries no moment"
    assert np.isclose(results.min_moment, -P * L, rtol=1e-6)

    # Deflection at the support is held to ~0 by the penalty spring
    assert abs(results.deflection[0]) < 1e-9

    print(f"✓ Reaction: {reaction.force:.4f} kN, moment {reaction.moment:.4f} kNm")
    print(f"✓ Tip deflection: {results.deflection[-1]:.4f} mm (expected {delta_expected:.4f})")


def test_cantilever_udl():
    """UDL w over a cantilever: R = wL, M = -wL²/2, δ_tip = -wL⁴/(8EI)."""
    L, w = 6.0, 5.0
    config = BeamConfig(L, 200000.0, 5e8)
    results = analyze(
        config,
        [Support("A", SupportType.FIXED, 0.0)],
        [UniformLoad("u", magnitude=w, position=0.0, end_position=L)],
        probe_x=3.0,
    )

    EI = config.flexural_rigidity()
    delta_expected = -(w * 1000) * L**4 / (8 * EI) * 1000

    assert np.isclose(results.reaction("A").force, w * L, rtol=1e-6)
    assert np.isclose(results.reaction("A").moment, -w * L**2 / 2, rtol=1e-6)
    assert np.isclose(results.deflection[-1], delta_expected, rtol=1e-6)
    print(f"✓ Cantilever UDL tip deflection: {results.deflection[-1]:.4f} mm")


def test_cantilever_tip_moment():
    """
    A counter-clockwise couple M0 at the free end bends the beam uniformly:
    no vertical reaction, constant sagging moment equal to the fixed-end
    reaction moment, tip deflection M0·L²/(2EI) upward.
    """
    L, M0 = 4.0, 8.0
    config = BeamConfig(L, 200000.0, 5e8)
    results = analyze(
        config,
        [Support("A", SupportType.FIXED, 0.0)],
        [MomentLoad("m", magnitude=M0, position=L)],
        probe_x=2.0,
    )

    EI = config.flexural_rigidity()
    delta_expected = (M0 * 1000) * L**2 / (2 * EI) * 1000

    assert abs(results.reaction("A").force) < 1e-6
    assert np.isclose(results.reaction("A").moment, M0, rtol=1e-6)
    assert np.isclose(results.deflection[-1], delta_expected, rtol=1e-6)
    # Sagging everywhere, equal to the applied couple
    assert np.allclose(results.bending_moment, M0, rtol=1e-6)
    print(f"✓ Tip moment: uniform M = {M0} kNm, tip deflection {results.deflection[-1]:.4f} mm")
