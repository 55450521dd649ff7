import numpy as np

from mini_beam import BeamConfig, Support, SupportType, analyze
from mini_beam.config import AnalysisSettings
from mini_beam.influence import influence_stations
from mini_beam.mesh import closest_node_index


CONFIG = BeamConfig(length=10.0, elastic_modulus=200000.0, moment_of_inertia=5e8)
SIMPLY_SUPPORTED = [
    Support("1", SupportType.PINNED, 0.0),
    Support("2", SupportType.ROLLER, 10.0),
]


def _snapped(results, x):
    """The unit load acts at the mesh node closest to x."""
    return float(results.nodes[closest_node_index(results.nodes, x)])


def test_station_positions():
    xs = influence_stations(10.0, 30)
    assert len(xs) == 31
    assert xs[0] == 0.0
    assert xs[-1] == 10.0
    assert xs[15] == 5.0
    print("✓ 31 stations from 0 to L")


def test_simply_supported_reaction_lines():
    """
    WHAT IS THIS TEST?
    ==================
    Müller-Breslau for a simple span: the influence line of the left
    reaction is the straight line 1 - x/L, of the right reaction x/L.

    The unit load is applied at the mesh node nearest each station, so the
    expected ordinate uses that node's position.
    """
    L = CONFIG.length
    results = analyze(CONFIG, SIMPLY_SUPPORTED, [], probe_x=5.0)

    assert results.is_stable
    assert set(results.ild_reactions) == {"1", "2"}
    assert len(results.ild_reactions["1"]) == 31

    for p1, p2 in zip(results.ild_reactions["1"], results.ild_reactions["2"]):
        x = _snapped(results, p1.x)
        assert np.isclose(p1.value, 1.0 - x / L, atol=1e-6), \
            f"R1 ordinate at x={p1.x}: {p1.value} != {1.0 - x / L}"
        assert np.isclose(p2.value, x / L, atol=1e-6), \
            f"R2 ordinate at x={p2.x}: {p2.value} != {x / L}"
        assert np.isclose(p1.value + p2.value, 1.0, atol=1e-6)
    print("✓ Reaction influence lines are 1 - x/L and x/L")


def test_moment_line_peaks_at_probe():
    """
    Moment at probe a on a simple span:
        x <= a:  M = x (L - a) / L
        x >  a:  M = a (L - x) / L
    Peak a(L - a)/L when the unit load sits on the probe.
    """
    L, a = CONFIG.length, 4.0
    results = analyze(CONFIG, SIMPLY_SUPPORTED, [], probe_x=a)

    for p in results.ild_moment_at_probe:
        x = _snapped(results, p.x)
        expected = x * (L - a) / L if x <= a else a * (L - x) / L
        assert np.isclose(p.value, expected, atol=1e-6), \
            f"Moment ordinate at x={p.x}: {p.value} != {expected}"

    peak = max(results.ild_moment_at_probe, key=lambda p: p.value)
    assert np.isclose(peak.value, a * (L - a) / L, atol=1e-6)
    assert np.isclose(peak.x, a, atol=1e-9)
    print(f"✓ Moment influence line peaks at {peak.value:.3f} m at x={peak.x}")


def test_shear_line_jumps_at_probe():
    """
    Shear at probe a on a simple span:
        load at/left of a:  V = -x/L      (read right of the probe)
        load right of a:    V = 1 - x/L   (read left of the probe)
    The jump as the load crosses the probe is 1 minus the station spacing
    over L.
    """
    L, a = CONFIG.length, 5.0
    results = analyze(CONFIG, SIMPLY_SUPPORTED, [], probe_x=a)
    line = results.ild_shear_at_probe

    for p in line:
        x = _snapped(results, p.x)
        expected = -x / L if p.x <= a else 1.0 - x / L
        assert np.isclose(p.value, expected, atol=1e-6), \
            f"Shear ordinate at x={p.x}: {p.value} != {expected}"

    # Station 15 is exactly on the probe, station 16 just past it
    assert np.isclose(line[15].value, -0.5, atol=1e-6)
    jump = line[16].value - line[15].value
    spacing = line[16].x - line[15].x
    assert np.isclose(jump, 1.0 - spacing / L, atol=0.01), f"Shear jump {jump}"
    print(f"✓ Shear influence line jumps by {jump:.3f} at the probe")


def test_cantilever_reaction_line_is_unity():
    results = analyze(CONFIG, [Support("A", SupportType.FIXED, 0.0)], [], probe_x=0.0)

    values = [p.value for p in results.ild_reactions["A"]]
    assert np.allclose(values, 1.0, atol=1e-6)
    print("✓ Cantilever reaction line is 1 everywhere")


def test_hinge_has_no_reaction_line():
    supports = [
        Support("1", SupportType.FIXED, 0.0),
        Support("h", SupportType.HINGE, 5.0),
        Support("2", SupportType.ROLLER, 10.0),
    ]
    results = analyze(CONFIG, supports, [], probe_x=2.5)

    assert set(results.ild_reactions) == {"1", "2"}
    # Roller picks up nothing while the load is on the cantilever part
    for p in results.ild_reactions["2"]:
        x = _snapped(results, p.x)
        expected = 0.0 if x <= 5.0 else (x - 5.0) / 5.0
        assert np.isclose(p.value, expected, atol=1e-6), \
            f"Roller ordinate at x={p.x}: {p.value} != {expected}"
    print("✓ Gerber beam: roller line is zero up to the hinge, then linear")


def test_unstable_structure_has_empty_lines():
    """
    A single pinned support cannot carry load (2 restraint components < 3).
    The reaction map still lists the support, with no ordinates.
    """
    results = analyze(CONFIG, [Support("1", SupportType.PINNED, 0.0)], [], probe_x=5.0)

    assert not results.is_stable
    assert results.determinacy == -1
    assert results.ild_reactions == {"1": []}
    assert results.ild_shear_at_probe == []
    assert results.ild_moment_at_probe == []
    print("✓ Unstable layout: influence lines skipped")


def test_station_count_follows_settings():
    settings = AnalysisSettings(ild_steps=10)
    results = analyze(CONFIG, SIMPLY_SUPPORTED, [], probe_x=5.0, settings=settings)
    assert len(results.ild_moment_at_probe) == 11
    assert len(results.ild_reactions["2"]) == 11
