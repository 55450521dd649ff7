# File: demos/run_influence_lines.py
"""
DEMO: INFLUENCE LINES FOR A PROPPED CANTILEVER WITH AN INTERNAL HINGE
=====================================================================

A 12 m beam, fixed at the left end, with an internal hinge at 4 m and
rollers at 8 m and 12 m. A unit load is moved across the beam and the
engine records, for every load position:

- the reaction at every support
- shear and bending moment at a probe section (x = 6 m)

Reading the plot:
- A reaction line is 1.0 where the load sits directly on that support
- The moment line peaks at the probe
- The shear line jumps by 1.0 as the load crosses the probe
"""

import logging

import matplotlib.pyplot as plt

from mini_beam import BeamConfig, Support, SupportType, analyze


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    config = BeamConfig(length=12.0, elastic_modulus=200000.0, moment_of_inertia=3e8)
    supports = [
        Support("A", SupportType.FIXED, 0.0),
        Support("H", SupportType.HINGE, 4.0),
        Support("B", SupportType.ROLLER, 8.0),
        Support("C", SupportType.ROLLER, 12.0),
    ]
    probe_x = 6.0

    print("=" * 70)
    print("DEMO: INFLUENCE LINES")
    print("=" * 70)

    # No applied loads: only the unit-load sweep is of interest
    results = analyze(config, supports, [], probe_x)

    print(f"Determinacy:   {results.determinacy}")
    print(f"Stable:        {results.is_stable}")
    if not results.is_stable:
        print("Structure is unstable - no influence lines.")
        return

    fig, axes = plt.subplots(3, 1, figsize=(10, 9), sharex=True)

    for support_id, points in results.ild_reactions.items():
        xs = [p.x for p in points]
        vs = [p.value for p in points]
        axes[0].plot(xs, vs, 'o-', markersize=3, label=f"R({support_id})")
        peak = max(points, key=lambda p: abs(p.value))
        print(f"R({support_id}): peak ordinate {peak.value:+.3f} at x={peak.x:.2f} m")
    axes[0].set_ylabel('Reaction / unit load')
    axes[0].legend()
    axes[0].set_title('Reaction Influence Lines')

    xs = [p.x for p in results.ild_shear_at_probe]
    axes[1].plot(xs, [p.value for p in results.ild_shear_at_probe], 'b.-')
    axes[1].set_ylabel('V / unit load')
    axes[1].set_title(f'Shear at x = {probe_x} m')

    axes[2].plot(xs, [p.value for p in results.ild_moment_at_probe], 'r.-')
    axes[2].set_ylabel('M / unit load (m)')
    axes[2].set_xlabel('Unit load position (m)')
    axes[2].set_title(f'Moment at x = {probe_x} m')

    for ax in axes:
        ax.axhline(0.0, color='k', linewidth=0.8)
        ax.axvline(probe_x, color='gray', linestyle='--', linewidth=1)
        ax.grid(True, alpha=0.3)

    plt.tight_layout()
    plt.show()


if __name__ == "__main__":
    main()
