# File: demos/run_simply_supported.py
"""
DEMO: SIMPLY SUPPORTED BEAM - DIAGRAMS, REACTIONS, CSV EXPORT
=============================================================

PURPOSE:
--------
Runs the default problem (10 m steel beam, pinned + roller, 10 kN/m UDL)
through analyze() and shows everything the engine returns:

1. Support reactions and the determinacy check
2. Shear force, bending moment and deflection diagrams
3. A CSV export of the per-node diagrams (pandas)

THEORETICAL SOLUTION:
--------------------
For a simply supported beam with UDL w over length L:
- Each support reaction: R = wL/2
- Maximum moment (midspan): M = wL²/8
- Maximum deflection (midspan): δ = 5wL⁴/(384EI)
"""

import logging
from pathlib import Path

import matplotlib.pyplot as plt

from mini_beam import analyze
from mini_beam.presets import default_problem


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 70)
    print("DEMO: SIMPLY SUPPORTED BEAM WITH UNIFORM DISTRIBUTED LOAD")
    print("=" * 70)
    print()

    # ========================================================================
    # STEP 1: DEFINE THE PROBLEM
    # ========================================================================
    config, supports, loads, probe_x = default_problem()
    w = loads[0].magnitude
    L = config.length
    EI = config.flexural_rigidity()

    print("STEP 1: Problem Definition")
    print("-" * 70)
    print(f"Beam length (L):           {L:.2f} m")
    print(f"Elastic modulus (E):       {config.elastic_modulus:.0f} MPa")
    print(f"Moment of inertia (I):     {config.moment_of_inertia:.2e} mm⁴")
    print(f"Flexural rigidity (EI):    {EI:.3e} N·m²")
    print(f"Distributed load (w):      {w:.2f} kN/m (downward)")
    print()

    # ========================================================================
    # STEP 2: ANALYZE
    # ========================================================================
    results = analyze(config, supports, loads, probe_x)

    print("STEP 2: Analysis")
    print("-" * 70)
    print(f"Nodes in mesh:             {len(results.nodes)}")
    print(f"Determinacy:               {results.determinacy}")
    print(f"Stable:                    {results.is_stable}")
    print()

    # ========================================================================
    # STEP 3: COMPARE TO TEXTBOOK ANSWERS
    # ========================================================================
    R_expected = w * L / 2.0
    M_expected = w * L**2 / 8.0
    delta_expected = -5 * (w * 1000) * L**4 / (384 * EI) * 1000  # mm

    print("STEP 3: Verification")
    print("-" * 70)
    for r in results.reactions:
        print(f"{r.label} at x={r.position:.2f} m:     {r.force:8.3f} kN (expected {R_expected:.3f})")
    print(f"Max moment:                {results.max_moment:8.3f} kNm (expected {M_expected:.3f})")
    print(f"Min deflection:            {results.min_deflection:8.3f} mm (expected {delta_expected:.3f})")
    for msg in results.warnings:
        print(f"WARNING: {msg}")
    print()

    # ========================================================================
    # STEP 4: EXPORT
    # ========================================================================
    out_dir = Path("artifacts")
    out_dir.mkdir(exist_ok=True)
    csv_path = out_dir / "simply_supported_diagrams.csv"
    results.to_frame().to_csv(csv_path, index=False)
    print(f"STEP 4: Diagrams written to {csv_path}")
    print()

    # ========================================================================
    # STEP 5: PLOT
    # ========================================================================
    fig, axes = plt.subplots(3, 1, figsize=(10, 9), sharex=True)

    axes[0].plot(results.nodes, results.shear_force, 'b-', linewidth=2)
    axes[0].fill_between(results.nodes, results.shear_force, alpha=0.2)
    axes[0].set_ylabel('Shear (kN)')
    axes[0].set_title('Shear Force Diagram')

    axes[1].plot(results.nodes, results.bending_moment, 'r-', linewidth=2)
    axes[1].fill_between(results.nodes, results.bending_moment, alpha=0.2, color='r')
    axes[1].set_ylabel('Moment (kNm)')
    axes[1].set_title('Bending Moment Diagram')

    axes[2].plot(results.nodes, results.deflection, 'g-', linewidth=2)
    axes[2].set_ylabel('Deflection (mm)')
    axes[2].set_xlabel('Position along beam (m)')
    axes[2].set_title('Deflected Shape')

    for ax in axes:
        ax.axhline(0.0, color='k', linewidth=0.8)
        ax.grid(True, alpha=0.3)
        for s in supports:
            ax.axvline(s.position, color='gray', linestyle=':', linewidth=1)

    plt.tight_layout()
    plot_path = out_dir / "simply_supported_diagrams.png"
    plt.savefig(plot_path, dpi=150)
    print(f"STEP 5: Plot saved to {plot_path}")
    plt.show()


if __name__ == "__main__":
    main()
