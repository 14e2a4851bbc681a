"""
SLoWC Core - Quick Start Example

정면 조우 (head-on) 시나리오의 SLoWC 시계열 계산과 시각화
"""
import argparse

import matplotlib.pyplot as plt
import numpy as np

from slowc_core import FlightTrajectory, SLoWCCalculator
from slowc_core.geometry import KNOTS_TO_FPS, xy_to_lonlat

LON0, LAT0 = -77.0, 38.9


def make_head_on(duration_s=90.0, dt_s=1.0, separation_ft=60000.0,
                 speed_kts=250.0, lateral_offset_ft=1500.0, vertical_offset_ft=200.0):
    """
    Aircraft 1 eastbound, aircraft 2 westbound on a slightly offset track.
    """
    t = np.arange(0.0, duration_s + dt_s, dt_s)
    v_fps = speed_kts * KNOTS_TO_FPS

    x1 = -0.5 * separation_ft + v_fps * t
    x2 = 0.5 * separation_ft - v_fps * t
    ll1 = xy_to_lonlat(x1, np.zeros_like(t), LON0, LAT0)
    ll2 = xy_to_lonlat(x2, np.full_like(t, lateral_offset_ft), LON0, LAT0)

    ac1 = FlightTrajectory(
        timestamp=t,
        longitude=ll1[:, 0],
        latitude=ll1[:, 1],
        altitude=np.full_like(t, 8000.0),
        bearing=np.full_like(t, 90.0),
        velocity=np.full_like(t, speed_kts),
    )
    ac2 = FlightTrajectory(
        timestamp=t,
        longitude=ll2[:, 0],
        latitude=ll2[:, 1],
        altitude=np.full_like(t, 8000.0 + vertical_offset_ft),
        bearing=np.full_like(t, 270.0),
        velocity=np.full_like(t, speed_kts),
    )
    return ac1, ac2


def plot_result(result):
    fig, (ax1, ax2) = plt.subplots(2, 1, sharex=True, figsize=(8, 6))

    ax1.plot(result.timestamp, result.slowc, 'r-', linewidth=2)
    ax1.set_ylabel('SLoWC')
    ax1.set_ylim(-5, 105)
    ax1.grid(True, alpha=0.3)

    ax2.plot(result.timestamp, result.ratios.range_pen, label='RangePen')
    ax2.plot(result.timestamp, result.ratios.hmd_pen, label='HMDPen')
    ax2.plot(result.timestamp, result.ratios.dh_pen, label='DHPen')
    ax2.set_xlabel('Time (s)')
    ax2.set_ylabel('Penetration ratio')
    ax2.legend()
    ax2.grid(True, alpha=0.3)

    plt.tight_layout()
    plt.show()


def main():
    parser = argparse.ArgumentParser(description="SLoWC head-on encounter demo")
    parser.add_argument('--plot', action='store_true', help="show SLoWC and penetration ratios")
    args = parser.parse_args()

    print("=" * 60)
    print("SLoWC Core - Quick Start")
    print("=" * 60)

    # 1. 궤적 생성
    ac1, ac2 = make_head_on()
    print(f"\n[Trajectories] {len(ac1)} samples, "
          f"t = {ac1.timestamp[0]:.0f} ~ {ac1.timestamp[-1]:.0f} s")

    # 2. SLoWC 계산
    calculator = SLoWCCalculator()
    result = calculator.evaluate(ac1, ac2)
    print(f"Origin: lon0={result.context.lon0:.5f}, lat0={result.context.lat0:.5f}")

    # 3. 결과
    print("\n[SLoWC]")
    print(f"{'t (s)':>6} {'R (ft)':>9} {'S (ft)':>9} {'tCPA (s)':>9} {'HMD (ft)':>9} {'SLoWC':>7}")
    g = result.geometry
    for i in range(0, len(ac1), 10):
        print(f"{result.timestamp[i]:6.0f} {g.range[i]:9.0f} {g.hazard_radius[i]:9.0f} "
              f"{g.tcpa[i]:9.1f} {g.hmd[i]:9.0f} {result.slowc[i]:7.2f}")

    t_peak, peak = result.peak()
    print(f"\nPeak SLoWC: {peak:.2f} at t = {t_peak:.0f} s")
    if peak > 0:
        print("⚠️  Loss of Well Clear")
    else:
        print("✓ Well Clear 유지")

    print("\n" + "=" * 60)

    if args.plot:
        plot_result(result)


if __name__ == "__main__":
    main()
